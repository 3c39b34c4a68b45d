"""Ordered key helpers.

Sets of strings iterate in hash order, which changes between processes.
These helpers keep declaration order so diagnostics are reproducible.
"""

from __future__ import annotations

from collections import Counter
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from assistcheck.domain.model.key import Key


def duplicates(keys: Iterable[Key]) -> tuple[Key, ...]:
    """Keys occurring more than once, each listed once, first-seen order."""
    keys = tuple(keys)
    counts = Counter(keys)
    return tuple(dict.fromkeys(k for k in keys if counts[k] > 1))


def difference(keys: Iterable[Key], other: Iterable[Key]) -> tuple[Key, ...]:
    """Keys of `keys` absent from `other`, deduplicated, first-seen order."""
    excluded = frozenset(other)
    return tuple(dict.fromkeys(k for k in keys if k not in excluded))


def bullet_list(keys: Iterable[Key]) -> str:
    """Render keys as an indented bullet list (`\\n * key` per entry)."""
    return "".join(f"\n * {key}" for key in keys)
