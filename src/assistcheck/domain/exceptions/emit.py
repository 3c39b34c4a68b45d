"""Code emission exceptions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from assistcheck.domain.exceptions.base import AssistCheckError

if TYPE_CHECKING:
    from pathlib import Path


class EmitError(AssistCheckError):
    """Generated source could not be written.

    Attributes:
        target: Destination that failed
        reason: Error description
    """

    def __init__(self, target: Path | str, reason: str) -> None:
        self.target = target
        self.reason = reason
        super().__init__(f"Cannot write {target}: {reason}")
