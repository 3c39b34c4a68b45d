"""Parsing exceptions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from assistcheck.domain.exceptions.base import AssistCheckError

if TYPE_CHECKING:
    from pathlib import Path


class ParsingError(AssistCheckError):
    """Source file could not be read or parsed into symbols.

    Attributes:
        path: File that failed to parse
        reason: Why parsing failed
    """

    def __init__(self, path: Path, reason: str) -> None:
        # FAIL-FIRST: validate required parameters
        if path is None:
            raise TypeError("path must not be None")
        if not reason:
            raise ValueError("reason must be non-empty string")

        self.path = path
        self.reason = reason
        super().__init__(f"Failed to parse {path}: {reason}")
