"""Diagnostic value object."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from assistcheck.domain.model.enums import Severity
    from assistcheck.domain.model.location import Location


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Message handed to a diagnostic sink.

    Attributes:
        severity: ERROR/WARNING/INFO (the pipeline only emits ERROR)
        message: Human-readable message, may span several lines
        location: Source location, None when unknown
        subject: Qualified name of the offending symbol, None when unknown
    """

    severity: Severity
    message: str
    location: Location | None = None
    subject: str | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.message:
            raise ValueError("message must not be empty")

    def __str__(self) -> str:
        """Format as `location: severity: message`."""
        where = str(self.location) if self.location else (self.subject or "<unknown>")
        return f"{where}: {self.severity.name.lower()}: {self.message}"
