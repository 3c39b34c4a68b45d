"""Validation failure value object."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from assistcheck.domain.model.diagnostic import Diagnostic
from assistcheck.domain.model.enums import FailureKind, Severity

if TYPE_CHECKING:
    from assistcheck.domain.model.elements import ExecutableDecl, TypeDecl
    from assistcheck.domain.model.location import Location


@dataclass(frozen=True, slots=True)
class ValidationFailure:
    """Terminal failure of one candidate.

    Returned (not raised) by every resolution step. The driver reports
    it and moves on to the next candidate.

    Attributes:
        kind: Taxonomy bucket
        message: Human-readable message
        element: Most specific offending declaration
    """

    kind: FailureKind
    message: str
    element: TypeDecl | ExecutableDecl

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.message:
            raise ValueError("message must not be empty")
        if self.element is None:
            raise TypeError("element must not be None")

    @property
    def location(self) -> Location | None:
        """Source location of the offending declaration."""
        return self.element.location

    def to_diagnostic(self) -> Diagnostic:
        """Convert to an ERROR diagnostic pointing at the offending element."""
        return Diagnostic(
            severity=Severity.ERROR,
            message=self.message,
            location=self.location,
            subject=self.element.qualified_name,
        )
