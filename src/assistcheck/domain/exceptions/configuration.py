"""Configuration exceptions."""

from assistcheck.domain.exceptions.base import AssistCheckError


class ConfigurationError(AssistCheckError, ValueError):
    """Invalid processor configuration.

    Inherits ValueError for semantic correctness (bad value supplied).

    Attributes:
        field: Offending configuration field
        reason: Why the value is invalid
    """

    def __init__(self, field: str, reason: str) -> None:
        if not field:
            raise ValueError("field must not be empty")
        if not reason:
            raise ValueError("reason must not be empty")

        self.field = field
        self.reason = reason
        super().__init__(f"Invalid configuration '{field}': {reason}")
