"""Binding key value object."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Key:
    """Identity of a parameter for matching: declared type plus qualifier.

    Two keys are equal iff type and qualifier are equal. Used in sets
    and dicts throughout key matching.

    Attributes:
        type: Declared type as source text
        qualifier: Qualifier marker as source text, None if unqualified
    """

    type: str
    qualifier: str | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.type:
            raise ValueError("key type must not be empty")
        if self.qualifier is not None and not self.qualifier:
            raise ValueError("qualifier must be non-empty string or None")

    def __str__(self) -> str:
        """Format as it would be written in a signature."""
        if self.qualifier is None:
            return self.type
        return f"Annotated[{self.type}, {self.qualifier}]"
