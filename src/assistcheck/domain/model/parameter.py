"""Classified parameter value object."""

from dataclasses import dataclass

from assistcheck.domain.model.key import Key


@dataclass(frozen=True, slots=True)
class Parameter:
    """Parameter classified as assisted or provided.

    Attributes:
        name: Parameter name
        type: Declared type as source text
        qualifier: Qualifier marker, None if unqualified
        is_assisted: Supplied by the factory caller, not the container
    """

    name: str
    type: str
    qualifier: str | None = None
    is_assisted: bool = False

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("parameter name must not be empty")

    @property
    def key(self) -> Key:
        """Matching identity (type + qualifier)."""
        return Key(self.type, self.qualifier)

    def __str__(self) -> str:
        role = "assisted" if self.is_assisted else "provided"
        return f"{self.name}: {self.key} ({role})"
