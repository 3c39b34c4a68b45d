"""Generated source value object."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class GeneratedSource:
    """Source text of one generated factory implementation.

    Attributes:
        module: Module of the target type; the writer places the file beside it
        class_name: Generated class name
        text: Complete Python source
    """

    module: str
    class_name: str
    text: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.module:
            raise ValueError("module must not be empty")
        if not self.class_name.isidentifier():
            raise ValueError(f"class_name must be an identifier, got {self.class_name!r}")
        if not self.text:
            raise ValueError("text must not be empty")

    @property
    def qualified_name(self) -> str:
        return f"{self.module}.{self.class_name}"
