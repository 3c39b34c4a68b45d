"""In-memory source writer."""

from __future__ import annotations

from typing import TYPE_CHECKING

from assistcheck.domain.exceptions.emit import EmitError

if TYPE_CHECKING:
    from assistcheck.domain.model.generated import GeneratedSource


class MemorySourceWriter:
    """Keeps generated sources keyed by qualified name (dry runs, tests)."""

    def __init__(self) -> None:
        self._sources: dict[str, GeneratedSource] = {}

    def write(self, source: GeneratedSource) -> None:
        """Store source.

        Raises:
            EmitError: If a source with the same qualified name was already written
        """
        if source.qualified_name in self._sources:
            raise EmitError(source.qualified_name, "already generated in this round")
        self._sources[source.qualified_name] = source

    @property
    def sources(self) -> dict[str, GeneratedSource]:
        return dict(self._sources)

    def __len__(self) -> int:
        return len(self._sources)
