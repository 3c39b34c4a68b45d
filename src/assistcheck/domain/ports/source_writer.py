"""Source writer protocol."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from assistcheck.domain.model.generated import GeneratedSource


class SourceWriterPort(Protocol):
    """Persists generated source (filesystem, memory, ...)."""

    def write(self, source: GeneratedSource) -> None:
        """Persist source.

        Raises:
            EmitError: If the source cannot be written
        """
        ...
