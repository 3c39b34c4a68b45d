"""Filesystem source writer."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from assistcheck.domain.exceptions.emit import EmitError

if TYPE_CHECKING:
    from pathlib import Path

    from assistcheck.domain.model.generated import GeneratedSource

logger = logging.getLogger(__name__)


class DirectorySourceWriter:
    """Writes `<root>/<module path>/<ClassName>.py` per generated source.

    Existing files are overwritten: generated code is never edited by hand.
    """

    def __init__(self, root: Path) -> None:
        if root is None:
            raise TypeError("root must not be None")
        self._root = root

    def path_for(self, source: GeneratedSource) -> Path:
        """Destination file of source."""
        return self._root.joinpath(*source.module.split("."), f"{source.class_name}.py")

    def write(self, source: GeneratedSource) -> None:
        """Write source to disk.

        Raises:
            EmitError: On any filesystem error
        """
        target = self.path_for(source)
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(source.text, encoding="utf-8")
        except OSError as e:
            raise EmitError(target, e.strerror or str(e)) from e
        logger.debug("wrote %s", target)
