"""AST-based symbol source.

Builds an InMemorySymbolModel from Python source files. Only classes
declared at module level or inside other classes are indexed; classes
defined inside function bodies are invisible to the pipeline.
"""

from __future__ import annotations

import ast
import logging
from pathlib import Path

from assistcheck.domain.exceptions.parsing import ParsingError
from assistcheck.domain.model.configuration import ProcessorConfig
from assistcheck.domain.model.elements import TypeDecl
from assistcheck.infrastructure.analyzers.base import compute_module_name
from assistcheck.infrastructure.analyzers.class_analyzer import ClassAnalyzer
from assistcheck.infrastructure.symbols.in_memory import InMemorySymbolModel

logger = logging.getLogger(__name__)

SKIPPED_DIRECTORIES = frozenset({"__pycache__", ".git", ".venv", "venv", "node_modules"})


class AstSymbolSource:
    """Parser producing symbol snapshots from source trees.

    Stateless between parse calls.
    FAIL-FIRST: raises ParsingError on any unreadable or invalid file.
    """

    def __init__(self, root_path: Path, config: ProcessorConfig | None = None) -> None:
        """Initialize parser with root path.

        Args:
            root_path: Root path for computing module names
            config: Marker configuration. Uses defaults if None.

        Raises:
            TypeError: If root_path is None
        """
        if root_path is None:
            raise TypeError("root_path must not be None")

        self._root_path = root_path
        self._class_analyzer = ClassAnalyzer(config or ProcessorConfig())

    def parse_source(self, source: str, module_name: str, path: Path) -> tuple[TypeDecl, ...]:
        """Parse source text into top-level type declarations.

        Args:
            source: Python source text
            module_name: Fully qualified module name
            path: Path reported in locations

        Raises:
            ParsingError: On syntax errors
        """
        try:
            tree = ast.parse(source, filename=str(path))
        except SyntaxError as e:
            raise ParsingError(path, f"syntax error: {e}") from e

        return tuple(
            self._class_analyzer.analyze(node, path, module_name)
            for node in tree.body
            if isinstance(node, ast.ClassDef)
        )

    def parse_file(self, path: Path) -> tuple[TypeDecl, ...]:
        """Parse single Python file.

        Raises:
            ParsingError: If file cannot be read or parsed
        """
        try:
            source = path.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise ParsingError(path, "file not found") from e
        except PermissionError as e:
            raise ParsingError(path, "permission denied") from e
        except UnicodeDecodeError as e:
            raise ParsingError(path, f"encoding error: {e}") from e

        module_name = compute_module_name(path, self._root_path)
        return self.parse_source(source, module_name, path)

    def parse_directory(self, path: Path) -> InMemorySymbolModel:
        """Parse every .py file under path into one symbol model.

        Files are visited in sorted order so rounds are reproducible.

        Raises:
            ParsingError: If any file cannot be parsed
        """
        if not path.is_dir():
            raise ParsingError(path, "not a directory")

        types: list[TypeDecl] = []
        files = 0
        for file_path in sorted(path.rglob("*.py")):
            if SKIPPED_DIRECTORIES.intersection(file_path.relative_to(path).parts):
                continue
            types.extend(self.parse_file(file_path))
            files += 1

        logger.debug("parsed %d file(s) under %s: %d top-level type(s)", files, path, len(types))
        return InMemorySymbolModel(types)

    def parse(self, path: Path) -> InMemorySymbolModel:
        """Parse a file or a directory."""
        if path.is_dir():
            return self.parse_directory(path)
        return InMemorySymbolModel(self.parse_file(path))
