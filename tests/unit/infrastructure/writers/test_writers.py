"""Tests for infrastructure/writers/."""

from pathlib import Path

import pytest

from assistcheck.domain.exceptions.emit import EmitError
from assistcheck.domain.model.generated import GeneratedSource
from assistcheck.infrastructure.writers.directory import DirectorySourceWriter
from assistcheck.infrastructure.writers.memory import MemorySourceWriter

SOURCE = GeneratedSource(module="app.widgets", class_name="Widget_AssistedFactory", text="x = 1\n")


class TestMemorySourceWriter:
    def test_stores_by_qualified_name(self) -> None:
        writer = MemorySourceWriter()
        writer.write(SOURCE)

        assert writer.sources == {"app.widgets.Widget_AssistedFactory": SOURCE}
        assert len(writer) == 1

    def test_duplicate_raises(self) -> None:
        writer = MemorySourceWriter()
        writer.write(SOURCE)
        with pytest.raises(EmitError, match="already generated"):
            writer.write(SOURCE)


class TestDirectorySourceWriter:
    def test_path_for(self) -> None:
        writer = DirectorySourceWriter(Path("/out"))
        assert writer.path_for(SOURCE) == Path("/out/app/widgets/Widget_AssistedFactory.py")

    def test_writes_file(self, tmp_path: Path) -> None:
        DirectorySourceWriter(tmp_path).write(SOURCE)
        target = tmp_path / "app" / "widgets" / "Widget_AssistedFactory.py"
        assert target.read_text(encoding="utf-8") == "x = 1\n"

    def test_overwrites(self, tmp_path: Path) -> None:
        writer = DirectorySourceWriter(tmp_path)
        writer.write(SOURCE)
        writer.write(GeneratedSource(SOURCE.module, SOURCE.class_name, "y = 2\n"))
        assert writer.path_for(SOURCE).read_text(encoding="utf-8") == "y = 2\n"

    def test_os_error_wrapped(self, tmp_path: Path) -> None:
        blocker = tmp_path / "app"
        blocker.write_text("not a directory", encoding="utf-8")
        with pytest.raises(EmitError):
            DirectorySourceWriter(tmp_path).write(SOURCE)


class TestGeneratedSource:
    def test_invalid_class_name_raises(self) -> None:
        with pytest.raises(ValueError, match="class_name must be an identifier"):
            GeneratedSource(module="m", class_name="not valid", text="x")
