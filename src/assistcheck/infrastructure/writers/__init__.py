"""Generated source writers."""

from assistcheck.infrastructure.writers.directory import DirectorySourceWriter
from assistcheck.infrastructure.writers.memory import MemorySourceWriter

__all__ = ["DirectorySourceWriter", "MemorySourceWriter"]
