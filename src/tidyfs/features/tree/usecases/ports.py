"""Summary: Port describing the host filesystem operations tidyfs consumes.
Why: Decouple use cases from concrete adapters so tests and swaps stay simple."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Protocol, runtime_checkable

from ..domain.models import DirectoryEntry, PathKind


@runtime_checkable
class FilesystemPort(Protocol):
    """Host filesystem collaborator. Every mutating call raises ``OSError`` on failure."""

    def exists(self, path: Path) -> PathKind:
        """Report what lives at ``path`` without following a final symlink."""
        ...

    def list_directory(
        self,
        path: Path,
        *,
        include_hidden: bool = True,
    ) -> Sequence[DirectoryEntry]:
        """Return the immediate children of ``path`` in lexical name order."""
        ...

    def create_directory(self, path: Path, *, parents: bool = True) -> None:
        """Create ``path`` (and missing parents when requested)."""
        ...

    def remove_item(self, path: Path) -> None:
        """Remove a file, symlink, or a whole directory tree."""
        ...

    def remove_directory(self, path: Path) -> None:
        """Remove ``path`` only if it is an empty directory."""
        ...

    def move_item(self, source: Path, destination: Path) -> None:
        """Move or rename ``source`` to ``destination``."""
        ...

    def copy_item(self, source: Path, destination: Path) -> None:
        """Copy a file or directory tree to ``destination``."""
        ...


__all__ = ["FilesystemPort"]
