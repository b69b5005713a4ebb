"""Filesystem adapter implementing ``FilesystemPort`` on the local host."""

from __future__ import annotations

import os
import shutil
import stat
from pathlib import Path

from tidyfs.features.tree.domain.hidden import DEFAULT_IGNORED_NAMES, make_hidden_predicate
from tidyfs.features.tree.domain.models import (
    DirectoryEntry,
    EntryKind,
    HiddenPredicate,
    PathKind,
)
from tidyfs.features.tree.usecases.ports import FilesystemPort

from .helpers import ensure_directory


class LocalFilesystem(FilesystemPort):
    """Thin wrapper around ``os``, ``shutil`` and ``pathlib``.

    ``hidden_predicate`` decides which entries ``list_directory`` drops when
    called with ``include_hidden=False``. It defaults to dotfiles plus common
    desktop metadata files.
    """

    def __init__(self, hidden_predicate: HiddenPredicate | None = None) -> None:
        self._is_hidden = hidden_predicate or make_hidden_predicate(DEFAULT_IGNORED_NAMES)

    def exists(self, path: Path) -> PathKind:
        try:
            mode = path.lstat().st_mode
        except (FileNotFoundError, NotADirectoryError):
            return PathKind.ABSENT
        if stat.S_ISDIR(mode):
            return PathKind.DIRECTORY
        return PathKind.FILE

    def list_directory(
        self,
        path: Path,
        *,
        include_hidden: bool = True,
    ) -> list[DirectoryEntry]:
        entries: list[DirectoryEntry] = []
        # scandir reports entry types from the directory read itself, so no
        # extra stat per child is needed on common filesystems.
        with os.scandir(path) as iterator:
            for item in iterator:
                entry_path = Path(item.path)
                if not include_hidden and self._is_hidden(entry_path):
                    continue
                if item.is_symlink():
                    kind = EntryKind.SYMLINK
                elif item.is_dir(follow_symlinks=False):
                    kind = EntryKind.DIRECTORY
                else:
                    kind = EntryKind.FILE
                entries.append(DirectoryEntry(path=entry_path, kind=kind))

        entries.sort(key=lambda entry: entry.path.name)
        return entries

    def create_directory(self, path: Path, *, parents: bool = True) -> None:
        if parents:
            _ = ensure_directory(path)
        else:
            path.mkdir()

    def remove_item(self, path: Path) -> None:
        if self.exists(path) is PathKind.DIRECTORY:
            shutil.rmtree(path)
        else:
            path.unlink()

    def remove_directory(self, path: Path) -> None:
        path.rmdir()

    def move_item(self, source: Path, destination: Path) -> None:
        self._refuse_existing(destination)
        _ = shutil.move(str(source), str(destination))

    def copy_item(self, source: Path, destination: Path) -> None:
        self._refuse_existing(destination)
        if self.exists(source) is PathKind.DIRECTORY:
            _ = shutil.copytree(source, destination, symlinks=True)
        else:
            _ = shutil.copy2(source, destination, follow_symlinks=False)

    def _refuse_existing(self, destination: Path) -> None:
        # shutil.move would otherwise nest the source inside an existing directory.
        if self.exists(destination).exists:
            raise FileExistsError(f"Destination already exists: {destination}")


__all__ = ["LocalFilesystem"]
