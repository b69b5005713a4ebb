"""
Summary: Partition a directory's immediate children into files and subdirectories.
Why: Feed the empty-tree analysis one fresh, non-recursive classification per level.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import final

from ..domain.models import (
    DirectoryContents,
    Empty,
    FilesAndDirectories,
    HiddenPredicate,
    OnlyDirectories,
    OnlyFiles,
)
from .ports import FilesystemPort

_logger = logging.getLogger(__name__)


@final
class DirectoryScanner:
    """Single-level directory classifier.

    Symbolic links count as files regardless of their target, so the
    analysis never descends through a link.

    ``ignorable`` replaces the filesystem's own hidden-entry policy when
    hidden entries are ignored.
    """

    def __init__(
        self,
        filesystem: FilesystemPort,
        *,
        ignorable: HiddenPredicate | None = None,
    ) -> None:
        self._filesystem = filesystem
        self._ignorable = ignorable

    def scan(self, directory: Path, *, ignore_hidden: bool = True) -> DirectoryContents:
        """Classify the immediate children of ``directory``.

        Raises:
            OSError: The directory could not be listed. Such failures are
                never reported as ``Empty``.
        """

        if ignore_hidden and self._ignorable is not None:
            entries = [
                entry
                for entry in self._filesystem.list_directory(directory, include_hidden=True)
                if not self._ignorable(entry.path)
            ]
        else:
            entries = self._filesystem.list_directory(
                directory,
                include_hidden=not ignore_hidden,
            )

        directories: list[Path] = []
        has_file = False
        for entry in entries:
            if entry.is_directory:
                directories.append(entry.path)
            else:
                has_file = True

        _logger.debug(
            "Scanned %s: %d entries, %d directories",
            directory,
            len(entries),
            len(directories),
            extra={"fs_event": "tree.scan", "directory": str(directory)},
        )

        if not directories:
            return OnlyFiles() if has_file else Empty()
        if has_file:
            return FilesAndDirectories(tuple(sorted(directories)))
        return OnlyDirectories(tuple(sorted(directories)))


__all__ = ["DirectoryScanner"]
