"""
Summary: Single depth-first walk dispatching files and directories to a visitor.
Why: Give callers one traversal primitive with post-order directory visits.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path
from typing import final

from tidyfs.shared.cancellation import CancellationToken, check_cancelled

from ..domain.models import DirectoryEntry, PathKind, TraversalFilter, Visitor
from .classifier import classify
from .ports import FilesystemPort

_logger = logging.getLogger(__name__)


@final
class ContentWalker:
    """Walk every descendant of a root once, in lexical depth-first order.

    Directories (the root included) are handed to the visitor only after all
    of their contents, so a visitor may safely delete what it is given.
    Symlinks are visited as files and never followed. The walk keeps an
    explicit stack instead of recursing, so tree depth is not bounded by the
    interpreter's recursion limit.
    """

    def __init__(self, filesystem: FilesystemPort) -> None:
        self._filesystem = filesystem

    def walk(
        self,
        root: Path,
        visitor: Visitor,
        traversal: TraversalFilter | None = None,
        *,
        cancel: CancellationToken | None = None,
    ) -> bool:
        """Visit ``root`` and its descendants according to ``traversal``.

        Returns:
            bool: ``False`` when ``root`` does not exist or cannot be
            classified, ``True`` otherwise.

        Raises:
            OSError: A directory below ``root`` could not be listed.
            Exception: Anything raised by ``visitor`` stops the walk and is
                propagated unchanged.
        """

        traversal = traversal or TraversalFilter()

        try:
            kind = classify(self._filesystem, root)
        except OSError as exc:
            _logger.warning(
                "Cannot classify walk root %s: %s",
                root,
                exc,
                extra={"fs_event": "walk.missing_root", "source_path": str(root)},
            )
            return False

        if kind is PathKind.ABSENT:
            _logger.warning(
                "Walk root does not exist: %s",
                root,
                extra={"fs_event": "walk.missing_root", "source_path": str(root)},
            )
            return False

        if kind is PathKind.FILE:
            if traversal.visit_files:
                _ = visitor(root)
            return True

        self._walk_directory(root, visitor, traversal, cancel)
        return True

    def _walk_directory(
        self,
        root: Path,
        visitor: Visitor,
        traversal: TraversalFilter,
        cancel: CancellationToken | None,
    ) -> None:
        stack: list[tuple[Path, Iterator[DirectoryEntry]]] = [
            (root, self._children(root, traversal, cancel))
        ]

        while stack:
            directory, children = stack[-1]
            entry = next(children, None)

            if entry is None:
                _ = stack.pop()
                if traversal.visit_directories:
                    _ = visitor(directory)
                continue

            if entry.is_directory:
                stack.append((entry.path, self._children(entry.path, traversal, cancel)))
            elif traversal.visit_files:
                _ = visitor(entry.path)

    def _children(
        self,
        directory: Path,
        traversal: TraversalFilter,
        cancel: CancellationToken | None,
    ) -> Iterator[DirectoryEntry]:
        check_cancelled(cancel)
        entries = self._filesystem.list_directory(
            directory,
            include_hidden=not traversal.skip_hidden,
        )
        return iter(sorted(entries, key=lambda entry: entry.path.name))


__all__ = ["ContentWalker"]
