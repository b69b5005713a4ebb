"""
Summary: Recursive empty-directory detection and compaction over a tree.
Why: Report only the topmost fully-empty directories so callers can prune them in one pass.
"""

from __future__ import annotations

import errno
import logging
from collections.abc import Iterable
from pathlib import Path
from typing import final

from tidyfs.shared.cancellation import CancellationToken, check_cancelled

from ..domain.hidden import DEFAULT_IGNORED_NAMES, make_hidden_predicate
from ..domain.models import (
    CompactionReport,
    EmptyDirectoryResult,
    Empty,
    FilesAndDirectories,
    HiddenPredicate,
    OnlyDirectories,
    OnlyFiles,
    PathKind,
    SelfEmpty,
    Subpaths,
    TraversalFilter,
)
from .classifier import classify
from .ports import FilesystemPort
from .scanner import DirectoryScanner
from .walker import ContentWalker

_logger = logging.getLogger(__name__)


@final
class EmptyTreeAnalyzer:
    """Classify a directory tree bottom-up.

    The analysis recurses once per directory level, so trees deeper than
    ``sys.getrecursionlimit()`` raise ``RecursionError``.
    """

    def __init__(
        self,
        filesystem: FilesystemPort,
        *,
        scanner: DirectoryScanner | None = None,
    ) -> None:
        self._scanner = scanner or DirectoryScanner(filesystem)

    def analyze(
        self,
        root: Path,
        *,
        ignore_hidden: bool = True,
        cancel: CancellationToken | None = None,
    ) -> EmptyDirectoryResult:
        """Return ``SelfEmpty`` or the topmost empty directories beneath ``root``.

        A chain of nested empty directories collapses to its topmost member.
        A directory with a direct file is never ``SelfEmpty`` itself, but its
        empty subdirectories are still reported.

        Raises:
            OSError: Any directory in the tree could not be listed. No partial
                result is returned.
            OperationCancelledError: ``cancel`` was tripped mid-analysis.
        """

        check_cancelled(cancel)
        contents = self._scanner.scan(root, ignore_hidden=ignore_hidden)

        match contents:
            case Empty():
                return SelfEmpty()
            case OnlyFiles():
                return Subpaths()
            case OnlyDirectories(directories=directories):
                found, all_empty = self._analyze_children(
                    directories, ignore_hidden=ignore_hidden, cancel=cancel
                )
                if all_empty:
                    return SelfEmpty()
                return Subpaths(tuple(found))
            case FilesAndDirectories(directories=directories):
                found, _ = self._analyze_children(
                    directories, ignore_hidden=ignore_hidden, cancel=cancel
                )
                return Subpaths(tuple(found))

    def _analyze_children(
        self,
        directories: tuple[Path, ...],
        *,
        ignore_hidden: bool,
        cancel: CancellationToken | None,
    ) -> tuple[list[Path], bool]:
        found: list[Path] = []
        all_empty = True
        for directory in directories:
            result = self.analyze(directory, ignore_hidden=ignore_hidden, cancel=cancel)
            match result:
                case SelfEmpty():
                    found.append(directory)
                case Subpaths(paths=paths):
                    all_empty = False
                    found.extend(paths)
        return found, all_empty


def compact_empty_directories(
    filesystem: FilesystemPort,
    root: Path,
    *,
    ignore_hidden: bool = True,
    ignored_names: Iterable[str] = DEFAULT_IGNORED_NAMES,
    include_root: bool = False,
    dry_run: bool = False,
    cancel: CancellationToken | None = None,
) -> CompactionReport:
    """Remove every topmost empty directory beneath ``root``.

    Only entries named in ``ignored_names`` (desktop metadata such as
    ``.DS_Store``) count as disposable. Other dotfiles and dot-directories
    are user content here, whatever the filesystem's hidden-entry policy,
    so a directory holding ``.env`` or ``.git`` is never reported or removed.

    Each target is emptied bottom-up: disposable files are unlinked and
    directories are removed with ``remove_directory``, which refuses to
    delete anything still holding content. ``root`` itself is only removed
    when it is empty and ``include_root`` is set. The first removal failure
    aborts with ``OSError``.
    """

    is_disposable = make_hidden_predicate(ignored_names, include_dotfiles=False)
    scanner = DirectoryScanner(filesystem, ignorable=is_disposable)
    result = EmptyTreeAnalyzer(filesystem, scanner=scanner).analyze(
        root, ignore_hidden=ignore_hidden, cancel=cancel
    )
    report = CompactionReport(root=root, dry_run=dry_run)

    match result:
        case SelfEmpty():
            report.root_was_empty = True
            targets = [root] if include_root else []
        case Subpaths(paths=paths):
            targets = list(paths)

    for target in targets:
        if dry_run:
            _logger.info(
                "Dry run: would remove empty directory %s",
                target,
                extra={
                    "fs_event": "cleanup.plan",
                    "source_path": str(target),
                    "source_base_path": str(root),
                },
            )
        else:
            _remove_empty_tree(
                filesystem,
                target,
                is_disposable if ignore_hidden else _nothing_disposable,
                cancel,
            )
            _logger.info(
                "Removed empty directory %s",
                target,
                extra={
                    "fs_event": "cleanup.remove",
                    "source_path": str(target),
                    "source_base_path": str(root),
                },
            )
        report.removed.append(target)

    return report


def _nothing_disposable(_path: Path) -> bool:
    return False


def _remove_empty_tree(
    filesystem: FilesystemPort,
    target: Path,
    is_disposable: HiddenPredicate,
    cancel: CancellationToken | None,
) -> None:
    def _remove(path: Path) -> None:
        if classify(filesystem, path) is PathKind.DIRECTORY:
            filesystem.remove_directory(path)
        elif is_disposable(path):
            filesystem.remove_item(path)
        else:
            raise OSError(errno.ENOTEMPTY, "Refusing to delete non-disposable entry", str(path))

    # Post-order: every directory is already empty when it is handed over.
    _ = ContentWalker(filesystem).walk(
        target,
        _remove,
        TraversalFilter(visit_files=True, visit_directories=True),
        cancel=cancel,
    )


__all__ = ["EmptyTreeAnalyzer", "compact_empty_directories"]
