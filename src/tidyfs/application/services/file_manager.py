"""Application façade bundling tidyfs use cases over one filesystem collaborator."""

from __future__ import annotations

import threading
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import ClassVar, final

from tidyfs.config.settings import Settings, load_settings
from tidyfs.features.naming import NamingStrategy, UniquePathResolver
from tidyfs.features.tree import (
    DEFAULT_IGNORED_NAMES,
    CompactionReport,
    ContentWalker,
    DirectoryContents,
    DirectoryEntry,
    DirectoryScanner,
    EmptyDirectoryResult,
    EmptyTreeAnalyzer,
    FilesystemPort,
    PathKind,
    TraversalFilter,
    Visitor,
    classify,
    compact_empty_directories,
)
from tidyfs.platform.filesystem import LocalFilesystem
from tidyfs.shared.cancellation import CancellationToken


@final
class FileManager:
    """Entry point for empty-tree analysis, unique naming and tree walks.

    Plain create/remove/move/copy calls are forwarded to the collaborator
    unchanged. Instances hold no mutable state after construction.
    """

    _default: ClassVar["FileManager | None"] = None
    _default_lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(
        self,
        filesystem: FilesystemPort | None = None,
        *,
        naming_strategy: NamingStrategy | None = None,
        max_rename_attempts: int | None = None,
        ignore_hidden: bool = True,
        ignored_names: Iterable[str] = DEFAULT_IGNORED_NAMES,
    ) -> None:
        self._filesystem = filesystem or LocalFilesystem()
        self._ignore_hidden = ignore_hidden
        self._ignored_names = tuple(ignored_names)
        self._scanner = DirectoryScanner(self._filesystem)
        self._analyzer = EmptyTreeAnalyzer(self._filesystem, scanner=self._scanner)
        self._walker = ContentWalker(self._filesystem)
        self._resolver = UniquePathResolver(
            self._filesystem,
            naming_strategy=naming_strategy,
            max_attempts=max_rename_attempts,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "FileManager":
        """Build a manager on the local filesystem configured by ``settings``."""

        return cls(
            LocalFilesystem(hidden_predicate=settings.hidden_predicate()),
            naming_strategy=settings.naming_strategy(),
            max_rename_attempts=settings.max_rename_attempts,
            ignore_hidden=settings.ignore_hidden,
            ignored_names=settings.ignored_names,
        )

    @classmethod
    def default(cls) -> "FileManager":
        """Return the process-wide manager bound to the local filesystem."""

        if cls._default is None:
            with cls._default_lock:
                if cls._default is None:
                    cls._default = cls.from_settings(load_settings())
        return cls._default

    @property
    def filesystem(self) -> FilesystemPort:
        return self._filesystem

    # Pass-through -------------------------------------------------------

    def exists(self, path: Path) -> PathKind:
        return classify(self._filesystem, path)

    def contents_of_directory(
        self, path: Path, *, include_hidden: bool = True
    ) -> Sequence[DirectoryEntry]:
        return self._filesystem.list_directory(path, include_hidden=include_hidden)

    def create_directory(self, path: Path, *, parents: bool = True) -> None:
        self._filesystem.create_directory(path, parents=parents)

    def remove_item(self, path: Path) -> None:
        self._filesystem.remove_item(path)

    def move_item(self, source: Path, destination: Path) -> None:
        self._filesystem.move_item(source, destination)

    def copy_item(self, source: Path, destination: Path) -> None:
        self._filesystem.copy_item(source, destination)

    # Tree analysis ------------------------------------------------------

    def scan_directory(
        self, directory: Path, *, ignore_hidden: bool | None = None
    ) -> DirectoryContents:
        return self._scanner.scan(directory, ignore_hidden=self._hidden_flag(ignore_hidden))

    def search_empty_directories(
        self,
        root: Path,
        *,
        ignore_hidden: bool | None = None,
        cancel: CancellationToken | None = None,
    ) -> EmptyDirectoryResult:
        """See ``EmptyTreeAnalyzer.analyze``."""

        return self._analyzer.analyze(
            root, ignore_hidden=self._hidden_flag(ignore_hidden), cancel=cancel
        )

    def compact_empty_directories(
        self,
        root: Path,
        *,
        ignore_hidden: bool | None = None,
        include_root: bool = False,
        dry_run: bool = False,
        cancel: CancellationToken | None = None,
    ) -> CompactionReport:
        """See ``compact_empty_directories``."""

        return compact_empty_directories(
            self._filesystem,
            root,
            ignore_hidden=self._hidden_flag(ignore_hidden),
            ignored_names=self._ignored_names,
            include_root=include_root,
            dry_run=dry_run,
            cancel=cancel,
        )

    def for_each_content(
        self,
        root: Path,
        visitor: Visitor,
        *,
        visit_files: bool = True,
        visit_directories: bool = False,
        skip_hidden: bool = False,
        cancel: CancellationToken | None = None,
    ) -> bool:
        """See ``ContentWalker.walk``."""

        traversal = TraversalFilter(
            visit_files=visit_files,
            visit_directories=visit_directories,
            skip_hidden=skip_hidden,
        )
        return self._walker.walk(root, visitor, traversal, cancel=cancel)

    # Collision-safe naming ----------------------------------------------

    def make_unique_path(
        self, desired: Path, naming_strategy: NamingStrategy | None = None
    ) -> Path:
        return self._resolver.resolve(desired, naming_strategy)

    def move_and_auto_rename(
        self,
        source: Path,
        desired: Path,
        naming_strategy: NamingStrategy | None = None,
    ) -> Path:
        return self._resolver.move_with_auto_rename(source, desired, naming_strategy)

    def copy_and_auto_rename(
        self,
        source: Path,
        desired: Path,
        naming_strategy: NamingStrategy | None = None,
    ) -> Path:
        return self._resolver.copy_with_auto_rename(source, desired, naming_strategy)

    def _hidden_flag(self, ignore_hidden: bool | None) -> bool:
        return self._ignore_hidden if ignore_hidden is None else ignore_hidden


__all__ = ["FileManager"]
