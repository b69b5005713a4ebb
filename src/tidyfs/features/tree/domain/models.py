"""Data structures describing directory listings and tree-analysis results."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path


class PathKind(StrEnum):
    """What, if anything, currently lives at a path."""

    ABSENT = "absent"
    FILE = "file"
    DIRECTORY = "directory"

    @property
    def exists(self) -> bool:
        return self is not PathKind.ABSENT


class EntryKind(StrEnum):
    """Resource kind reported for a single directory entry."""

    FILE = "file"
    DIRECTORY = "directory"
    SYMLINK = "symlink"


@dataclass(slots=True, frozen=True)
class DirectoryEntry:
    """One immediate child of a listed directory."""

    path: Path
    kind: EntryKind

    @property
    def is_directory(self) -> bool:
        """Symlinks never count as directories, whatever they point at."""

        return self.kind is EntryKind.DIRECTORY


# Classification of a single directory's immediate children ------------------


@dataclass(slots=True, frozen=True)
class Empty:
    """No entries, or only entries filtered out as hidden."""


@dataclass(slots=True, frozen=True)
class OnlyFiles:
    """At least one file (or symlink) and no subdirectories."""


@dataclass(slots=True, frozen=True)
class OnlyDirectories:
    """Subdirectories and nothing else."""

    directories: tuple[Path, ...]


@dataclass(slots=True, frozen=True)
class FilesAndDirectories:
    """Subdirectories plus at least one direct file."""

    directories: tuple[Path, ...]


DirectoryContents = Empty | OnlyFiles | OnlyDirectories | FilesAndDirectories


# Result of a recursive empty-tree analysis ----------------------------------


@dataclass(slots=True, frozen=True)
class SelfEmpty:
    """The analyzed directory holds no files at any depth."""


@dataclass(slots=True, frozen=True)
class Subpaths:
    """Topmost fully-empty directories found beneath a non-empty root.

    Paths are disjoint: none is a descendant of another.
    """

    paths: tuple[Path, ...] = ()


EmptyDirectoryResult = SelfEmpty | Subpaths


@dataclass(slots=True, frozen=True)
class TraversalFilter:
    """Which entries a content walk hands to its visitor."""

    visit_files: bool = True
    visit_directories: bool = False
    skip_hidden: bool = False


@dataclass(slots=True)
class CompactionReport:
    """Outcome of removing the empty directories beneath ``root``."""

    root: Path
    dry_run: bool
    root_was_empty: bool = False
    removed: list[Path] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.removed)


HiddenPredicate = Callable[[Path], bool]
Visitor = Callable[[Path], object]


__all__ = [
    "PathKind",
    "EntryKind",
    "DirectoryEntry",
    "Empty",
    "OnlyFiles",
    "OnlyDirectories",
    "FilesAndDirectories",
    "DirectoryContents",
    "SelfEmpty",
    "Subpaths",
    "EmptyDirectoryResult",
    "TraversalFilter",
    "CompactionReport",
    "HiddenPredicate",
    "Visitor",
]
