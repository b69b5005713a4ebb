"""Domain types for the tree feature."""

from .hidden import DEFAULT_IGNORED_NAMES, is_dotfile, make_hidden_predicate
from .models import (
    CompactionReport,
    DirectoryContents,
    DirectoryEntry,
    Empty,
    EmptyDirectoryResult,
    EntryKind,
    FilesAndDirectories,
    HiddenPredicate,
    OnlyDirectories,
    OnlyFiles,
    PathKind,
    SelfEmpty,
    Subpaths,
    TraversalFilter,
    Visitor,
)

__all__ = [
    "DEFAULT_IGNORED_NAMES",
    "CompactionReport",
    "DirectoryContents",
    "DirectoryEntry",
    "Empty",
    "EmptyDirectoryResult",
    "EntryKind",
    "FilesAndDirectories",
    "HiddenPredicate",
    "OnlyDirectories",
    "OnlyFiles",
    "PathKind",
    "SelfEmpty",
    "Subpaths",
    "TraversalFilter",
    "Visitor",
    "is_dotfile",
    "make_hidden_predicate",
]
