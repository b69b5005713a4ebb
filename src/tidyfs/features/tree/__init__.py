"""
Summary: Public API for directory-tree analysis.
Why: Provide a single import surface for the tree feature.
"""

from .domain import (
    DEFAULT_IGNORED_NAMES,
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
    is_dotfile,
    make_hidden_predicate,
)
from .usecases import (
    ContentWalker,
    DirectoryScanner,
    EmptyTreeAnalyzer,
    FilesystemPort,
    classify,
    compact_empty_directories,
)

__all__ = [
    "DEFAULT_IGNORED_NAMES",
    "CompactionReport",
    "ContentWalker",
    "DirectoryContents",
    "DirectoryEntry",
    "DirectoryScanner",
    "Empty",
    "EmptyDirectoryResult",
    "EmptyTreeAnalyzer",
    "EntryKind",
    "FilesAndDirectories",
    "FilesystemPort",
    "HiddenPredicate",
    "OnlyDirectories",
    "OnlyFiles",
    "PathKind",
    "SelfEmpty",
    "Subpaths",
    "TraversalFilter",
    "Visitor",
    "classify",
    "compact_empty_directories",
    "is_dotfile",
    "make_hidden_predicate",
]
