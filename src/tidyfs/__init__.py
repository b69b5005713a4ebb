"""tidyfs: empty-directory compaction, collision-safe renaming and tree walks."""

from tidyfs.application.services import FileManager
from tidyfs.features.naming import UniquePathResolver, numbered_suffix, pattern_strategy
from tidyfs.features.tree import (
    CompactionReport,
    ContentWalker,
    DirectoryScanner,
    EmptyTreeAnalyzer,
    PathKind,
    SelfEmpty,
    Subpaths,
    TraversalFilter,
)
from tidyfs.platform.filesystem import LocalFilesystem
from tidyfs.shared import (
    CancellationToken,
    OperationCancelledError,
    ResolutionExhaustedError,
    TidyFsError,
)

__version__ = "0.1.0"

__all__ = [
    "CancellationToken",
    "CompactionReport",
    "ContentWalker",
    "DirectoryScanner",
    "EmptyTreeAnalyzer",
    "FileManager",
    "LocalFilesystem",
    "OperationCancelledError",
    "PathKind",
    "ResolutionExhaustedError",
    "SelfEmpty",
    "Subpaths",
    "TidyFsError",
    "TraversalFilter",
    "UniquePathResolver",
    "numbered_suffix",
    "pattern_strategy",
]
