"""Tree analysis use cases: classification, scanning, emptiness and walking."""

from .classifier import classify
from .empty_tree import EmptyTreeAnalyzer, compact_empty_directories
from .ports import FilesystemPort
from .scanner import DirectoryScanner
from .walker import ContentWalker

__all__ = [
    "ContentWalker",
    "DirectoryScanner",
    "EmptyTreeAnalyzer",
    "FilesystemPort",
    "classify",
    "compact_empty_directories",
]
