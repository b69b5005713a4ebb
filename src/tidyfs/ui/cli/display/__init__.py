"""Console renderers for CLI command results."""

from tidyfs.ui.cli.display.empty_result import EmptyResultDisplay

__all__ = ["EmptyResultDisplay"]
