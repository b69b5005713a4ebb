"""Display utilities for empty-directory analysis and pruning."""

from __future__ import annotations

from pathlib import Path
from typing import final

from rich.console import Console
from rich.markup import escape

from tidyfs.features.tree import CompactionReport, EmptyDirectoryResult, SelfEmpty, Subpaths


def _relative(path: Path, root: Path) -> str:
    try:
        relative = path.relative_to(root)
    except ValueError:
        return str(path)
    return str(relative) if str(relative) != "." else str(path)


@final
class EmptyResultDisplay:
    """Render empty-directory findings in the CLI."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def show_analysis(self, root: Path, result: EmptyDirectoryResult, *, quiet: bool = False) -> None:
        """Print the outcome of a read-only analysis."""

        if quiet:
            return

        match result:
            case SelfEmpty():
                self.console.print(f"[yellow]{escape(str(root))} contains no files at any depth.[/yellow]")
            case Subpaths(paths=()):
                self.console.print("[green]No empty directories found.[/green]")
            case Subpaths(paths=paths):
                self.console.print(f"\n[bold]Empty directories ({len(paths)}):[/bold]")
                for path in paths:
                    self.console.print(f"  • {_relative(path, root)}", markup=False, highlight=False)

    def show_compaction(self, report: CompactionReport, *, quiet: bool = False) -> None:
        """Print a summary of a pruning run."""

        if quiet:
            return

        verb = "Would remove" if report.dry_run else "Removed"
        self.console.print("\n[bold]Prune Summary:[/bold]")
        if report.root_was_empty and not report.removed:
            self.console.print(
                f"[yellow]{escape(str(report.root))} is itself empty; pass --include-root to remove it.[/yellow]"
            )
            return
        self.console.print(f"[green]{verb}: {report.count}[/green]")
        for path in report.removed:
            self.console.print(f"  • {_relative(path, report.root)}", markup=False, highlight=False)


__all__ = ["EmptyResultDisplay"]
