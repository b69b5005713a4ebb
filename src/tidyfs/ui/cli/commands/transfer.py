"""Move, copy and unique-path commands for the CLI."""

from __future__ import annotations

from pathlib import Path
from typing import final

from rich.console import Console

from tidyfs.application.services import FileManager
from tidyfs.features.naming import NamingStrategy, pattern_strategy
from tidyfs.ui.cli.args.options import TransferArgs, UniqueArgs


def _strategy_for(pattern: str | None) -> NamingStrategy | None:
    return pattern_strategy(pattern) if pattern else None


@final
class TransferCommand:
    """Move or copy a path, auto-renaming when the destination is taken."""

    def __init__(
        self,
        args: TransferArgs,
        *,
        manager: FileManager | None = None,
        console: Console | None = None,
    ) -> None:
        self.args = args
        self.manager = manager or FileManager.default()
        self.console = console or Console()

    def execute(self) -> int:
        """Execute the command and return the process exit code."""

        destination = self._desired_destination()
        self.manager.create_directory(destination.parent)

        strategy = _strategy_for(self.args.pattern)
        if self.args.command == "move":
            final_path = self.manager.move_and_auto_rename(self.args.source, destination, strategy)
        else:
            final_path = self.manager.copy_and_auto_rename(self.args.source, destination, strategy)

        if not self.args.quiet:
            self.console.print(str(final_path), markup=False, highlight=False, soft_wrap=True)
        return 0

    def _desired_destination(self) -> Path:
        # An existing directory destination receives the source by name, like mv/cp.
        destination = self.args.destination
        if destination.is_dir() and not destination.is_symlink():
            return destination / self.args.source.name
        return destination


@final
class UniqueCommand:
    """Print the path a move to ``args.path`` would end up at."""

    def __init__(
        self,
        args: UniqueArgs,
        *,
        manager: FileManager | None = None,
        console: Console | None = None,
    ) -> None:
        self.args = args
        self.manager = manager or FileManager.default()
        self.console = console or Console()

    def execute(self) -> int:
        resolved = self.manager.make_unique_path(self.args.path, _strategy_for(self.args.pattern))
        self.console.print(str(resolved), markup=False, highlight=False, soft_wrap=True)
        return 0
