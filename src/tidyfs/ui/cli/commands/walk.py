"""Walk command implementation for the CLI."""

from __future__ import annotations

from pathlib import Path
from typing import final

from rich.console import Console

from tidyfs.application.services import FileManager
from tidyfs.platform.logging import logger
from tidyfs.ui.cli.args.options import WalkArgs


@final
class WalkCommand:
    """Print every visited path, one per line, directories after their contents."""

    def __init__(
        self,
        args: WalkArgs,
        *,
        manager: FileManager | None = None,
        console: Console | None = None,
    ) -> None:
        self.args = args
        self.manager = manager or FileManager.default()
        self.console = console or Console()
        self.visited = 0

    def execute(self) -> int:
        """Execute the command and return the process exit code."""

        found = self.manager.for_each_content(
            self.args.root,
            self._print_path,
            visit_files=self.args.visit_files,
            visit_directories=self.args.visit_directories,
            skip_hidden=self.args.skip_hidden,
        )
        if not found:
            return 1
        logger.debug("Visited %d entries under %s", self.visited, self.args.root)
        return 0

    def _print_path(self, path: Path) -> None:
        self.visited += 1
        if not self.args.quiet:
            self.console.print(str(path), markup=False, highlight=False, soft_wrap=True)
