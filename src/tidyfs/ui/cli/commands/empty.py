"""Empty-directory command implementation for the CLI."""

from __future__ import annotations

from typing import final

from tidyfs.application.services import FileManager
from tidyfs.ui.cli.args.options import EmptyArgs
from tidyfs.ui.cli.display.empty_result import EmptyResultDisplay


@final
class EmptyCommand:
    """Report empty directories beneath a root, optionally pruning them."""

    def __init__(
        self,
        args: EmptyArgs,
        *,
        manager: FileManager | None = None,
        display: EmptyResultDisplay | None = None,
    ) -> None:
        self.args = args
        self.manager = manager or FileManager.default()
        self.display = display or EmptyResultDisplay()

    def execute(self) -> int:
        """Execute the command and return the process exit code."""

        if self.args.prune:
            report = self.manager.compact_empty_directories(
                self.args.root,
                ignore_hidden=self.args.ignore_hidden,
                include_root=self.args.include_root,
                dry_run=self.args.dry_run,
            )
            self.display.show_compaction(report, quiet=self.args.quiet)
            return 0

        result = self.manager.search_empty_directories(
            self.args.root,
            ignore_hidden=self.args.ignore_hidden,
        )
        self.display.show_analysis(self.args.root, result, quiet=self.args.quiet)
        return 0
