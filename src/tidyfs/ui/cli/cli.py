"""Command line interface for tidyfs."""

import sys
from typing import final

from tidyfs.platform.logging import logger
from tidyfs.ui.cli.args import ArgumentParser
from tidyfs.ui.cli.args.options import (
    CLIArgs,
    EmptyArgs,
    InitConfigArgs,
    TransferArgs,
    UniqueArgs,
    WalkArgs,
)
from tidyfs.ui.cli.commands import (
    EmptyCommand,
    InitConfigCommand,
    TransferCommand,
    UniqueCommand,
    WalkCommand,
)


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments and exit non-zero on failure.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args = ArgumentParser.process_args(args_list)
            exit_code = CommandProcessor._dispatch(args)
        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(130)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(1)

        if exit_code:
            sys.exit(exit_code)

    @staticmethod
    def _dispatch(args: CLIArgs) -> int:
        match args:
            case EmptyArgs():
                return EmptyCommand(args).execute()
            case WalkArgs():
                return WalkCommand(args).execute()
            case TransferArgs():
                return TransferCommand(args).execute()
            case UniqueArgs():
                return UniqueCommand(args).execute()
            case InitConfigArgs():
                return InitConfigCommand(args).execute()


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Failures exit via ``sys.exit``.
    """
    CommandProcessor.process_command()
    return 0
