"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import final

from tidyfs.config.config import Config
from tidyfs.features.naming import pattern_strategy
from tidyfs.platform.logging import DEFAULT_LOG_FILE, logger, setup_logger
from tidyfs.ui.cli.args.options import (
    CLIArgs,
    EmptyArgs,
    InitConfigArgs,
    TransferArgs,
    UniqueArgs,
    WalkArgs,
)


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="tidyfs",
            description="tidyfs - find and prune empty directories, move files without overwriting.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        subparsers = parser.add_subparsers(dest="command", required=True)

        empty_parser = subparsers.add_parser(
            "empty",
            help="Report (and optionally remove) directories that contain no files",
        )
        _ = empty_parser.add_argument("root", type=str, metavar="ROOT", help="Directory to analyze")
        _ = empty_parser.add_argument(
            "--include-hidden",
            action="store_true",
            help="Count hidden entries (dotfiles, .DS_Store, ...) as content",
        )
        _ = empty_parser.add_argument(
            "--prune",
            action="store_true",
            help="Remove the reported directories",
        )
        _ = empty_parser.add_argument(
            "--include-root",
            action="store_true",
            help="Also remove ROOT itself when it is empty (requires --prune)",
        )
        _ = empty_parser.add_argument(
            "--dry-run",
            action="store_true",
            help="With --prune, show what would be removed without removing it",
        )
        ArgumentParser._add_verbosity(empty_parser)

        walk_parser = subparsers.add_parser(
            "walk",
            help="List every file (and optionally directory) beneath a root",
        )
        _ = walk_parser.add_argument("root", type=str, metavar="ROOT", help="File or directory to walk")
        _ = walk_parser.add_argument(
            "--no-files",
            dest="visit_files",
            action="store_false",
            help="Do not list files",
        )
        _ = walk_parser.add_argument(
            "--dirs",
            dest="visit_directories",
            action="store_true",
            help="List directories, each after its contents",
        )
        _ = walk_parser.add_argument(
            "--skip-hidden",
            action="store_true",
            help="Skip hidden entries at every level",
        )
        ArgumentParser._add_verbosity(walk_parser)

        for name, verb in (("move", "Move"), ("copy", "Copy")):
            transfer_parser = subparsers.add_parser(
                name,
                help=f"{verb} a file or directory, renaming it if the destination is taken",
            )
            _ = transfer_parser.add_argument("source", type=str, metavar="SOURCE")
            _ = transfer_parser.add_argument("destination", type=str, metavar="DESTINATION")
            ArgumentParser._add_pattern(transfer_parser)
            ArgumentParser._add_verbosity(transfer_parser)

        unique_parser = subparsers.add_parser(
            "unique",
            help="Print the first free path derived from PATH",
        )
        _ = unique_parser.add_argument("path", type=str, metavar="PATH")
        ArgumentParser._add_pattern(unique_parser)
        ArgumentParser._add_verbosity(unique_parser)

        init_parser = subparsers.add_parser(
            "init-config",
            help="Write the default configuration file",
        )
        _ = init_parser.add_argument(
            "--force",
            action="store_true",
            help="Overwrite an existing configuration file",
        )
        ArgumentParser._add_verbosity(init_parser)

        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Processed command line arguments.

        Raises:
            SystemExit: If required paths don't exist or other validation fails.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        if parsed_args.quiet:
            log_level = logging.ERROR
        elif parsed_args.verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        configuration = Config.load()
        log_file_path = configuration.log_file or DEFAULT_LOG_FILE
        _ = setup_logger(log_file=log_file_path, console_level=log_level)

        command: str = parsed_args.command

        if command == "empty":
            return ArgumentParser._process_empty(parsed_args, configuration)
        if command == "walk":
            return ArgumentParser._process_walk(parsed_args)
        if command in {"move", "copy"}:
            return ArgumentParser._process_transfer(parser, parsed_args)
        if command == "unique":
            pattern = ArgumentParser._validated_pattern(parser, parsed_args.pattern)
            return UniqueArgs(
                command="unique",
                path=Path(parsed_args.path),
                pattern=pattern,
                verbose=parsed_args.verbose,
                quiet=parsed_args.quiet,
            )
        if command == "init-config":
            return InitConfigArgs(
                command="init-config",
                force=parsed_args.force,
                verbose=parsed_args.verbose,
                quiet=parsed_args.quiet,
            )

        logger.error("Unsupported command: %s", command)
        sys.exit(2)

    @staticmethod
    def _add_verbosity(parser: argparse.ArgumentParser) -> None:
        _ = parser.add_argument(
            "--verbose",
            action="store_true",
            help="Show detailed processing information",
        )
        _ = parser.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all output except errors",
        )

    @staticmethod
    def _add_pattern(parser: argparse.ArgumentParser) -> None:
        _ = parser.add_argument(
            "--pattern",
            type=str,
            metavar="PATTERN",
            help='Rename pattern with {stem} and {attempt}, e.g. "{stem} ({attempt})"',
        )

    @staticmethod
    def _validated_pattern(parser: argparse.ArgumentParser, pattern: str | None) -> str | None:
        if pattern is None:
            return None
        try:
            _ = pattern_strategy(pattern)
        except ValueError as exc:
            parser.error(str(exc))
        return pattern

    @staticmethod
    def _process_empty(parsed_args: argparse.Namespace, configuration: Config) -> EmptyArgs:
        root = Path(parsed_args.root)
        if not root.is_dir():
            logger.error("Directory does not exist: %s", root)
            sys.exit(1)

        return EmptyArgs(
            command="empty",
            root=root,
            ignore_hidden=False if parsed_args.include_hidden else configuration.ignore_hidden,
            prune=parsed_args.prune,
            include_root=parsed_args.include_root,
            dry_run=parsed_args.dry_run,
            verbose=parsed_args.verbose,
            quiet=parsed_args.quiet,
        )

    @staticmethod
    def _process_walk(parsed_args: argparse.Namespace) -> WalkArgs:
        return WalkArgs(
            command="walk",
            root=Path(parsed_args.root),
            visit_files=parsed_args.visit_files,
            visit_directories=parsed_args.visit_directories,
            skip_hidden=parsed_args.skip_hidden,
            verbose=parsed_args.verbose,
            quiet=parsed_args.quiet,
        )

    @staticmethod
    def _process_transfer(
        parser: argparse.ArgumentParser, parsed_args: argparse.Namespace
    ) -> TransferArgs:
        source = Path(parsed_args.source)
        if not source.exists() and not source.is_symlink():
            logger.error("Source does not exist: %s", source)
            sys.exit(1)

        return TransferArgs(
            command=parsed_args.command,
            source=source,
            destination=Path(parsed_args.destination),
            pattern=ArgumentParser._validated_pattern(parser, parsed_args.pattern),
            verbose=parsed_args.verbose,
            quiet=parsed_args.quiet,
        )
