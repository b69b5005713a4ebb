"""Command line argument types."""

from dataclasses import dataclass
from pathlib import Path
from typing import Literal


@dataclass(slots=True)
class EmptyArgs:
    """Arguments for the ``empty`` command."""

    command: Literal["empty"]
    root: Path
    ignore_hidden: bool
    prune: bool
    include_root: bool
    dry_run: bool
    verbose: bool
    quiet: bool


@dataclass(slots=True)
class WalkArgs:
    """Arguments for the ``walk`` command."""

    command: Literal["walk"]
    root: Path
    visit_files: bool
    visit_directories: bool
    skip_hidden: bool
    verbose: bool
    quiet: bool


@dataclass(slots=True)
class TransferArgs:
    """Arguments for the ``move`` and ``copy`` commands."""

    command: Literal["move", "copy"]
    source: Path
    destination: Path
    pattern: str | None
    verbose: bool
    quiet: bool


@dataclass(slots=True)
class UniqueArgs:
    """Arguments for the ``unique`` command."""

    command: Literal["unique"]
    path: Path
    pattern: str | None
    verbose: bool
    quiet: bool


@dataclass(slots=True)
class InitConfigArgs:
    """Arguments for the ``init-config`` command."""

    command: Literal["init-config"]
    force: bool
    verbose: bool
    quiet: bool


CLIArgs = EmptyArgs | WalkArgs | TransferArgs | UniqueArgs | InitConfigArgs
