"""Command line argument handling package."""

from tidyfs.ui.cli.args.parser import ArgumentParser
from tidyfs.ui.cli.args.options import (
    CLIArgs,
    EmptyArgs,
    InitConfigArgs,
    TransferArgs,
    UniqueArgs,
    WalkArgs,
)

__all__ = [
    "ArgumentParser",
    "CLIArgs",
    "EmptyArgs",
    "InitConfigArgs",
    "TransferArgs",
    "UniqueArgs",
    "WalkArgs",
]
