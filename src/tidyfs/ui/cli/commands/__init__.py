"""Command execution package for CLI."""

from tidyfs.ui.cli.commands.empty import EmptyCommand
from tidyfs.ui.cli.commands.init_config import InitConfigCommand
from tidyfs.ui.cli.commands.transfer import TransferCommand, UniqueCommand
from tidyfs.ui.cli.commands.walk import WalkCommand

__all__ = [
    "EmptyCommand",
    "InitConfigCommand",
    "TransferCommand",
    "UniqueCommand",
    "WalkCommand",
]
