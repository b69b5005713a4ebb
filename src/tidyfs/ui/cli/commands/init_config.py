"""Configuration bootstrap command for the CLI."""

from __future__ import annotations

from typing import final

from tidyfs.config.config import Config
from tidyfs.config.paths import default_config_path
from tidyfs.platform.logging import logger
from tidyfs.ui.cli.args.options import InitConfigArgs


@final
class InitConfigCommand:
    """Write the default configuration file unless one already exists."""

    def __init__(self, args: InitConfigArgs) -> None:
        self.args = args

    def execute(self) -> int:
        target = default_config_path()
        if target.exists() and not self.args.force:
            logger.warning("Configuration already exists at %s (use --force to overwrite)", target)
            return 1
        _ = Config().save(target)
        return 0
