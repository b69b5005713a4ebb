"""Where: src/tidyfs/config/settings.py
What: Derived runtime settings sourced from persisted configuration.
Why: Expose validated values to feature layers without file I/O.
Trade-offs: - Invalid values fall back to defaults with a warning instead of failing.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from tidyfs.config.config import Config
from tidyfs.features.naming.domain.strategies import (
    DEFAULT_NAMING_PATTERN,
    FIRST_ATTEMPT,
    NamingStrategy,
    pattern_strategy,
)
from tidyfs.features.tree.domain.hidden import make_hidden_predicate
from tidyfs.features.tree.domain.models import HiddenPredicate

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class Settings:
    """Validated view over ``Config``."""

    ignore_hidden: bool
    ignored_names: tuple[str, ...]
    naming_pattern: str
    max_rename_attempts: int | None

    def hidden_predicate(self) -> HiddenPredicate:
        return make_hidden_predicate(self.ignored_names)

    def naming_strategy(self) -> NamingStrategy:
        return pattern_strategy(self.naming_pattern)


def settings_from_config(config: Config) -> Settings:
    """Validate ``config`` and derive ``Settings`` from it."""

    naming_pattern = config.naming_pattern or DEFAULT_NAMING_PATTERN
    try:
        _ = pattern_strategy(naming_pattern)
    except ValueError as exc:
        logger.warning("%s; using %r", exc, DEFAULT_NAMING_PATTERN)
        naming_pattern = DEFAULT_NAMING_PATTERN

    # 0 (or anything below the first attempt number) means "no ceiling".
    ceiling = config.max_rename_attempts
    max_rename_attempts = ceiling if isinstance(ceiling, int) and ceiling >= FIRST_ATTEMPT else None

    names = tuple(name for name in config.ignored_names if isinstance(name, str) and name)

    return Settings(
        ignore_hidden=bool(config.ignore_hidden),
        ignored_names=names,
        naming_pattern=naming_pattern,
        max_rename_attempts=max_rename_attempts,
    )


def load_settings() -> Settings:
    """Load the cached ``Config`` and derive settings from it."""

    return settings_from_config(Config.load())


__all__ = ["Settings", "settings_from_config", "load_settings"]
