"""Domain helpers for collision-safe naming."""

from .strategies import (
    DEFAULT_NAMING_PATTERN,
    FIRST_ATTEMPT,
    NamingStrategy,
    numbered_suffix,
    pattern_strategy,
)

__all__ = [
    "DEFAULT_NAMING_PATTERN",
    "FIRST_ATTEMPT",
    "NamingStrategy",
    "numbered_suffix",
    "pattern_strategy",
]
