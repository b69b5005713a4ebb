"""
Summary: Public API for collision-safe path naming.
Why: Provide a single import surface for the naming feature.
"""

from .domain import (
    DEFAULT_NAMING_PATTERN,
    FIRST_ATTEMPT,
    NamingStrategy,
    numbered_suffix,
    pattern_strategy,
)
from .usecases import UniquePathResolver

__all__ = [
    "DEFAULT_NAMING_PATTERN",
    "FIRST_ATTEMPT",
    "NamingStrategy",
    "UniquePathResolver",
    "numbered_suffix",
    "pattern_strategy",
]
