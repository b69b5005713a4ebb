"""
Summary: Naming strategies that derive a candidate stem for a retry attempt.
Why: Keep the suffixing scheme pluggable while defaulting to ``photo2.jpg``.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Final

NamingStrategy = Callable[[str, int], str]

DEFAULT_NAMING_PATTERN: Final[str] = "{stem}{attempt}"
FIRST_ATTEMPT: Final[int] = 2


def numbered_suffix(stem: str, attempt: int) -> str:
    """Append the attempt number directly: ``photo`` -> ``photo2``."""

    return f"{stem}{attempt}"


def pattern_strategy(pattern: str) -> NamingStrategy:
    """Build a strategy from a ``str.format`` pattern.

    The pattern must reference both ``{stem}`` and ``{attempt}``, for
    example ``"{stem} ({attempt})"`` or ``"{stem}_{attempt:03d}"``.

    Raises:
        ValueError: The pattern is malformed or cannot yield distinct names.
    """

    if "{stem" not in pattern or "{attempt" not in pattern:
        raise ValueError(
            f"Naming pattern must contain {{stem}} and {{attempt}}: {pattern!r}"
        )
    try:
        _ = pattern.format(stem="probe", attempt=FIRST_ATTEMPT)
    except (IndexError, KeyError, ValueError) as exc:
        raise ValueError(f"Invalid naming pattern {pattern!r}: {exc}") from exc

    def _strategy(stem: str, attempt: int) -> str:
        return pattern.format(stem=stem, attempt=attempt)

    return _strategy


__all__ = [
    "NamingStrategy",
    "DEFAULT_NAMING_PATTERN",
    "FIRST_ATTEMPT",
    "numbered_suffix",
    "pattern_strategy",
]
