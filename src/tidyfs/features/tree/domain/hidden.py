"""
Summary: Hidden-entry predicates used when listings skip hidden items.
Why: Keep platform artifacts (``.DS_Store`` and friends) a configurable policy.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import Final

from .models import HiddenPredicate

# Metadata files dropped by desktop shells; none of them is user content.
DEFAULT_IGNORED_NAMES: Final[tuple[str, ...]] = (".DS_Store", "Thumbs.db", "desktop.ini")


def is_dotfile(path: Path) -> bool:
    """POSIX convention: names starting with a dot are hidden."""

    return path.name.startswith(".")


def make_hidden_predicate(
    ignored_names: Iterable[str] = (),
    *,
    include_dotfiles: bool = True,
) -> HiddenPredicate:
    """Build a predicate matching dotfiles and/or the given names.

    Name matching is case-insensitive so ``Thumbs.db`` and ``thumbs.db``
    are treated alike.
    """

    names = frozenset(name.lower() for name in ignored_names)

    def _predicate(path: Path) -> bool:
        if include_dotfiles and is_dotfile(path):
            return True
        return path.name.lower() in names

    return _predicate


__all__ = ["DEFAULT_IGNORED_NAMES", "is_dotfile", "make_hidden_predicate"]
