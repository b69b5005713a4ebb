"""Small ``Path`` helpers shared by the naming and tree features."""

from __future__ import annotations

from pathlib import Path


def stem_without_extension(path: Path) -> str:
    """Return the final component with only its last extension removed.

    ``archive.tar.gz`` yields ``archive.tar``; dotfiles such as ``.bashrc``
    have no extension and are returned unchanged.
    """

    return path.stem


def replacing_suffix(path: Path, suffix: str) -> Path:
    """Swap the last extension of ``path`` for ``suffix``.

    ``suffix`` may be given with or without its leading dot; an empty string
    drops the extension entirely.
    """

    if suffix and not suffix.startswith("."):
        suffix = f".{suffix}"
    return path.with_suffix(suffix)


__all__ = ["stem_without_extension", "replacing_suffix"]
