"""Classify a path as absent, a file, or a directory via the filesystem port."""

from __future__ import annotations

from pathlib import Path

from ..domain.models import PathKind
from .ports import FilesystemPort


def classify(filesystem: FilesystemPort, path: Path) -> PathKind:
    """Return the ``PathKind`` currently at ``path``.

    A missing path is not an error; failures unrelated to existence
    (permission denied while stat-ing, device errors) propagate as ``OSError``.
    """

    return filesystem.exists(path)


__all__ = ["classify"]
