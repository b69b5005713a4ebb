"""Filesystem facade exports.

Where: platform/filesystem/__init__.py
What: Re-export the local filesystem adapter and directory helpers.
Why: Provide a single canonical import path for host filesystem access.
"""

from __future__ import annotations

from .helpers import ensure_directory
from .local import LocalFilesystem

__all__ = ["LocalFilesystem", "ensure_directory"]
