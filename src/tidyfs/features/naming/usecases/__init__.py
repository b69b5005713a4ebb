"""Use cases for collision-safe naming."""

from .unique_path import UniquePathResolver

__all__ = ["UniquePathResolver"]
