"""
Summary: Resolve a destination path that does not collide with an existing entry.
Why: Let moves and copies auto-rename instead of overwriting files.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import final

from tidyfs.features.tree.usecases.classifier import classify
from tidyfs.features.tree.usecases.ports import FilesystemPort
from tidyfs.shared.errors import ResolutionExhaustedError
from tidyfs.shared.path_helpers import stem_without_extension

from ..domain.strategies import FIRST_ATTEMPT, NamingStrategy, numbered_suffix

_logger = logging.getLogger(__name__)


@final
class UniquePathResolver:
    """Find the first free name among ``desired``, ``<stem>2``, ``<stem>3``...

    ``max_attempts`` caps the highest attempt number handed to the naming
    strategy; ``None`` searches without bound.

    Resolution only checks existence; nothing is created or reserved. Another
    process may claim the returned path before the caller uses it, so callers
    that need atomicity must use an exclusive-create primitive instead.
    """

    def __init__(
        self,
        filesystem: FilesystemPort,
        *,
        naming_strategy: NamingStrategy | None = None,
        max_attempts: int | None = None,
    ) -> None:
        if max_attempts is not None and max_attempts < FIRST_ATTEMPT:
            raise ValueError(f"max_attempts must be at least {FIRST_ATTEMPT}")
        self._filesystem = filesystem
        self._naming_strategy = naming_strategy or numbered_suffix
        self._max_attempts = max_attempts

    def resolve(
        self,
        desired: Path,
        naming_strategy: NamingStrategy | None = None,
    ) -> Path:
        """Return ``desired`` or the first non-existing renamed sibling.

        The original extension is kept after the generated stem:
        ``photo.jpg`` becomes ``photo2.jpg``, then ``photo3.jpg``.

        Raises:
            ResolutionExhaustedError: ``max_attempts`` candidates all existed.
            OSError: An existence check failed for a reason other than absence.
        """

        strategy = naming_strategy or self._naming_strategy
        candidate = desired
        stem = stem_without_extension(desired)
        suffix = desired.suffix
        parent = desired.parent

        attempt = FIRST_ATTEMPT
        while classify(self._filesystem, candidate).exists:
            if self._max_attempts is not None and attempt > self._max_attempts:
                raise ResolutionExhaustedError(desired, attempt - 1)
            candidate = parent / f"{strategy(stem, attempt)}{suffix}"
            attempt += 1

        if candidate != desired:
            _logger.debug(
                "Resolved %s to %s",
                desired,
                candidate,
                extra={
                    "fs_event": "naming.renamed",
                    "source_path": str(desired),
                    "target_path": str(candidate),
                },
            )
        return candidate

    def move_with_auto_rename(
        self,
        source: Path,
        desired: Path,
        naming_strategy: NamingStrategy | None = None,
    ) -> Path:
        """Move ``source`` to a unique path derived from ``desired``.

        Returns:
            Path: The destination actually used.

        Raises:
            OSError: The move failed; the resolved path was never created.
        """

        destination = self.resolve(desired, naming_strategy)
        self._filesystem.move_item(source, destination)
        _logger.info(
            "Moved %s → %s",
            source,
            destination,
            extra={
                "fs_event": "transfer.move",
                "source_path": str(source),
                "target_path": str(destination),
            },
        )
        return destination

    def copy_with_auto_rename(
        self,
        source: Path,
        desired: Path,
        naming_strategy: NamingStrategy | None = None,
    ) -> Path:
        """Copy ``source`` to a unique path derived from ``desired``."""

        destination = self.resolve(desired, naming_strategy)
        self._filesystem.copy_item(source, destination)
        _logger.info(
            "Copied %s → %s",
            source,
            destination,
            extra={
                "fs_event": "transfer.copy",
                "source_path": str(source),
                "target_path": str(destination),
            },
        )
        return destination


__all__ = ["UniquePathResolver"]
