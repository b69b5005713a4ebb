"""
Summary: Exception hierarchy raised by tidyfs use cases.
Why: Keep non-I/O failures distinct from the OSError raised by the filesystem.
"""

from __future__ import annotations

from pathlib import Path


class TidyFsError(Exception):
    """Base class for errors raised by tidyfs itself (never by the host OS)."""


class ResolutionExhaustedError(TidyFsError):
    """Unique-name search hit the configured attempt ceiling."""

    desired: Path
    attempts: int

    def __init__(self, desired: Path, attempts: int) -> None:
        self.desired = desired
        self.attempts = attempts
        super().__init__(
            f"No free name for {desired} after {attempts} attempts"
        )


class OperationCancelledError(TidyFsError):
    """A cancellation token was tripped between directory scans."""


__all__ = ["TidyFsError", "ResolutionExhaustedError", "OperationCancelledError"]
