"""Logging facade exports.

Where: platform/logging/__init__.py
What: Re-export the application logger, setup helper, and Rich handler.
Why: Provide a single canonical import path.
"""

from __future__ import annotations

from .config import DEFAULT_LOG_FILE, LOGGER_NAME, logger, setup_logger
from .handlers import FsEventRichHandler

__all__ = [
    "DEFAULT_LOG_FILE",
    "FsEventRichHandler",
    "LOGGER_NAME",
    "logger",
    "setup_logger",
]
