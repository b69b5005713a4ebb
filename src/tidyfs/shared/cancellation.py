"""
Summary: Cooperative cancellation flag checked between directory scans.
Why: Let long tree walks stop early without changing non-cancelled results.
"""

from __future__ import annotations

import threading
from typing import final

from .errors import OperationCancelledError


@final
class CancellationToken:
    """Thread-safe flag; ``cancel`` may be called from any thread."""

    def __init__(self) -> None:
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def is_cancelled(self) -> bool:
        return self._event.is_set()

    def raise_if_cancelled(self) -> None:
        """Raise ``OperationCancelledError`` once ``cancel`` has been called."""

        if self._event.is_set():
            raise OperationCancelledError("Operation cancelled")


def check_cancelled(token: CancellationToken | None) -> None:
    """Convenience wrapper accepting an absent token."""

    if token is not None:
        token.raise_if_cancelled()


__all__ = ["CancellationToken", "check_cancelled"]
