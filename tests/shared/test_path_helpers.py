"""Tests for shared path helpers and cancellation."""

from __future__ import annotations

import threading
from pathlib import Path

import pytest

from tidyfs.shared import (
    CancellationToken,
    OperationCancelledError,
    check_cancelled,
    replacing_suffix,
    stem_without_extension,
)


def test_stem_without_extension() -> None:
    assert stem_without_extension(Path("/x/archive.tar.gz")) == "archive.tar"
    assert stem_without_extension(Path("/x/.bashrc")) == ".bashrc"
    assert stem_without_extension(Path("/x/README")) == "README"


def test_replacing_suffix() -> None:
    assert replacing_suffix(Path("/x/abc.txt"), "avi") == Path("/x/abc.avi")
    assert replacing_suffix(Path("/x/abc.txt"), ".avi") == Path("/x/abc.avi")
    assert replacing_suffix(Path("/x/abc.txt"), "") == Path("/x/abc")


def test_cancellation_token_across_threads() -> None:
    token = CancellationToken()
    check_cancelled(token)
    check_cancelled(None)

    worker = threading.Thread(target=token.cancel)
    worker.start()
    worker.join()

    assert token.is_cancelled
    with pytest.raises(OperationCancelledError):
        check_cancelled(token)
