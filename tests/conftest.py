"""Shared pytest fixtures for building directory trees."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

from tidyfs.application.services import FileManager
from tidyfs.config.config import Config
from tidyfs.platform.filesystem import LocalFilesystem

TreeBuilder = Callable[..., Path]


@pytest.fixture
def make_tree(tmp_path: Path) -> TreeBuilder:
    """Create files and directories beneath ``tmp_path / "root"``.

    Entries ending in ``/`` become directories; everything else becomes a
    small text file with its parents created as needed.
    """

    def _build(*entries: str) -> Path:
        root = tmp_path / "root"
        root.mkdir(exist_ok=True)
        for entry in entries:
            target = root / entry
            if entry.endswith("/"):
                target.mkdir(parents=True, exist_ok=True)
            else:
                target.parent.mkdir(parents=True, exist_ok=True)
                _ = target.write_text("data")
        return root

    return _build


@pytest.fixture
def filesystem() -> LocalFilesystem:
    return LocalFilesystem()


@pytest.fixture
def reset_singletons() -> Iterator[None]:
    """Reset the cached configuration and default manager around a test."""

    original_config = Config._instance  # pyright: ignore[reportPrivateUsage]
    original_loaded_from = Config._loaded_from  # pyright: ignore[reportPrivateUsage]
    original_manager = FileManager._default  # pyright: ignore[reportPrivateUsage]
    Config.reset()
    FileManager._default = None  # pyright: ignore[reportPrivateUsage]
    try:
        yield None
    finally:
        Config._instance = original_config  # pyright: ignore[reportPrivateUsage]
        Config._loaded_from = original_loaded_from  # pyright: ignore[reportPrivateUsage]
        FileManager._default = original_manager  # pyright: ignore[reportPrivateUsage]
