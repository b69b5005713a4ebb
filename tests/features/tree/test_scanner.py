"""Tests for single-level directory classification."""

from __future__ import annotations

import os
from pathlib import Path

import pytest
from pytest_mock import MockerFixture

from tidyfs.features.tree import (
    DirectoryEntry,
    DirectoryScanner,
    Empty,
    EntryKind,
    FilesAndDirectories,
    FilesystemPort,
    OnlyDirectories,
    OnlyFiles,
    make_hidden_predicate,
)
from tidyfs.platform.filesystem import LocalFilesystem


def test_scan_empty_directory(make_tree, filesystem: LocalFilesystem) -> None:
    root = make_tree()

    assert DirectoryScanner(filesystem).scan(root) == Empty()


def test_scan_only_files(make_tree, filesystem: LocalFilesystem) -> None:
    root = make_tree("a.txt", "b.txt")

    assert DirectoryScanner(filesystem).scan(root) == OnlyFiles()


def test_scan_only_directories_is_sorted_and_not_recursive(
    make_tree, filesystem: LocalFilesystem
) -> None:
    root = make_tree("zeta/", "alpha/deep/file.txt")

    result = DirectoryScanner(filesystem).scan(root)

    assert result == OnlyDirectories((root / "alpha", root / "zeta"))


def test_scan_files_and_directories(make_tree, filesystem: LocalFilesystem) -> None:
    root = make_tree("notes.txt", "sub/")

    assert DirectoryScanner(filesystem).scan(root) == FilesAndDirectories((root / "sub",))


def test_hidden_only_directory_depends_on_ignore_flag(
    make_tree, filesystem: LocalFilesystem
) -> None:
    """Only-hidden content is Empty when ignored and OnlyFiles otherwise."""

    root = make_tree(".DS_Store", ".hidden")
    scanner = DirectoryScanner(filesystem)

    assert scanner.scan(root, ignore_hidden=True) == Empty()
    assert scanner.scan(root, ignore_hidden=False) == OnlyFiles()


def test_symlink_to_directory_counts_as_file(make_tree, filesystem: LocalFilesystem) -> None:
    root = make_tree("target/inner.txt", "holder/")
    try:
        os.symlink(root / "target", root / "holder" / "link", target_is_directory=True)
    except (OSError, NotImplementedError):
        pytest.skip("symlinks unavailable on this platform")

    assert DirectoryScanner(filesystem).scan(root / "holder") == OnlyFiles()


def test_scan_missing_directory_raises(tmp_path: Path, filesystem: LocalFilesystem) -> None:
    """A listing failure must surface instead of reading as Empty."""

    with pytest.raises(OSError):
        _ = DirectoryScanner(filesystem).scan(tmp_path / "gone")


def test_scan_requests_hidden_entries_according_to_flag(mocker: MockerFixture) -> None:
    port = mocker.create_autospec(FilesystemPort, instance=True)
    port.list_directory.return_value = [
        DirectoryEntry(Path("/r/b"), EntryKind.DIRECTORY),
        DirectoryEntry(Path("/r/a"), EntryKind.DIRECTORY),
        DirectoryEntry(Path("/r/link"), EntryKind.SYMLINK),
    ]

    result = DirectoryScanner(port).scan(Path("/r"), ignore_hidden=False)

    assert result == FilesAndDirectories((Path("/r/a"), Path("/r/b")))
    port.list_directory.assert_called_once_with(Path("/r"), include_hidden=True)


def test_ignorable_predicate_overrides_filesystem_policy(
    make_tree, filesystem: LocalFilesystem
) -> None:
    """With an explicit predicate only matching names are ignored, not every dotfile."""

    root = make_tree(".DS_Store", ".env")
    scanner = DirectoryScanner(
        filesystem, ignorable=make_hidden_predicate([".DS_Store"], include_dotfiles=False)
    )

    assert scanner.scan(root, ignore_hidden=True) == OnlyFiles()
    assert DirectoryScanner(filesystem).scan(root, ignore_hidden=True) == Empty()

    (root / ".env").unlink()
    assert scanner.scan(root, ignore_hidden=True) == Empty()
    assert scanner.scan(root, ignore_hidden=False) == OnlyFiles()
