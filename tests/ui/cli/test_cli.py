"""Tests for CLI functionality."""

from pathlib import Path

import pytest
from pytest_mock import MockerFixture

from tidyfs.ui.cli.cli import CommandProcessor, main


@pytest.fixture
def isolated_cli(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, mocker: MockerFixture, reset_singletons: None
) -> Path:
    """Point configuration at an absent file and keep logging off the disk."""

    _ = reset_singletons
    monkeypatch.setenv("TIDYFS_CONFIG", str(tmp_path / "absent.toml"))
    _ = mocker.patch("tidyfs.ui.cli.args.parser.setup_logger")
    return tmp_path


def test_empty_prune_end_to_end(
    make_tree, isolated_cli: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    _ = isolated_cli
    root = make_tree("keep.txt", "old/empty/")

    CommandProcessor.process_command(["empty", str(root), "--prune"])

    assert not (root / "old").exists()
    assert "Removed: 1" in capsys.readouterr().out


def test_missing_root_exits_with_error(isolated_cli: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        CommandProcessor.process_command(["empty", str(isolated_cli / "missing")])

    assert excinfo.value.code == 1


def test_walk_of_missing_root_exits_non_zero(isolated_cli: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        CommandProcessor.process_command(["walk", str(isolated_cli / "missing")])

    assert excinfo.value.code == 1


def test_unexpected_error_exits_with_one(
    make_tree, isolated_cli: Path, mocker: MockerFixture
) -> None:
    _ = isolated_cli
    root = make_tree()
    _ = mocker.patch(
        "tidyfs.ui.cli.cli.EmptyCommand.execute", side_effect=RuntimeError("boom")
    )

    with pytest.raises(SystemExit) as excinfo:
        CommandProcessor.process_command(["empty", str(root)])

    assert excinfo.value.code == 1


def test_keyboard_interrupt_exits_with_130(
    make_tree, isolated_cli: Path, mocker: MockerFixture
) -> None:
    _ = isolated_cli
    root = make_tree()
    _ = mocker.patch("tidyfs.ui.cli.cli.EmptyCommand.execute", side_effect=KeyboardInterrupt)

    with pytest.raises(SystemExit) as excinfo:
        CommandProcessor.process_command(["empty", str(root)])

    assert excinfo.value.code == 130


def test_main_returns_zero(make_tree, isolated_cli: Path, mocker: MockerFixture) -> None:
    _ = isolated_cli
    root = make_tree("a.txt")
    _ = mocker.patch("sys.argv", ["tidyfs", "unique", str(root / "a.txt")])

    assert main() == 0


def test_empty_prune_keeps_dotfiles(
    make_tree, isolated_cli: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    _ = isolated_cli
    root = make_tree("keep.txt", "project/.env", "project/.git/config", "junk/.DS_Store")

    CommandProcessor.process_command(["empty", str(root), "--prune"])

    assert (root / "project" / ".env").exists()
    assert (root / "project" / ".git" / "config").exists()
    assert not (root / "junk").exists()
    assert "Removed: 1" in capsys.readouterr().out
