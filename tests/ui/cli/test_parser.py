"""Tests for command line argument parser."""

import logging
from argparse import Namespace
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from pytest_mock import MockerFixture

from tidyfs.platform.logging import DEFAULT_LOG_FILE
from tidyfs.ui.cli.args import (
    ArgumentParser,
    EmptyArgs,
    InitConfigArgs,
    TransferArgs,
    UniqueArgs,
    WalkArgs,
)


@pytest.fixture
def mock_setup_logger(mocker: MockerFixture) -> MagicMock:
    mock_config = mocker.patch("tidyfs.ui.cli.args.parser.Config")
    mock_config.load.return_value.log_file = None
    mock_config.load.return_value.ignore_hidden = True
    return mocker.patch("tidyfs.ui.cli.args.parser.setup_logger")


def test_create_parser() -> None:
    """Argument parser should expose expected subcommands and options."""

    parser = ArgumentParser.create_parser()

    empty_args: Namespace = parser.parse_args(
        ["empty", "root", "--prune", "--include-root", "--dry-run", "--include-hidden"]
    )
    assert empty_args.command == "empty"
    assert empty_args.prune and empty_args.include_root and empty_args.dry_run
    assert empty_args.include_hidden

    walk_args: Namespace = parser.parse_args(["walk", "root", "--no-files", "--dirs"])
    assert walk_args.visit_files is False
    assert walk_args.visit_directories is True
    assert walk_args.skip_hidden is False

    copy_args: Namespace = parser.parse_args(["copy", "a", "b", "--pattern", "{stem}-{attempt}"])
    assert (copy_args.source, copy_args.destination) == ("a", "b")
    assert copy_args.pattern == "{stem}-{attempt}"

    with pytest.raises(SystemExit):
        _ = parser.parse_args([])


def test_process_args_empty(tmp_path: Path, mock_setup_logger: MagicMock) -> None:
    args = ArgumentParser.process_args(["empty", str(tmp_path), "--include-hidden"])

    assert isinstance(args, EmptyArgs)
    assert args.root == tmp_path
    assert args.ignore_hidden is False
    assert not args.prune
    assert mock_setup_logger.call_args.kwargs["console_level"] == logging.INFO
    assert mock_setup_logger.call_args.kwargs["log_file"] == DEFAULT_LOG_FILE


def test_process_args_empty_uses_configured_hidden_policy(
    tmp_path: Path, mocker: MockerFixture
) -> None:
    mock_config = mocker.patch("tidyfs.ui.cli.args.parser.Config")
    mock_config.load.return_value.log_file = tmp_path / "custom.log"
    mock_config.load.return_value.ignore_hidden = False
    mock_setup_logger = mocker.patch("tidyfs.ui.cli.args.parser.setup_logger")

    args = ArgumentParser.process_args(["empty", str(tmp_path), "--quiet"])

    assert isinstance(args, EmptyArgs)
    assert args.ignore_hidden is False
    assert args.quiet
    assert mock_setup_logger.call_args.kwargs["console_level"] == logging.ERROR
    assert mock_setup_logger.call_args.kwargs["log_file"] == tmp_path / "custom.log"


@pytest.mark.usefixtures("mock_setup_logger")
def test_process_args_empty_requires_directory(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        _ = ArgumentParser.process_args(["empty", str(tmp_path / "missing")])

    assert excinfo.value.code == 1


def test_process_args_walk(tmp_path: Path, mock_setup_logger: MagicMock) -> None:
    args = ArgumentParser.process_args(
        ["walk", str(tmp_path), "--dirs", "--skip-hidden", "--verbose"]
    )

    assert isinstance(args, WalkArgs)
    assert args.visit_files and args.visit_directories and args.skip_hidden
    assert mock_setup_logger.call_args.kwargs["console_level"] == logging.DEBUG


@pytest.mark.usefixtures("mock_setup_logger")
def test_process_args_transfer(tmp_path: Path) -> None:
    source = tmp_path / "a.txt"
    _ = source.write_text("x")

    args = ArgumentParser.process_args(["move", str(source), str(tmp_path / "out")])

    assert isinstance(args, TransferArgs)
    assert args.command == "move"
    assert args.source == source
    assert args.pattern is None


@pytest.mark.usefixtures("mock_setup_logger")
def test_process_args_transfer_missing_source(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        _ = ArgumentParser.process_args(["copy", str(tmp_path / "nope"), str(tmp_path)])

    assert excinfo.value.code == 1


@pytest.mark.usefixtures("mock_setup_logger")
def test_process_args_rejects_bad_pattern(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        _ = ArgumentParser.process_args(["unique", str(tmp_path / "a"), "--pattern", "{n}"])

    assert excinfo.value.code == 2


@pytest.mark.usefixtures("mock_setup_logger")
def test_process_args_unique_and_init_config(tmp_path: Path) -> None:
    unique = ArgumentParser.process_args(
        ["unique", str(tmp_path / "a.txt"), "--pattern", "{stem} ({attempt})"]
    )
    init = ArgumentParser.process_args(["init-config", "--force"])

    assert isinstance(unique, UniqueArgs)
    assert unique.pattern == "{stem} ({attempt})"
    assert isinstance(init, InitConfigArgs)
    assert init.force
