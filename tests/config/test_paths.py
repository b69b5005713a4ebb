"""Tests for configuration path resolution helpers."""

from pathlib import Path

from tidyfs.config.paths import (
    default_config_path,
    default_log_dir,
    default_log_file,
    resolve_overridable_path,
)


def test_default_log_paths(portable_repo_root: Path) -> None:
    """Default log locations should live under the repository logs/ folder."""

    expected_dir = portable_repo_root / "logs"
    assert default_log_dir() == expected_dir
    assert default_log_file() == expected_dir / "tidyfs.log"


def test_default_config_path_under_repo_root(portable_repo_root: Path) -> None:
    assert default_config_path() == portable_repo_root / "config" / "tidyfs.toml"


def test_explicit_path_wins_over_environment(tmp_path: Path) -> None:
    explicit = tmp_path / "explicit.toml"

    resolved = resolve_overridable_path(
        explicit_path=explicit,
        env={"TIDYFS_CONFIG": str(tmp_path / "env.toml")},
        env_var="TIDYFS_CONFIG",
        default_factory=lambda: tmp_path / "default.toml",
    )

    assert resolved == explicit.resolve()
