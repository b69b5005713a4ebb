"""Tests for naming strategies."""

from __future__ import annotations

import pytest

from tidyfs.features.naming import numbered_suffix, pattern_strategy


def test_numbered_suffix_appends_attempt() -> None:
    assert numbered_suffix("photo", 2) == "photo2"


def test_pattern_strategy_supports_format_spec() -> None:
    strategy = pattern_strategy("{stem}_{attempt:03d}")

    assert strategy("scan", 7) == "scan_007"


@pytest.mark.parametrize(
    "pattern",
    ["{stem}", "copy-{attempt}", "{stem}{attempt}{other}", "{stem}{attempt:d"],
)
def test_pattern_strategy_rejects_unusable_patterns(pattern: str) -> None:
    with pytest.raises(ValueError):
        _ = pattern_strategy(pattern)
