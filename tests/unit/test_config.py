"""Tests for parser configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from hxattrs.config import DEFAULT_CONFIG, ParserConfig, load_config
from hxattrs.ir import Strategy


def test_missing_file_gives_defaults(tmp_path: Path) -> None:
    assert load_config(tmp_path / "hxattrs.toml") == DEFAULT_CONFIG


def test_pyproject_tool_table(tmp_path: Path) -> None:
    path = tmp_path / "pyproject.toml"
    path.write_text(
        """
[project]
name = "demo"

[tool.hxattrs]
default_swap_style = "outerHTML"
default_settle_delay = 20
"""
    )
    config = load_config(path)
    assert config.default_swap_style == Strategy.OUTER_HTML
    assert config.default_settle_delay == 20
    assert config.default_swap_delay == 0


def test_pyproject_without_table(tmp_path: Path) -> None:
    path = tmp_path / "pyproject.toml"
    path.write_text('[project]\nname = "demo"\n')
    assert load_config(path) == ParserConfig()


def test_dedicated_file_accepts_camel_case_strategy(tmp_path: Path) -> None:
    path = tmp_path / "hxattrs.toml"
    path.write_text('default_swap_style = "afterEnd"\ndefault_focus_scroll = false\n')
    config = load_config(path)
    assert config.default_swap_style == Strategy.AFTER_END
    assert config.default_focus_scroll is False


@pytest.mark.parametrize(
    "body",
    [
        "default_swap_delay = -1\n",
        'default_swap_style = "sideways"\n',
        "unknown_setting = 1\n",
    ],
)
def test_invalid_settings(tmp_path: Path, body: str) -> None:
    path = tmp_path / "hxattrs.toml"
    path.write_text(body)
    with pytest.raises(ValidationError):
        load_config(path)
