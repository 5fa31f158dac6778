"""
Parser configuration.

Defaults applied by the swap parser when an attribute leaves a field
unset. Loaded from TOML, either a ``[tool.hxattrs]`` table inside
``pyproject.toml`` or the top level of a dedicated ``hxattrs.toml``::

    [tool.hxattrs]
    default_swap_style = "outerHTML"
    default_settle_delay = 20
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from hxattrs.ir.swap import Strategy

logger = logging.getLogger(__name__)


class ParserConfig(BaseModel):
    """Defaults for fields an attribute does not set."""

    default_swap_style: Strategy = Strategy.INNER_HTML
    default_swap_delay: int = Field(default=0, ge=0)
    default_settle_delay: int = Field(default=0, ge=0)
    default_focus_scroll: bool = True

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator("default_swap_style", mode="before")
    @classmethod
    def _accept_keyword_spelling(cls, value: Any) -> Any:
        if isinstance(value, str):
            return Strategy.from_keyword(value) or value
        return value


DEFAULT_CONFIG = ParserConfig()


def load_config(path: Path) -> ParserConfig:
    """
    Load parser configuration from a TOML file.

    Args:
        path: ``pyproject.toml`` or ``hxattrs.toml``

    Returns:
        ParserConfig; defaults when the file or table is missing

    Raises:
        pydantic.ValidationError: If a setting has an invalid value
        tomllib.TOMLDecodeError: If the file is not valid TOML
    """
    if not path.exists():
        logger.debug("No config at %s, using defaults", path)
        return DEFAULT_CONFIG

    data = tomllib.loads(path.read_text(encoding="utf-8"))
    if path.name == "pyproject.toml":
        data = data.get("tool", {}).get("hxattrs", {})

    config = ParserConfig.model_validate(data)
    logger.debug("Loaded parser config from %s: %s", path, config)
    return config
