"""
Swap AST types.
"""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from hxattrs.config import ParserConfig


class Strategy(StrEnum):
    """How response content is placed relative to the target element."""

    INNER_HTML = "innerHTML"
    OUTER_HTML = "outerHTML"
    BEFORE_BEGIN = "beforebegin"
    AFTER_BEGIN = "afterbegin"
    BEFORE_END = "beforeend"
    AFTER_END = "afterend"
    DELETE = "delete"
    NONE = "none"

    @classmethod
    def from_keyword(cls, word: str) -> Strategy | None:
        """Match a strategy keyword, accepting camel-case position names."""
        return _STRATEGY_KEYWORDS.get(word)


_STRATEGY_KEYWORDS: dict[str, Strategy] = {s.value: s for s in Strategy}
_STRATEGY_KEYWORDS.update(
    {
        "beforeBegin": Strategy.BEFORE_BEGIN,
        "afterBegin": Strategy.AFTER_BEGIN,
        "beforeEnd": Strategy.BEFORE_END,
        "afterEnd": Strategy.AFTER_END,
    }
)


class SwapOptions(BaseModel):
    """
    Parsed swap attribute.

    Delays are plain milliseconds. ``scroll`` and ``show`` keep their value
    verbatim (``top``, ``bottom``, ``#id:top``...), empty when unset.
    """

    strategy: Strategy = Strategy.INNER_HTML
    swap_delay: int = Field(default=0, ge=0)
    settle_delay: int = Field(default=0, ge=0)
    scroll: str = ""
    show: str = ""
    focus_scroll: bool = True
    transition: bool = False
    ignore_title: bool = False

    model_config = ConfigDict(frozen=True)

    @classmethod
    def parse(cls, text: str, config: ParserConfig | None = None) -> SwapOptions:
        """Parse a swap attribute value."""
        from hxattrs.swap_parser import parse_swap

        return parse_swap(text, config)

    def __str__(self) -> str:
        parts = [str(self.strategy)]
        if self.swap_delay:
            parts.append(f"swap:{self.swap_delay}ms")
        if self.settle_delay:
            parts.append(f"settle:{self.settle_delay}ms")
        if self.scroll:
            parts.append(f"scroll:{self.scroll}")
        if self.show:
            parts.append(f"show:{self.show}")
        if not self.focus_scroll:
            parts.append("focus-scroll:false")
        if self.transition:
            parts.append("transition:true")
        if self.ignore_title:
            parts.append("ignoreTitle:true")
        return " ".join(parts)
