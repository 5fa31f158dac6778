"""
Parser for swap attributes.

Syntax::

    [strategy] (key:value)*

    outerHTML swap:200ms settle:1s scroll:top focus-scroll:false

The strategy keyword is only recognised as the first token; when absent
the configured default applies. Unknown keys and stray tokens are
skipped. A known key with a malformed value is an error.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from typing import Any

from hxattrs.config import DEFAULT_CONFIG, ParserConfig
from hxattrs.errors import ParseError, UnexpectedChar, UnexpectedEnd
from hxattrs.ir.swap import Strategy, SwapOptions
from hxattrs.scanner import Scanner

logger = logging.getLogger(__name__)

_KEY_RE = re.compile(r"([A-Za-z][A-Za-z0-9_-]*):")


class _SwapParser:
    """Parser for one swap attribute value."""

    def __init__(self, text: str, config: ParserConfig) -> None:
        self.scanner = Scanner(text)
        self.fields: dict[str, Any] = {
            "strategy": config.default_swap_style,
            "swap_delay": config.default_swap_delay,
            "settle_delay": config.default_settle_delay,
            "focus_scroll": config.default_focus_scroll,
        }
        self._handlers: dict[str, tuple[str, Callable[[], Any]]] = {
            "swap": ("swap_delay", self._duration),
            "settle": ("settle_delay", self._duration),
            "scroll": ("scroll", self.scanner.read_quoted_or_bare_token),
            "show": ("show", self.scanner.read_quoted_or_bare_token),
            "focus-scroll": ("focus_scroll", self._boolean),
            "transition": ("transition", self._boolean),
            "ignoreTitle": ("ignore_title", self._boolean),
        }

    def parse(self) -> SwapOptions:
        s = self.scanner
        first = True
        while True:
            s.skip_whitespace()
            if s.at_end():
                break
            if self.parse_token(first):
                first = False
        return SwapOptions(**self.fields)

    def parse_token(self, first: bool) -> bool:
        """Consume one token; False when it was only a stray comma."""
        s = self.scanner
        m = _KEY_RE.match(s.text, s.pos)
        if m is not None:
            s.pos = m.end()
            self.parse_modifier(m.group(1))
            return True

        start = s.pos
        token = s.read_quoted_or_bare_token()
        if not token:
            s.expect(",")
            logger.debug("Ignoring ',' at %s in swap attribute", s.position(start))
            return False

        strategy = Strategy.from_keyword(token) if first else None
        if strategy is not None:
            self.fields["strategy"] = strategy
        else:
            logger.debug("Ignoring swap token %r at %s", token, s.position(start))
        return True

    def parse_modifier(self, key: str) -> None:
        s = self.scanner
        handler = self._handlers.get(key)
        if handler is None:
            value = s.read_quoted_or_bare_token()
            logger.debug("Ignoring unknown swap modifier %s:%s", key, value)
            return

        field, read_value = handler
        self.fields[field] = read_value()
        s.expect_boundary()

    def _duration(self) -> int:
        return self.scanner.read_number_with_unit()

    def _boolean(self) -> bool:
        s = self.scanner
        start = s.pos
        value = s.read_quoted_or_bare_token()
        if value == "true":
            return True
        if value == "false":
            return False
        if not value and s.at_end():
            raise UnexpectedEnd(s.position(start), expected="true or false")
        raise UnexpectedChar(s.position(start), expected="true or false", found=value)


def parse_swap(text: str, config: ParserConfig | None = None) -> SwapOptions:
    """
    Parse a swap attribute.

    Args:
        text: Attribute value, e.g. ``"innerHTML swap:200ms scroll:top"``
        config: Defaults for unset fields (DEFAULT_CONFIG when omitted)

    Returns:
        SwapOptions with unset fields at their defaults

    Raises:
        ParseError: If a recognised modifier has a malformed value
    """
    try:
        return _SwapParser(text, config or DEFAULT_CONFIG).parse()
    except ParseError as exc:
        exc.with_text(text)
        raise
