"""
Character scanner shared by the trigger, swap and sync parsers.

The attribute languages are too small to warrant a token stream, so the
parsers read directly from a cursor over the raw text. Every primitive
either consumes what it recognised and returns it, or raises a
``ParseError`` subclass positioned at the failure point. After a failure
the cursor position is unspecified.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import NoReturn

from hxattrs.errors import (
    InvalidNumber,
    Position,
    UnexpectedChar,
    UnexpectedEnd,
)
from hxattrs.position import PositionTracker

# Suffix -> milliseconds multiplier. A bare number is milliseconds.
DURATION_UNITS: Mapping[str, int] = {"ms": 1, "s": 1000}

WHITESPACE = " \t\n\r\f\v"

_IDENT_RE = re.compile(r"[A-Za-z0-9_-]+")
_DIGITS_RE = re.compile(r"[0-9]+")
_UNIT_RE = re.compile(r"[A-Za-z]+")
_EVENT_STOP = WHITESPACE + ",[]"


class Scanner:
    """Cursor over an attribute value with line/column tracking."""

    def __init__(self, text: str):
        self.text = text
        self.pos = 0
        self._tracker = PositionTracker(text)

    def position(self, index: int | None = None) -> Position:
        """Position of ``index``, or of the cursor when omitted."""
        return self._tracker.position_at(self.pos if index is None else index)

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def peek_char(self) -> str | None:
        """Current character, or None at end of input."""
        if self.at_end():
            return None
        return self.text[self.pos]

    def skip_whitespace(self) -> None:
        while not self.at_end() and self.text[self.pos] in WHITESPACE:
            self.pos += 1

    def at_boundary(self, extra: str = "") -> bool:
        """True at end of input, whitespace, a comma, or any char in ``extra``."""
        ch = self.peek_char()
        return ch is None or ch in WHITESPACE or ch == "," or ch in extra

    def expect_boundary(self, extra: str = "") -> None:
        """Require a token boundary at the cursor."""
        if not self.at_boundary(extra):
            raise UnexpectedChar(
                self.position(),
                expected="whitespace, ',' or end of input",
                found=self.text[self.pos],
            )

    def expect(self, literal: str) -> None:
        """Consume ``literal`` exactly."""
        if self.text.startswith(literal, self.pos):
            self.pos += len(literal)
            return
        remaining = self.text[self.pos :]
        if literal.startswith(remaining):
            raise UnexpectedEnd(self.position(len(self.text)), expected=repr(literal))
        raise UnexpectedChar(self.position(), expected=repr(literal), found=remaining[0])

    def read_identifier(self, expected: str = "identifier") -> str:
        """Read a run of letters, digits, hyphens and underscores."""
        m = _IDENT_RE.match(self.text, self.pos)
        if m is None:
            self._fail_missing(expected)
        self.pos = m.end()
        return m.group(0)

    def read_event_name(self) -> str:
        """Read an event name: anything up to whitespace, a comma or a bracket."""
        start = self.pos
        while not self.at_end() and self.text[self.pos] not in _EVENT_STOP:
            self.pos += 1
        if self.pos == start:
            self._fail_missing("event name")
        return self.text[start : self.pos]

    def read_number_with_unit(self, units: Mapping[str, int] = DURATION_UNITS) -> int:
        """
        Read an unsigned integer with an optional unit suffix.

        Returns the value in milliseconds. ``1.5s`` and ``-1`` are rejected
        as invalid numbers; an unknown suffix such as ``10h`` is an
        unexpected character at the suffix.
        """
        start = self.pos
        m = _DIGITS_RE.match(self.text, start)
        if m is None or self.text.startswith(".", m.end()):
            raise InvalidNumber(self.position(start), self.raw_token(start))

        end = m.end()
        multiplier = 1
        suffix_m = _UNIT_RE.match(self.text, end)
        if suffix_m is not None:
            suffix = suffix_m.group(0)
            if suffix not in units:
                raise UnexpectedChar(
                    self.position(end),
                    expected="unit " + " or ".join(repr(u) for u in units),
                    found=suffix,
                )
            multiplier = units[suffix]
            end = suffix_m.end()

        self.pos = end
        return int(m.group(0)) * multiplier

    def read_bracketed_raw(self) -> str:
        """Read ``[...]`` and return the inner text. The first ``]`` closes."""
        self.expect("[")
        close = self.text.find("]", self.pos)
        if close == -1:
            raise UnexpectedEnd(self.position(len(self.text)), expected="']'")
        raw = self.text[self.pos : close]
        self.pos = close + 1
        return raw

    def read_quoted_or_bare_token(self) -> str:
        """
        Read a selector or string argument.

        A quoted token returns the text between the quotes; a bare token
        runs to the next whitespace, comma or end of input and may be empty.
        """
        quote = self.peek_char()
        if quote in ('"', "'"):
            close = self.text.find(quote, self.pos + 1)
            if close == -1:
                raise UnexpectedEnd(self.position(len(self.text)), expected=f"closing {quote}")
            value = self.text[self.pos + 1 : close]
            self.pos = close + 1
            return value

        start = self.pos
        while not self.at_boundary():
            self.pos += 1
        return self.text[start : self.pos]

    def raw_token(self, start: int) -> str:
        """Text from ``start`` up to the next whitespace, comma or end of input."""
        end = start
        while end < len(self.text) and self.text[end] not in WHITESPACE + ",":
            end += 1
        return self.text[start:end]

    def _fail_missing(self, expected: str) -> NoReturn:
        if self.at_end():
            raise UnexpectedEnd(self.position(), expected=expected)
        raise UnexpectedChar(self.position(), expected=expected, found=self.text[self.pos])
