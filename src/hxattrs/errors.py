"""
Error types for attribute parsing.

Every parser failure is a ``ParseError`` subclass carrying the
``Position`` where the problem was detected. When the source text is
attached, ``str(error)`` renders a caret snippet under the offending
column.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Position:
    """
    Location inside an attribute value.

    Attributes:
        offset: Character offset from the start of the input (0-indexed)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """

    offset: int = 0
    line: int = 1
    column: int = 1

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"


class ParseError(Exception):
    """Base exception for all attribute parse failures."""

    def __init__(self, message: str, position: Position, text: str | None = None):
        self.message = message
        self.position = position
        self.text = text
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with location and snippet if available."""
        header = f"{self.position}: {self.message}"
        if self.text is None:
            return header
        return f"{header}\n{self._format_snippet()}"

    def _format_snippet(self) -> str:
        """Format the offending source line with an error marker."""
        assert self.text is not None
        lines = self.text.split("\n")
        line = lines[self.position.line - 1] if self.position.line <= len(lines) else ""
        prefix = f"{self.position.line:4d} | "
        marker = " " * (len(prefix) + self.position.column - 1) + "^"
        return f"{prefix}{line}\n{marker}"

    def with_text(self, text: str) -> ParseError:
        """Attach the source text so the message includes a snippet."""
        self.text = text
        self.args = (self._format_message(),)
        return self


class UnexpectedChar(ParseError):
    """The current character does not start any valid continuation."""

    def __init__(self, position: Position, expected: str, found: str = ""):
        self.expected = expected
        self.found = found
        if found:
            message = f"Expected {expected}, found {found!r}"
        else:
            message = f"Expected {expected}"
        super().__init__(message, position)


class UnexpectedEnd(ParseError):
    """Input ended in the middle of a construct."""

    def __init__(self, position: Position, expected: str):
        self.expected = expected
        super().__init__(f"Unexpected end of input, expected {expected}", position)


class InvalidNumber(ParseError):
    """A numeric literal is missing or malformed."""

    def __init__(self, position: Position, value: str):
        self.value = value
        super().__init__(f"Invalid number {value!r}", position)


class InvalidModifier(ParseError):
    """A modifier keyword (or modifier value) is not recognized."""

    def __init__(self, position: Position, name: str):
        self.name = name
        super().__init__(f"Unknown modifier {name!r}", position)


class InvalidSelector(ParseError):
    """A selector argument is empty or malformed."""

    def __init__(self, position: Position, value: str):
        self.value = value
        super().__init__(f"Invalid selector {value!r}", position)
