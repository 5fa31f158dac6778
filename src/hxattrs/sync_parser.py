"""
Parser for sync attributes.

Accepted forms: ``drop``, ``replace``, ``abort``, ``queue`` (same as
``queue:last``), and ``queue:first`` / ``queue:last`` / ``queue:all``.
"""

from __future__ import annotations

from hxattrs.errors import InvalidModifier, ParseError, UnexpectedChar, UnexpectedEnd
from hxattrs.ir.sync import SYNC_QUEUE_MODES, SyncKind, SyncStrategy
from hxattrs.ir.triggers import QueueMode
from hxattrs.scanner import Scanner


def _parse(s: Scanner) -> SyncStrategy:
    s.skip_whitespace()
    if s.at_end():
        raise UnexpectedEnd(s.position(), expected="sync strategy")

    start = s.pos
    name = s.read_identifier("sync strategy")
    try:
        kind = SyncKind(name)
    except ValueError:
        raise InvalidModifier(s.position(start), name) from None

    mode = None
    if kind == SyncKind.QUEUE:
        mode = QueueMode.LAST
        if s.peek_char() == ":":
            s.expect(":")
            mode_start = s.pos
            value = s.read_identifier("queue mode")
            if value not in SYNC_QUEUE_MODES:
                raise InvalidModifier(s.position(mode_start), value)
            mode = QueueMode(value)

    s.skip_whitespace()
    if not s.at_end():
        raise UnexpectedChar(s.position(), expected="end of input", found=s.text[s.pos])
    return SyncStrategy(kind=kind, mode=mode)


def parse_sync(text: str) -> SyncStrategy:
    """
    Parse a sync attribute.

    Raises:
        ParseError: For empty input, an unknown strategy or queue mode, or
            trailing text after the strategy
    """
    try:
        return _parse(Scanner(text))
    except ParseError as exc:
        exc.with_text(text)
        raise
