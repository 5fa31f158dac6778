"""
Recursive descent parser for trigger attributes.

Grammar:
    triggers   → clause ("," clause)*
    clause     → EVENT poll? modifier*
    poll       → DURATION                      (only after the "every" event)
    modifier   → "[" RAW "]"
               | "once" | "changed" | "consume" | "prevent"
               | ("delay" | "throttle" | "debounce") ":" DURATION
               | ("from" | "target") ":" selector
               | "queue" ":" ("drop" | "replace" | "first" | "last" | "all")
    selector   → "this" | "body" | "window" | "document"
               | ("closest" | "find" | "next" | "previous") TOKEN
               | TOKEN                         (raw CSS)
    DURATION   → DIGITS ("ms" | "s")?

Modifiers are separated by whitespace; a filter bracket may follow the
event name or another filter directly.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable

from hxattrs.errors import InvalidModifier, InvalidSelector, ParseError, UnexpectedEnd
from hxattrs.ir.triggers import (
    FLAG_MODIFIERS,
    BodySelector,
    ClosestSelector,
    CssSelector,
    Debounce,
    Delay,
    DocumentSelector,
    Filter,
    FindSelector,
    From,
    Modifier,
    NextSelector,
    PreviousSelector,
    Queue,
    QueueMode,
    Selector,
    Target,
    ThisSelector,
    Throttle,
    TriggerDef,
    WindowSelector,
)
from hxattrs.scanner import Scanner

logger = logging.getLogger(__name__)

POLL_EVENT = "every"

_IDENT_START = re.compile(r"[A-Za-z0-9_-]")

_SIMPLE_SELECTORS: dict[str, Callable[[], Selector]] = {
    "this": ThisSelector,
    "body": BodySelector,
    "window": WindowSelector,
    "document": DocumentSelector,
}

_RELATIVE_SELECTORS: dict[str, Callable[..., Selector]] = {
    "closest": ClosestSelector,
    "find": FindSelector,
    "next": NextSelector,
    "previous": PreviousSelector,
}


class _TriggerParser:
    """Parser for one trigger attribute value."""

    def __init__(self, text: str) -> None:
        self.scanner = Scanner(text)
        self._value_modifiers: dict[str, Callable[[], Modifier]] = {
            "delay": lambda: Delay(ms=self.scanner.read_number_with_unit()),
            "throttle": lambda: Throttle(ms=self.scanner.read_number_with_unit()),
            "debounce": lambda: Debounce(ms=self.scanner.read_number_with_unit()),
            "from": lambda: From(selector=self.parse_selector()),
            "target": lambda: Target(selector=self.parse_selector()),
            "queue": self.parse_queue,
        }

    def parse(self) -> list[TriggerDef]:
        s = self.scanner
        s.skip_whitespace()
        if s.at_end():
            raise UnexpectedEnd(s.position(), expected="event name")

        triggers = [self.parse_clause()]
        while not s.at_end():
            s.expect(",")
            s.skip_whitespace()
            if s.at_end():
                raise UnexpectedEnd(s.position(), expected="event name after ','")
            triggers.append(self.parse_clause())
        return triggers

    def parse_clause(self) -> TriggerDef:
        """EVENT poll? modifier*, stopping before ',' or at end of input."""
        s = self.scanner
        s.skip_whitespace()
        event_name = s.read_event_name()

        poll_interval = None
        if event_name == POLL_EVENT:
            s.skip_whitespace()
            # Without an interval "every" is an ordinary event name
            if "0" <= (s.peek_char() or "") <= "9":
                poll_interval = s.read_number_with_unit()
                s.expect_boundary("[")

        modifiers: list[Modifier] = []
        while True:
            s.skip_whitespace()
            if s.at_end() or s.peek_char() == ",":
                break
            modifiers.append(self.parse_modifier())

        return TriggerDef(
            event_name=event_name,
            modifiers=tuple(modifiers),
            poll_interval=poll_interval,
        )

    def parse_modifier(self) -> Modifier:
        s = self.scanner
        if s.peek_char() == "[":
            modifier: Modifier = Filter(raw=s.read_bracketed_raw())
            s.expect_boundary("[")
            return modifier

        start = s.pos
        if not _IDENT_START.match(s.text, start):
            raise InvalidModifier(s.position(start), s.raw_token(start))
        name = s.read_identifier("modifier")
        if s.peek_char() == ":":
            handler = self._value_modifiers.get(name)
            if handler is None:
                raise InvalidModifier(s.position(start), name)
            s.expect(":")
            modifier = handler()
        else:
            flag = FLAG_MODIFIERS.get(name)
            if flag is None:
                raise InvalidModifier(s.position(start), name)
            modifier = flag()  # type: ignore[assignment]

        s.expect_boundary("[")
        return modifier

    def parse_queue(self) -> Queue:
        s = self.scanner
        start = s.pos
        value = s.read_identifier("queue mode")
        try:
            mode = QueueMode(value)
        except ValueError:
            raise InvalidModifier(s.position(start), value) from None
        return Queue(mode=mode)

    def parse_selector(self) -> Selector:
        s = self.scanner
        start = s.pos
        quoted = s.peek_char() in ('"', "'")
        token = s.read_quoted_or_bare_token()
        if not token:
            raise InvalidSelector(s.position(start), token)
        if quoted:
            return CssSelector(value=token)

        simple = _SIMPLE_SELECTORS.get(token)
        if simple is not None:
            return simple()

        relative = _RELATIVE_SELECTORS.get(token)
        if relative is not None:
            s.skip_whitespace()
            arg_start = s.pos
            arg = s.read_quoted_or_bare_token()
            if not arg:
                raise InvalidSelector(s.position(arg_start), token)
            return relative(value=arg)

        return CssSelector(value=token)


def parse_trigger(text: str) -> list[TriggerDef]:
    """
    Parse a trigger attribute into one TriggerDef per clause.

    Args:
        text: Attribute value, e.g. ``"click once, keyup[ctrlKey] delay:1s"``

    Returns:
        TriggerDefs in source order

    Raises:
        ParseError: At the first syntax error; the message includes a
            snippet of ``text`` with a caret at the failing column
    """
    try:
        triggers = _TriggerParser(text).parse()
    except ParseError as exc:
        exc.with_text(text)
        logger.debug("Trigger parse failed for %r: %s", text, exc.message)
        raise
    logger.debug("Parsed %d trigger clause(s) from %r", len(triggers), text)
    return triggers
