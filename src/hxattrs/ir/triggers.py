"""
Trigger AST types.

A trigger attribute such as ``keyup changed delay:500ms from:#search``
parses into one ``TriggerDef`` per comma-separated clause. Modifiers and
selectors are closed tagged unions discriminated on ``kind``.

``str()`` on any node renders canonical trigger text that parses back to
an equal node.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated, Literal, TypeVar

from pydantic import BaseModel, ConfigDict, Field

# ---------------------------------------------------------------------------
# Queue modes
# ---------------------------------------------------------------------------


class QueueMode(StrEnum):
    """Which pending request survives when requests overlap."""

    DROP = "drop"
    REPLACE = "replace"
    FIRST = "first"
    LAST = "last"
    ALL = "all"


# ---------------------------------------------------------------------------
# Selectors
# ---------------------------------------------------------------------------


class _Node(BaseModel):
    model_config = ConfigDict(frozen=True)


class ThisSelector(_Node):
    kind: Literal["this"] = "this"

    def __str__(self) -> str:
        return "this"


class BodySelector(_Node):
    kind: Literal["body"] = "body"

    def __str__(self) -> str:
        return "body"


class WindowSelector(_Node):
    kind: Literal["window"] = "window"

    def __str__(self) -> str:
        return "window"


class DocumentSelector(_Node):
    kind: Literal["document"] = "document"

    def __str__(self) -> str:
        return "document"


class ClosestSelector(_Node):
    """Nearest ancestor (or self) matching ``value``."""

    kind: Literal["closest"] = "closest"
    value: str = Field(min_length=1)

    def __str__(self) -> str:
        return f"closest {_quote_if_needed(self.value)}"


class FindSelector(_Node):
    """First descendant matching ``value``."""

    kind: Literal["find"] = "find"
    value: str = Field(min_length=1)

    def __str__(self) -> str:
        return f"find {_quote_if_needed(self.value)}"


class NextSelector(_Node):
    """Next element in document order matching ``value``."""

    kind: Literal["next"] = "next"
    value: str = Field(min_length=1)

    def __str__(self) -> str:
        return f"next {_quote_if_needed(self.value)}"


class PreviousSelector(_Node):
    """Previous element in document order matching ``value``."""

    kind: Literal["previous"] = "previous"
    value: str = Field(min_length=1)

    def __str__(self) -> str:
        return f"previous {_quote_if_needed(self.value)}"


class CssSelector(_Node):
    """A plain CSS selector, captured verbatim."""

    kind: Literal["css"] = "css"
    value: str = Field(min_length=1)

    def __str__(self) -> str:
        if self.value in SELECTOR_KEYWORDS:
            return f'"{self.value}"'
        return _quote_if_needed(self.value)


Selector = Annotated[
    ThisSelector
    | BodySelector
    | WindowSelector
    | DocumentSelector
    | ClosestSelector
    | FindSelector
    | NextSelector
    | PreviousSelector
    | CssSelector,
    Field(discriminator="kind"),
]

SELECTOR_KEYWORDS = frozenset(
    {"this", "body", "window", "document", "closest", "find", "next", "previous"}
)


def _quote_if_needed(value: str) -> str:
    if any(ch.isspace() or ch == "," for ch in value) or value[:1] in ('"', "'"):
        quote = "'" if '"' in value else '"'
        return f"{quote}{value}{quote}"
    return value


# ---------------------------------------------------------------------------
# Modifiers
# ---------------------------------------------------------------------------


class Once(_Node):
    """Fire at most once."""

    kind: Literal["once"] = "once"

    def __str__(self) -> str:
        return "once"


class Changed(_Node):
    """Fire only when the element's value changed."""

    kind: Literal["changed"] = "changed"

    def __str__(self) -> str:
        return "changed"


class Consume(_Node):
    """Stop the event from propagating."""

    kind: Literal["consume"] = "consume"

    def __str__(self) -> str:
        return "consume"


class Prevent(_Node):
    """Prevent the event's default action."""

    kind: Literal["prevent"] = "prevent"

    def __str__(self) -> str:
        return "prevent"


class Delay(_Node):
    kind: Literal["delay"] = "delay"
    ms: int = Field(ge=0, description="Delay in milliseconds")

    def __str__(self) -> str:
        return f"delay:{self.ms}ms"


class Throttle(_Node):
    kind: Literal["throttle"] = "throttle"
    ms: int = Field(ge=0, description="Throttle window in milliseconds")

    def __str__(self) -> str:
        return f"throttle:{self.ms}ms"


class Debounce(_Node):
    kind: Literal["debounce"] = "debounce"
    ms: int = Field(ge=0, description="Debounce window in milliseconds")

    def __str__(self) -> str:
        return f"debounce:{self.ms}ms"


class From(_Node):
    """Listen for the event on another element."""

    kind: Literal["from"] = "from"
    selector: Selector

    def __str__(self) -> str:
        return f"from:{self.selector}"


class Target(_Node):
    """Only fire when the event target matches the selector."""

    kind: Literal["target"] = "target"
    selector: Selector

    def __str__(self) -> str:
        return f"target:{self.selector}"


class Filter(_Node):
    """Bracketed condition, kept as opaque text without the brackets."""

    kind: Literal["filter"] = "filter"
    raw: str

    def __str__(self) -> str:
        return f"[{self.raw}]"


class Queue(_Node):
    kind: Literal["queue"] = "queue"
    mode: QueueMode

    def __str__(self) -> str:
        return f"queue:{self.mode}"


Modifier = Annotated[
    Once
    | Changed
    | Consume
    | Prevent
    | Delay
    | Throttle
    | Debounce
    | From
    | Target
    | Filter
    | Queue,
    Field(discriminator="kind"),
]

FLAG_MODIFIERS: dict[str, type[_Node]] = {
    "once": Once,
    "changed": Changed,
    "consume": Consume,
    "prevent": Prevent,
}

_M = TypeVar("_M", bound=_Node)


# ---------------------------------------------------------------------------
# Trigger definition
# ---------------------------------------------------------------------------


class TriggerDef(BaseModel):
    """
    One event clause of a trigger attribute.

    ``modifiers`` keeps every modifier in source order, duplicates included.
    The ``get_*`` helpers answer single-value questions with the last
    matching modifier.

    Examples:
        - ``click`` → TriggerDef(event_name="click")
        - ``every 2s [ready]`` → TriggerDef(event_name="every",
          poll_interval=2000, modifiers=(Filter(raw="ready"),))
    """

    event_name: str = Field(min_length=1, description="DOM event name")
    modifiers: tuple[Modifier, ...] = Field(default=(), description="Modifiers in source order")
    poll_interval: int | None = Field(
        default=None, ge=0, description="Polling interval in ms for 'every' triggers"
    )

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        head = self.event_name
        if self.poll_interval is not None:
            head = f"{head} {self.poll_interval}ms"
        parts = [head]
        for modifier in self.modifiers:
            # Filters attach directly to the event name when they come first
            if isinstance(modifier, Filter) and len(parts) == 1 and self.poll_interval is None:
                parts[0] += str(modifier)
            else:
                parts.append(str(modifier))
        return " ".join(parts)

    @property
    def is_polling(self) -> bool:
        return self.poll_interval is not None

    def has(self, kind: str) -> bool:
        """True if any modifier of ``kind`` is present."""
        return any(m.kind == kind for m in self.modifiers)

    def _last(self, cls: type[_M]) -> _M | None:
        for modifier in reversed(self.modifiers):
            if isinstance(modifier, cls):
                return modifier
        return None

    def get_delay(self) -> int | None:
        found = self._last(Delay)
        return found.ms if found else None

    def get_throttle(self) -> int | None:
        found = self._last(Throttle)
        return found.ms if found else None

    def get_debounce(self) -> int | None:
        found = self._last(Debounce)
        return found.ms if found else None

    def get_from(self) -> Selector | None:
        found = self._last(From)
        return found.selector if found else None

    def get_target(self) -> Selector | None:
        found = self._last(Target)
        return found.selector if found else None

    def get_queue(self) -> QueueMode | None:
        found = self._last(Queue)
        return found.mode if found else None

    def get_filters(self) -> list[str]:
        """All filter conditions in source order."""
        return [m.raw for m in self.modifiers if isinstance(m, Filter)]


def format_triggers(triggers: list[TriggerDef]) -> str:
    """Render parsed triggers back to attribute text."""
    return ", ".join(str(t) for t in triggers)
