"""
Attribute AST types.

Re-exports the trigger, swap and sync node types so callers can write
``from hxattrs import ir`` and refer to ``ir.TriggerDef`` and friends.
"""

from hxattrs.ir.swap import Strategy, SwapOptions
from hxattrs.ir.sync import SyncKind, SyncStrategy
from hxattrs.ir.triggers import (
    FLAG_MODIFIERS,
    SELECTOR_KEYWORDS,
    BodySelector,
    Changed,
    ClosestSelector,
    Consume,
    CssSelector,
    Debounce,
    Delay,
    DocumentSelector,
    Filter,
    FindSelector,
    From,
    Modifier,
    NextSelector,
    Once,
    Prevent,
    PreviousSelector,
    Queue,
    QueueMode,
    Selector,
    Target,
    ThisSelector,
    Throttle,
    TriggerDef,
    WindowSelector,
    format_triggers,
)

__all__ = [
    # Triggers
    "TriggerDef",
    "Modifier",
    "Once",
    "Changed",
    "Consume",
    "Prevent",
    "Delay",
    "Throttle",
    "Debounce",
    "From",
    "Target",
    "Filter",
    "Queue",
    "QueueMode",
    "FLAG_MODIFIERS",
    "format_triggers",
    # Selectors
    "Selector",
    "SELECTOR_KEYWORDS",
    "ThisSelector",
    "BodySelector",
    "WindowSelector",
    "DocumentSelector",
    "ClosestSelector",
    "FindSelector",
    "NextSelector",
    "PreviousSelector",
    "CssSelector",
    # Swap
    "Strategy",
    "SwapOptions",
    # Sync
    "SyncKind",
    "SyncStrategy",
]
