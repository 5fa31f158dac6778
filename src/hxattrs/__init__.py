"""
hxattrs - parsers for hypermedia trigger, swap and sync attributes.

Usage:
    from hxattrs import SwapOptions, SyncStrategy, parse_trigger

    triggers = parse_trigger("keyup changed delay:500ms, search")
    triggers[0].get_delay()
    # 500

    SwapOptions.parse("outerHTML settle:1s").settle_delay
    # 1000

    SyncStrategy.parse("queue:first")
"""

from hxattrs.config import ParserConfig, load_config
from hxattrs.errors import (
    InvalidModifier,
    InvalidNumber,
    InvalidSelector,
    ParseError,
    Position,
    UnexpectedChar,
    UnexpectedEnd,
)
from hxattrs.ir import QueueMode, Strategy, SwapOptions, SyncKind, SyncStrategy, TriggerDef
from hxattrs.ir.triggers import format_triggers
from hxattrs.swap_parser import parse_swap
from hxattrs.sync_parser import parse_sync
from hxattrs.trigger_parser import parse_trigger

__version__ = "0.1.0"

__all__ = [
    "parse_trigger",
    "parse_swap",
    "parse_sync",
    "format_triggers",
    "TriggerDef",
    "QueueMode",
    "Strategy",
    "SwapOptions",
    "SyncKind",
    "SyncStrategy",
    "ParserConfig",
    "load_config",
    # Errors
    "Position",
    "ParseError",
    "UnexpectedChar",
    "UnexpectedEnd",
    "InvalidNumber",
    "InvalidModifier",
    "InvalidSelector",
]
