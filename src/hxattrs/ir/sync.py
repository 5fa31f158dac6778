"""
Sync AST types.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, model_validator

from hxattrs.ir.triggers import QueueMode

SYNC_QUEUE_MODES = frozenset({QueueMode.FIRST, QueueMode.LAST, QueueMode.ALL})


class SyncKind(StrEnum):
    """How a new request interacts with one already in flight."""

    DROP = "drop"
    REPLACE = "replace"
    ABORT = "abort"
    QUEUE = "queue"


class SyncStrategy(BaseModel):
    """
    Parsed sync attribute.

    ``mode`` is set exactly when ``kind`` is ``queue``, and is one of
    first, last or all.
    """

    kind: SyncKind
    mode: QueueMode | None = None

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def _check_mode(self) -> SyncStrategy:
        if self.kind == SyncKind.QUEUE:
            if self.mode not in SYNC_QUEUE_MODES:
                raise ValueError(f"queue sync needs one of first/last/all, got {self.mode}")
        elif self.mode is not None:
            raise ValueError(f"{self.kind} sync takes no queue mode")
        return self

    @classmethod
    def drop(cls) -> SyncStrategy:
        return cls(kind=SyncKind.DROP)

    @classmethod
    def replace(cls) -> SyncStrategy:
        return cls(kind=SyncKind.REPLACE)

    @classmethod
    def abort(cls) -> SyncStrategy:
        return cls(kind=SyncKind.ABORT)

    @classmethod
    def queue(cls, mode: QueueMode) -> SyncStrategy:
        return cls(kind=SyncKind.QUEUE, mode=mode)

    @classmethod
    def parse(cls, text: str) -> SyncStrategy:
        """Parse a sync attribute value."""
        from hxattrs.sync_parser import parse_sync

        return parse_sync(text)

    def __str__(self) -> str:
        if self.mode is not None:
            return f"{self.kind}:{self.mode}"
        return str(self.kind)
