"""Tests for the sync attribute parser and SyncStrategy model."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from hxattrs import QueueMode, SyncKind, SyncStrategy
from hxattrs.errors import InvalidModifier, UnexpectedChar, UnexpectedEnd


class TestParse:
    @pytest.mark.parametrize(
        ("src", "expected"),
        [
            ("drop", SyncStrategy.drop()),
            ("replace", SyncStrategy.replace()),
            ("abort", SyncStrategy.abort()),
            ("queue", SyncStrategy.queue(QueueMode.LAST)),
            ("queue:first", SyncStrategy.queue(QueueMode.FIRST)),
            ("queue:last", SyncStrategy.queue(QueueMode.LAST)),
            ("queue:all", SyncStrategy.queue(QueueMode.ALL)),
            ("  drop\n", SyncStrategy.drop()),
        ],
    )
    def test_strategies(self, src: str, expected: SyncStrategy) -> None:
        assert SyncStrategy.parse(src) == expected

    def test_queue_last(self) -> None:
        result = SyncStrategy.parse("queue:last")
        assert result.kind == SyncKind.QUEUE
        assert result.mode == QueueMode.LAST

    def test_str(self) -> None:
        assert str(SyncStrategy.parse("queue:first")) == "queue:first"
        assert str(SyncStrategy.parse("drop")) == "drop"


class TestErrors:
    @pytest.mark.parametrize("src", ["", "   "])
    def test_empty(self, src: str) -> None:
        with pytest.raises(UnexpectedEnd):
            SyncStrategy.parse(src)

    def test_unknown_strategy(self) -> None:
        with pytest.raises(InvalidModifier) as exc_info:
            SyncStrategy.parse("bogus")
        assert exc_info.value.name == "bogus"

    def test_queue_mode_not_allowed_for_sync(self) -> None:
        with pytest.raises(InvalidModifier) as exc_info:
            SyncStrategy.parse("queue:drop")
        assert exc_info.value.name == "drop"
        assert exc_info.value.position.offset == 6

    def test_missing_queue_mode(self) -> None:
        with pytest.raises(UnexpectedEnd):
            SyncStrategy.parse("queue:")

    def test_trailing_input(self) -> None:
        with pytest.raises(UnexpectedChar) as exc_info:
            SyncStrategy.parse("drop extra")
        assert exc_info.value.position.offset == 5


class TestModel:
    def test_queue_requires_mode(self) -> None:
        with pytest.raises(ValidationError):
            SyncStrategy(kind=SyncKind.QUEUE)

    def test_queue_rejects_trigger_only_modes(self) -> None:
        with pytest.raises(ValidationError):
            SyncStrategy(kind=SyncKind.QUEUE, mode=QueueMode.REPLACE)

    def test_non_queue_rejects_mode(self) -> None:
        with pytest.raises(ValidationError):
            SyncStrategy(kind=SyncKind.DROP, mode=QueueMode.LAST)

    def test_frozen(self) -> None:
        strategy = SyncStrategy.drop()
        with pytest.raises(ValidationError):
            strategy.kind = SyncKind.REPLACE  # type: ignore[misc]
