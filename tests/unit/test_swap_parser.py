"""Tests for the swap attribute parser."""

from __future__ import annotations

import logging

import pytest

from hxattrs import ParserConfig, Strategy, SwapOptions, parse_swap
from hxattrs.errors import InvalidNumber, UnexpectedChar, UnexpectedEnd


class TestStrategy:
    def test_full_example(self) -> None:
        opts = SwapOptions.parse("innerHTML swap:200ms settle:50ms scroll:top")
        assert opts == SwapOptions(
            strategy=Strategy.INNER_HTML,
            swap_delay=200,
            settle_delay=50,
            scroll="top",
            show="",
            focus_scroll=True,
        )

    def test_empty_input_gives_defaults(self) -> None:
        assert SwapOptions.parse("") == SwapOptions()

    @pytest.mark.parametrize(
        ("src", "expected"),
        [
            ("innerHTML", Strategy.INNER_HTML),
            ("outerHTML", Strategy.OUTER_HTML),
            ("beforeBegin", Strategy.BEFORE_BEGIN),
            ("afterBegin", Strategy.AFTER_BEGIN),
            ("beforeEnd", Strategy.BEFORE_END),
            ("afterEnd", Strategy.AFTER_END),
            ("beforeend", Strategy.BEFORE_END),
            ("delete", Strategy.DELETE),
            ("none", Strategy.NONE),
        ],
    )
    def test_strategy_keywords(self, src: str, expected: Strategy) -> None:
        assert SwapOptions.parse(src).strategy == expected

    def test_missing_strategy_defaults_to_inner_html(self) -> None:
        opts = SwapOptions.parse("swap:1s")
        assert opts.strategy == Strategy.INNER_HTML
        assert opts.swap_delay == 1000

    def test_strategy_only_recognised_first(self) -> None:
        opts = SwapOptions.parse("settle:10ms outerHTML")
        assert opts.strategy == Strategy.INNER_HTML
        assert opts.settle_delay == 10

    def test_leading_comma_does_not_hide_strategy(self) -> None:
        opts = SwapOptions.parse(", outerHTML")
        assert opts.strategy == Strategy.OUTER_HTML


class TestModifiers:
    def test_bare_number_is_milliseconds(self) -> None:
        assert SwapOptions.parse("settle:100").settle_delay == 100

    def test_show_keeps_value_verbatim(self) -> None:
        opts = SwapOptions.parse("outerHTML show:#el:top scroll:bottom")
        assert opts.show == "#el:top"
        assert opts.scroll == "bottom"

    def test_focus_scroll(self) -> None:
        assert SwapOptions.parse("focus-scroll:false").focus_scroll is False
        assert SwapOptions.parse("focus-scroll:true").focus_scroll is True

    def test_transition_and_ignore_title(self) -> None:
        opts = SwapOptions.parse("beforeend transition:true ignoreTitle:true")
        assert opts.transition is True
        assert opts.ignore_title is True

    def test_unknown_keys_ignored(self) -> None:
        assert SwapOptions.parse("innerHTML wobble:3 swap:5ms") == SwapOptions(swap_delay=5)

    def test_stray_commas_ignored(self) -> None:
        opts = SwapOptions.parse("outerHTML, swap:5")
        assert opts.strategy == Strategy.OUTER_HTML
        assert opts.swap_delay == 5

    def test_ignored_tokens_are_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="hxattrs.swap_parser"):
            SwapOptions.parse("innerHTML bogus")
        assert "Ignoring swap token 'bogus'" in caplog.text

    def test_last_value_wins(self) -> None:
        assert SwapOptions.parse("swap:1s swap:20ms").swap_delay == 20


class TestErrors:
    def test_bad_duration(self) -> None:
        with pytest.raises(InvalidNumber) as exc_info:
            SwapOptions.parse("innerHTML swap:abc")
        assert exc_info.value.value == "abc"
        assert exc_info.value.position.offset == 15

    def test_bad_unit(self) -> None:
        with pytest.raises(UnexpectedChar):
            SwapOptions.parse("settle:10h")

    def test_bad_boolean(self) -> None:
        with pytest.raises(UnexpectedChar) as exc_info:
            SwapOptions.parse("focus-scroll:maybe")
        assert exc_info.value.found == "maybe"

    def test_missing_boolean(self) -> None:
        with pytest.raises(UnexpectedEnd):
            SwapOptions.parse("focus-scroll:")

    def test_error_message_has_snippet(self) -> None:
        with pytest.raises(InvalidNumber) as exc_info:
            SwapOptions.parse("swap:x")
        assert "swap:x" in str(exc_info.value)


class TestConfigDefaults:
    def test_config_supplies_defaults(self) -> None:
        config = ParserConfig(default_swap_style=Strategy.OUTER_HTML, default_settle_delay=20)
        opts = parse_swap("swap:5ms", config)
        assert opts.strategy == Strategy.OUTER_HTML
        assert opts.settle_delay == 20
        assert opts.swap_delay == 5

    def test_attribute_overrides_config(self) -> None:
        config = ParserConfig(default_focus_scroll=False, default_settle_delay=20)
        opts = SwapOptions.parse("afterend settle:0 focus-scroll:true", config)
        assert opts.strategy == Strategy.AFTER_END
        assert opts.settle_delay == 0
        assert opts.focus_scroll is True


class TestRendering:
    @pytest.mark.parametrize(
        "src",
        [
            "innerHTML",
            "outerHTML swap:1s settle:20ms scroll:top show:#el:bottom",
            "beforebegin focus-scroll:false transition:true ignoreTitle:true",
        ],
    )
    def test_rendered_text_reparses_equal(self, src: str) -> None:
        opts = SwapOptions.parse(src)
        assert SwapOptions.parse(str(opts)) == opts
