"""Tests for the formatter (core/formatter.py).

Pure function calls only.  Coverage:

* Padding, anchoring, and scalar-value width counting
* Line grouping
* Joining and UTF-8 encoding via ``render`` / ``format_items``
"""

from __future__ import annotations

import pytest

from lineup.core.formatter import format_items, group_lines, pad_item, render
from lineup.core.models import Anchor, LineLayout, OutputFormat, PadSpec


# ---------------------------------------------------------------------------
# pad_item
# ---------------------------------------------------------------------------

class TestPadItem:
    def test_right_anchor_prepends_fill(self) -> None:
        assert pad_item("hey", PadSpec(5, ".", Anchor.RIGHT)) == "..hey"

    def test_left_anchor_appends_fill(self) -> None:
        assert pad_item("hey", PadSpec(4, "-", Anchor.LEFT)) == "hey-"

    def test_span_zero_disables_padding(self) -> None:
        assert pad_item("hi", PadSpec(0, "#", Anchor.RIGHT)) == "hi"

    def test_item_at_span_unchanged(self) -> None:
        assert pad_item("here", PadSpec(4, "_", Anchor.RIGHT)) == "here"

    def test_longer_item_never_truncated(self) -> None:
        assert pad_item("hello", PadSpec(3, "_", Anchor.LEFT)) == "hello"

    def test_empty_item_becomes_all_fill(self) -> None:
        assert pad_item("", PadSpec(3, "*", Anchor.LEFT)) == "***"

    def test_width_counts_scalar_values_not_bytes(self) -> None:
        # "é" is two bytes but one character.
        assert pad_item("é", PadSpec(3, " ", Anchor.LEFT)) == "é  "

    def test_multibyte_pad_char(self) -> None:
        assert pad_item("😊😊", PadSpec(4, "👉", Anchor.RIGHT)) == "👉👉😊😊"

    def test_padding_is_idempotent(self) -> None:
        pad = PadSpec(6, ".", Anchor.RIGHT)
        once = pad_item("ab", pad)
        assert pad_item(once, pad) == once

    @pytest.mark.parametrize("item", ["", "a", "abc", "abcdef", "ééé", "💼"])
    @pytest.mark.parametrize("span", [0, 1, 3, 5])
    def test_never_shorter_than_item_or_span(self, item: str, span: int) -> None:
        padded = pad_item(item, PadSpec(span, "-", Anchor.LEFT))
        assert len(padded) >= max(len(item), span)
        assert padded.startswith(item)


# ---------------------------------------------------------------------------
# group_lines
# ---------------------------------------------------------------------------

class TestGroupLines:
    def test_zero_means_single_line(self) -> None:
        assert group_lines(["a", "b", "c"], LineLayout(0, "\n")) == [["a", "b", "c"]]

    def test_even_groups(self) -> None:
        assert group_lines(["a", "b", "c", "d"], LineLayout(2, "\n")) == [
            ["a", "b"],
            ["c", "d"],
        ]

    def test_last_group_may_be_short(self) -> None:
        assert group_lines(["a", "b", "c"], LineLayout(2, "\n")) == [["a", "b"], ["c"]]

    def test_empty_items(self) -> None:
        assert group_lines([], LineLayout(2, "\n")) == []
        assert group_lines([], LineLayout(0, "")) == []


# ---------------------------------------------------------------------------
# render / format_items
# ---------------------------------------------------------------------------

class TestRender:
    def test_default_format_joins_with_space(self) -> None:
        assert render(["a", "b"], OutputFormat()) == "a b"

    def test_one_item_per_line_right_anchored(self) -> None:
        fmt = OutputFormat(
            pad=PadSpec(5, ".", Anchor.RIGHT),
            line_layout=LineLayout(1, "\n"),
        )
        assert render(["hey", "hello", "hi"], fmt) == "..hey\nhello\n...hi"

    def test_left_anchored_single_line(self) -> None:
        fmt = OutputFormat(pad=PadSpec(4, "-", Anchor.LEFT), item_separator="|")
        assert render(["hey", "hello", "hi"], fmt) == "hey-|hello|hi--"

    def test_multibyte_separators_and_lines(self) -> None:
        fmt = OutputFormat(
            pad=PadSpec(4, "👉", Anchor.RIGHT),
            item_separator="🖖",
            line_layout=LineLayout(2, "🔩\n"),
        )
        expected = "👉👉😊😊🖖👉👉👉👶🔩\n👉💼💼💼"
        assert render(["😊😊", "👶", "💼💼💼"], fmt) == expected

    def test_no_trailing_line_separator(self) -> None:
        fmt = OutputFormat(item_separator=",", line_layout=LineLayout(2, ";"))
        assert render(["1", "2", "3", "4"], fmt) == "1,2;3,4"

    def test_accepts_generator(self) -> None:
        assert render((c for c in "abc"), OutputFormat(item_separator="-")) == "a-b-c"

    def test_empty_items_render_empty(self) -> None:
        fmt = OutputFormat(pad=PadSpec(3, ".", Anchor.LEFT), line_layout=LineLayout(1, "\n"))
        assert render([], fmt) == ""

    def test_format_items_encodes_utf8(self) -> None:
        fmt = OutputFormat(item_separator="·")
        assert format_items(["é", "ü"], fmt) == "é·ü".encode("utf-8")

    def test_format_items_empty(self) -> None:
        assert format_items([], OutputFormat()) == b""
