"""Unit tests for the Rich markup tokenizer."""

from __future__ import annotations

import pytest
from rich.text import Text

from tablefit.layout.markup import Segment, cell_width, escape, parse, strip


@pytest.mark.unit
class TestParse:
    """Tests for parse()."""

    def test_plain_text_is_one_segment(self) -> None:
        assert parse("hello") == [Segment("hello", "hello")]

    def test_tags_are_separate_segments(self) -> None:
        segments = parse("[bold]hi[/bold]")
        assert [segment.raw for segment in segments] == ["[bold]", "hi", "[/bold]"]
        assert segments[0].tag == "bold"
        assert segments[0].plain == ""
        assert segments[2].is_closing

    def test_raw_concatenates_to_input(self) -> None:
        text = "a [b]b[/b] \\[c] \\\\[d]e[/d] [/]"
        assert "".join(segment.raw for segment in parse(text)) == text

    def test_escaped_tag_becomes_text(self) -> None:
        segments = parse("\\[bold]x")
        assert not any(segment.is_tag for segment in segments)
        assert "".join(segment.plain for segment in segments) == "[bold]x"

    def test_double_backslash_keeps_tag(self) -> None:
        segments = parse("\\\\[bold]x[/bold]")
        assert segments[0] == Segment("\\\\", "\\")
        assert segments[1].tag == "bold"

    def test_brackets_without_tag_name_are_text(self) -> None:
        assert parse("[1, 2]") == [Segment("[1, 2]", "[1, 2]")]

    def test_tag_name_ignores_parameters_and_case(self) -> None:
        assert parse("[link=https://x.io]")[0].name == "link"
        assert parse("[/Bold  Red]")[0].name == "bold red"

    def test_implicit_close_has_no_name(self) -> None:
        segment = parse("[/]")[0]
        assert segment.is_closing
        assert segment.name == ""


@pytest.mark.unit
class TestStrip:
    """Tests for strip() and cell_width()."""

    @pytest.mark.parametrize(
        "text",
        [
            "plain",
            "[bold]bold[/bold] and [italic]italic[/]",
            "[link=https://example.com]link[/link]",
            "\\[not a tag]",
            "\\\\[bold]backslash then bold[/bold]",
            "list [1, 2, 3]",
            "line one\n[red]line two[/red]",
            "text with \\[ escaped bracket",
        ],
    )
    def test_matches_rich(self, text: str) -> None:
        assert strip(text) == Text.from_markup(text, emoji=False).plain

    def test_escape_round_trips(self) -> None:
        assert strip(escape("[bold]literal[/bold]")) == "[bold]literal[/bold]"

    def test_cell_width_uses_longest_line(self) -> None:
        assert cell_width("[b]abc[/b]\nabcdef\nab") == 6

    def test_cell_width_of_empty_text(self) -> None:
        assert cell_width("") == 0

    def test_cell_width_counts_wide_characters(self) -> None:
        assert cell_width("[b]日本[/b]") == 4
