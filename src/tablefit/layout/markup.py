"""Tokenizer for Rich console markup.

Cell text may carry inline style tags such as ``[bold]``, ``[/bold]``, ``[/]``
or ``[link=https://example.com]``. Layout code needs the text without those
tags to measure it, and the wrapper needs to know exactly where each tag sits
so line breaks can be spliced around them.

``parse`` splits markup into segments. Each segment is one of:

* a text run, whose ``raw`` and ``plain`` are identical;
* an escape atom, a single plain character written with a backslash escape
  (``\\[`` renders as ``[`` and ``\\\\`` before a tag renders as ``\\``);
* a tag, with an empty ``plain`` and the tag body in ``tag``.

The grammar follows ``rich.markup`` so that ``strip(text)`` equals
``Text.from_markup(text, emoji=False).plain``.
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass

from rich.cells import cell_len
from rich.markup import escape

__all__ = ["Segment", "cell_width", "escape", "parse", "strip"]

RE_TAGS = re.compile(
    r"""((\\*)\[([a-z#/@][^[]*?)])""",
    re.VERBOSE,
)
RE_ESCAPED_BRACKET = re.compile(r"(\\\[)")


@dataclass(frozen=True, slots=True)
class Segment:
    """One token of parsed markup."""

    raw: str
    plain: str = ""
    tag: str | None = None

    @property
    def is_tag(self) -> bool:
        return self.tag is not None

    @property
    def is_closing(self) -> bool:
        return self.tag is not None and self.tag.startswith("/")

    @property
    def name(self) -> str:
        """Style name used to pair an opening tag with its explicit close."""
        if self.tag is None:
            return ""
        name, _, _ = self.tag.lstrip("/").partition("=")
        return " ".join(name.lower().split())


def _text_segments(text: str) -> Iterator[Segment]:
    for piece in RE_ESCAPED_BRACKET.split(text):
        if not piece:
            continue
        if piece == "\\[":
            yield Segment(piece, "[")
        else:
            yield Segment(piece, piece)


def parse(text: str) -> list[Segment]:
    """Split markup into text, escape and tag segments.

    Concatenating the ``raw`` of every segment gives back ``text``.
    """
    segments: list[Segment] = []
    position = 0
    for match in RE_TAGS.finditer(text):
        full_text, escapes, tag_text = match.groups()
        start, end = match.span()
        if start > position:
            segments.extend(_text_segments(text[position:start]))
        if escapes:
            backslashes, escaped = divmod(len(escapes), 2)
            segments.extend(Segment("\\\\", "\\") for _ in range(backslashes))
            if escaped:
                # An odd backslash makes the whole tag literal text.
                literal = full_text[len(escapes) :]
                segments.append(Segment("\\[", "["))
                segments.append(Segment(literal[1:], literal[1:]))
                position = end
                continue
        segments.append(Segment(full_text[len(escapes) :], tag=tag_text))
        position = end
    if position < len(text):
        segments.extend(_text_segments(text[position:]))
    return segments


def strip(text: str) -> str:
    """Remove all style markup, leaving the text as it is displayed."""
    if "[" not in text:
        return text
    return "".join(segment.plain for segment in parse(text))


def cell_width(text: str) -> int:
    """Display width of the longest line of ``text``, ignoring markup."""
    return max((cell_len(line) for line in strip(text).split("\n")), default=0)
