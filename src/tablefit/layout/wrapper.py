"""Word wrapping that keeps inline style markup intact.

Wrapping happens in two steps. First the breaks are planned on the plain text
(markup stripped) with a greedy word wrap. Each break is an edit: a range of
plain characters to remove and the text to put in its place. The edits are
then replayed on the formatted text by walking its markup segments, so a
break never lands inside a tag. Any style open at an inserted break is closed
before it and reopened after it, so every output line carries its own styling.
"""

from __future__ import annotations

from dataclasses import dataclass

from rich.cells import cell_len, get_character_cell_size

from tablefit.layout import markup

WHITESPACE = " \t"
CLOSE_TAG = "[/]"


@dataclass(frozen=True, slots=True)
class Edit:
    """Replace plain characters ``start:end`` with ``replacement``."""

    start: int
    end: int
    replacement: str = "\n"


def _fit(line: str, start: int, width: int) -> int:
    """Index just past the longest run of ``line[start:]`` within ``width`` cells.

    Always advances by at least one character.
    """
    used = 0
    index = start
    while index < len(line):
        size = get_character_cell_size(line[index])
        if used + size > width:
            break
        used += size
        index += 1
    return max(index, start + 1)


def _line_edits(line: str, offset: int, width: int) -> list[Edit]:
    """Plan the breaks for a single line that contains no newline."""
    edits: list[Edit] = []
    position = 0
    length = len(line)

    while cell_len(line[position:]) > width:
        end = _fit(line, position, width)

        if not line[position:end].strip(WHITESPACE):
            # Only whitespace fits on this line: drop it.
            content = position
            while content < length and line[content] in WHITESPACE:
                content += 1
            edits.append(Edit(offset + position, offset + content, ""))
            position = content
            continue

        # Last whitespace at or before the boundary with text in front of it.
        split = -1
        for index in range(min(end, length - 1), position, -1):
            if line[index] in WHITESPACE and line[position:index].strip(WHITESPACE):
                split = index
                break

        if split == -1:
            if end >= length:
                # A single character wider than the line.
                break
            # A single word is wider than the line: cut it.
            edits.append(Edit(offset + end, offset + end))
            position = end
            continue

        left = split
        while left > position and line[left - 1] in WHITESPACE:
            left -= 1
        right = split + 1
        while right < length and line[right] in WHITESPACE:
            right += 1

        if right == length:
            # Only trailing whitespace remains after the break.
            edits.append(Edit(offset + left, offset + right, ""))
            break
        edits.append(Edit(offset + left, offset + right))
        position = right

    return edits


def fits(text: str, width: int) -> bool:
    """Whether every line of plain ``text`` is at most ``width`` cells wide."""
    return all(cell_len(line) <= width for line in text.split("\n"))


def plan_breaks(plain: str, width: int) -> list[Edit]:
    """Plan the edits that word-wrap ``plain`` to ``width`` display cells.

    Leading spaces on the first line are kept as an indent: the rest of the
    text wraps at ``width`` minus the indent. Existing line breaks are never
    moved.
    """
    width = max(width, 1)
    indent = len(plain) - len(plain.lstrip(" "))
    if indent:
        width = max(width - indent, 1)

    edits: list[Edit] = []
    offset = indent
    for line in plain[indent:].split("\n"):
        edits.extend(_line_edits(line, offset, width))
        offset += len(line) + 1
    return edits


def apply_plain(plain: str, edits: list[Edit]) -> str:
    """Apply planned edits to plain text."""
    pieces: list[str] = []
    position = 0
    for edit in edits:
        pieces.append(plain[position : edit.start])
        pieces.append(edit.replacement)
        position = edit.end
    pieces.append(plain[position:])
    return "".join(pieces)


def wrap_plain(text: str, width: int) -> str:
    """Greedy word wrap of plain text.

    Text that already fits is returned unchanged.
    """
    width = max(width, 1)
    if fits(text, width):
        return text
    return apply_plain(text, plan_breaks(text, width))


def _splice(segments: list[markup.Segment], edits: list[Edit]) -> str:
    """Replay plain-text edits on formatted text.

    Removed characters are skipped wherever they sit between tags. A pending
    line break is written just before the next kept character or opening tag,
    so closing tags stay on the upper line and opening tags move down.
    """
    starts = {edit.start: edit for edit in edits}
    removed: set[int] = set()
    for edit in edits:
        removed.update(range(edit.start, edit.end))

    out: list[str] = []
    stack: list[markup.Segment] = []
    pending = ""
    position = 0

    def flush() -> None:
        nonlocal pending
        if pending:
            out.append(CLOSE_TAG * len(stack))
            out.append(pending)
            out.extend(tag.raw for tag in stack)
        pending = ""

    def enter(index: int) -> None:
        nonlocal pending
        edit = starts.get(index)
        if edit is not None:
            pending = edit.replacement

    enter(0)
    for segment in segments:
        if segment.is_tag:
            if segment.is_closing:
                _close(stack, segment)
            else:
                flush()
                stack.append(segment)
            out.append(segment.raw)
            continue

        if segment.raw == segment.plain:
            for char in segment.raw:
                if position not in removed:
                    flush()
                    out.append(char)
                position += 1
                enter(position)
        else:
            if position not in removed:
                flush()
                out.append(segment.raw)
            position += len(segment.plain)
            enter(position)

    return "".join(out)


def _close(stack: list[markup.Segment], closing: markup.Segment) -> None:
    if not stack:
        return
    name = closing.name
    if not name:
        stack.pop()
        return
    for index in range(len(stack) - 1, -1, -1):
        if stack[index].name == name:
            del stack[index]
            return


def wrap(formatted_text: str, width: int) -> str:
    """Word-wrap formatted text to ``width`` display cells.

    Stripping markup from the result gives ``wrap_plain`` of the stripped
    input. A break inside a styled span closes the span with ``[/]`` and
    reopens it on the next line.

    Args:
        formatted_text: Text with inline Rich markup.
        width: Target width in display cells; values below 1 count as 1.

    Returns:
        The wrapped formatted text, or the input itself if it already fits.
    """
    width = max(width, 1)
    plain = markup.strip(formatted_text)
    if fits(plain, width):
        return formatted_text

    return _splice(markup.parse(formatted_text), plan_breaks(plain, width))
