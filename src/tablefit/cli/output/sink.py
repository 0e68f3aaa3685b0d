"""Output sinks for adaptive tables.

A sink is where a rendered table ends up. Besides writing, it knows how to
strip and measure the style markup it understands, which is all the layout
code needs from a terminal styling engine.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from rich.console import Console
from rich.segment import Segments

from tablefit.layout import markup

if TYPE_CHECKING:
    from rich.console import RenderableType


@runtime_checkable
class OutputSink(Protocol):
    """Capability to write styled output and measure styled text."""

    @property
    def width(self) -> int:
        """Width of the output device in display cells."""
        ...

    def write(self, renderable: RenderableType, *, width: int | None = None) -> None:
        """Write a renderable, laid out at ``width`` cells if given."""
        ...

    def strip_markup(self, text: str) -> str:
        """Return ``text`` without style markup."""
        ...

    def measure(self, text: str) -> int:
        """Display width of the longest line of ``text``, ignoring markup."""
        ...


class RichSink:
    """Sink writing to a Rich console and understanding Rich markup."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    @property
    def width(self) -> int:
        return self.console.width

    def write(self, renderable: RenderableType, *, width: int | None = None) -> None:
        """Print a renderable.

        Rich never lays out wider than the console, so output wider than the
        console is rendered to lines first and printed without cropping.
        """
        if width is None or width <= self.console.width:
            self.console.print(renderable, width=width)
            return

        options = self.console.options.update_width(width)
        lines = self.console.render_lines(renderable, options, pad=False, new_lines=True)
        self.console.print(
            Segments(segment for line in lines for segment in line),
            end="",
            crop=False,
        )

    def strip_markup(self, text: str) -> str:
        return markup.strip(text)

    def measure(self, text: str) -> int:
        return markup.cell_width(text)
