"""Rich table painting for adaptive layouts.

This module provides the Table class used for all CLI table output and the
``paint`` function that turns an already-wrapped layout into one.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Literal

from rich.table import Table as RichTable
from rich.text import Text

from tablefit.layout.cells import Cell, Row, RowLike

if TYPE_CHECKING:
    from rich.console import ConsoleRenderable, RichCast
    from rich.style import Style

OverflowMethod = Literal["fold", "crop", "ellipsis", "ignore"]
JustifyMethod = Literal["default", "left", "center", "right", "full"]


class Table(RichTable):
    """Rich Table whose columns fold overlong text instead of cropping it.

    Usage:
        from tablefit.cli.output import Table

        table = Table(title="Settings")
        table.add_column("Name")  # Will wrap long text by default
        table.add_column("ID", no_wrap=True)
        table.add_row("example-name", "abc123")
    """

    def add_column(
        self,
        header: ConsoleRenderable | RichCast | str = "",
        footer: ConsoleRenderable | RichCast | str = "",
        *,
        header_style: Style | str | None = None,
        style: Style | str | None = None,
        justify: JustifyMethod = "default",
        overflow: OverflowMethod = "fold",
        width: int | None = None,
        min_width: int | None = None,
        max_width: int | None = None,
        no_wrap: bool = False,
    ) -> None:
        """Add a column with overflow="fold" by default.

        Args:
            header: Column header text or renderable.
            footer: Column footer text or renderable.
            header_style: Style for the header.
            style: Style for the column cells.
            justify: How to justify cell contents.
            overflow: How to handle text overflow. Defaults to "fold".
            width: Fixed column width.
            min_width: Minimum column width.
            max_width: Maximum column width.
            no_wrap: Disable text wrapping.
        """
        super().add_column(
            header,
            footer,
            header_style=header_style,
            style=style,
            justify=justify,
            overflow=overflow,
            width=width,
            min_width=min_width,
            max_width=max_width,
            no_wrap=no_wrap,
        )


def cell_text(cell: Cell) -> Text:
    """Render a cell's markup without emoji substitution.

    Emoji codes would change the display width the layout was planned with.
    """
    return Text.from_markup(cell.text, emoji=False)


def spread(row: Row, column_count: int) -> list[Text]:
    """Lay a row's cells out over ``column_count`` painter columns.

    Rich has no column spans, so a spanning cell is painted in its first
    column and the columns it covers are left empty.
    """
    texts: list[Text] = []
    for cell in row:
        texts.append(cell_text(cell))
        texts.extend(Text() for _ in range(cell.span - 1))
    texts.extend(Text() for _ in range(column_count - len(texts)))
    return texts


def paint(
    headers: Sequence[Row],
    rows: Sequence[RowLike],
    widths: dict[int, int],
    *,
    title: str | None = None,
    no_wrap: Sequence[int] = (),
) -> Table:
    """Build a Table from wrapped rows and planned column widths.

    The first header row becomes the column headers; further header rows are
    painted in the header style above a section line. Separators end a
    section.

    Args:
        headers: Header rows.
        rows: Wrapped body rows and separators.
        widths: Target width per column index.
        title: Optional table title.
        no_wrap: Column indexes that hold non-wrappable cells.
    """
    column_count = len(widths)
    table = Table(title=title, show_header=bool(headers))
    header_cells = spread(headers[0], column_count) if headers else [Text()] * column_count

    for index in range(column_count):
        table.add_column(
            header_cells[index],
            max_width=widths[index],
            no_wrap=index in no_wrap,
        )

    extra_headers = headers[1:]
    for number, header in enumerate(extra_headers, 1):
        table.add_row(
            *spread(header, column_count),
            style=table.header_style,
            end_section=number == len(extra_headers),
        )

    for row in rows:
        if isinstance(row, Row):
            table.add_row(*spread(row, column_count))
        else:
            table.add_section()

    return table
