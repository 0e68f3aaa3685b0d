"""Render command for printing tabular files as adaptive tables."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

import typer
from rich.console import Console

from tablefit.cli.output import AdaptiveTable, RichSink, StructuredCell
from tablefit.core.config.models import load_config, resolve_table_config
from tablefit.layout import TableError, to_cell
from tablefit.layout.markup import escape
from tablefit.logging import get_logger
from tablefit.utils.sources import FORMATS, detect_format, parse_table

console = Console()
logger = get_logger(__name__)


def _read_source(source: str) -> tuple[str, Path | None]:
    if source == "-":
        return sys.stdin.read(), None
    path = Path(source)
    return path.read_text(encoding="utf-8"), path


def _prepare_row(values: list[Any], no_wrap: set[int], markup: bool) -> list[Any]:
    """Turn raw values into cells, escaping markup and pinning no-wrap columns."""
    cells = []
    for index, value in enumerate(values):
        text = to_cell(value).text
        if not markup:
            text = escape(text)
        if index in no_wrap:
            cells.append(StructuredCell(text, wrappable=False))
        else:
            cells.append(text)
    return cells


def render(
    source: str = typer.Argument(
        ...,
        help="CSV, TSV, JSON or YAML file to render, or '-' to read stdin.",
    ),
    input_format: str | None = typer.Option(
        None,
        "--format",
        "-f",
        help=f"Input format ({', '.join(FORMATS)}). Detected from the file suffix by default.",
    ),
    no_header: bool = typer.Option(
        False,
        "--no-header",
        help="Treat the first row as data instead of headers.",
    ),
    max_width: int | None = typer.Option(
        None,
        "--max-width",
        "-w",
        min=1,
        help="Maximum table width. Defaults to the configured or terminal width.",
    ),
    min_column_width: int | None = typer.Option(
        None,
        "--min-column-width",
        "-m",
        min=1,
        help="Width below which wrappable columns are not squeezed.",
    ),
    no_wrap: list[int] | None = typer.Option(
        None,
        "--no-wrap",
        help="Index (0-based) of a column that must never wrap. Repeatable.",
    ),
    markup: bool = typer.Option(
        False,
        "--markup",
        help="Interpret Rich style markup in cell values.",
    ),
    title: str | None = typer.Option(
        None,
        "--title",
        "-t",
        help="Title shown above the table.",
    ),
) -> None:
    """Render a tabular file as a table that fits the terminal."""
    try:
        text, path = _read_source(source)
        fmt = detect_format(path, input_format)
        data = parse_table(text, fmt, header=not no_header)
        settings = resolve_table_config(load_config())
    except (OSError, ValueError) as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from None

    logger.info("Rendering table", source=source, format=fmt, rows=len(data.rows))

    pinned = set(no_wrap or [])
    table = AdaptiveTable(
        RichSink(console),
        max_width=max_width if max_width is not None else settings.max_width,
        min_column_width=(
            min_column_width if min_column_width is not None else settings.min_column_width
        ),
        title=title,
    )
    try:
        if data.headers:
            table.set_headers(_prepare_row(data.headers, set(), markup))
        for row in data.rows:
            if isinstance(row, list):
                table.add_row(_prepare_row(row, pinned, markup))
            else:
                table.add_row(row)
        table.render()
    except TableError as e:
        console.print(f"[red]Error:[/red] {e.message}")
        raise typer.Exit(1) from None
