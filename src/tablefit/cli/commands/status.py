"""Status command for showing the resolved table settings."""

from __future__ import annotations

import platform

import typer
from rich.console import Console

from tablefit import __version__
from tablefit.cli.output import AdaptiveTable, RichSink, StructuredCell
from tablefit.core.config import models
from tablefit.logging import get_logger

console = Console()
logger = get_logger(__name__)


def status(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show environment details as well.",
    ),
) -> None:
    """Show the table settings tablefit will use."""
    try:
        config = models.load_config()
        settings = models.resolve_table_config(config)
        sources = models.table_config_sources(config)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from None

    sink = RichSink(console)
    config_file = models.CONFIG_FILE
    table = AdaptiveTable(sink, max_width=settings.max_width, title="tablefit Status")
    table.set_headers(["Setting", "Value", "Source"])

    table.add_row([StructuredCell("Version", wrappable=False), __version__, "tablefit"])
    table.add_row(
        [
            StructuredCell("Config file", wrappable=False),
            str(config_file),
            "[green]found[/green]" if config is not None else "[yellow]missing[/yellow]",
        ]
    )
    table.add_row(
        [
            StructuredCell("Max width", wrappable=False),
            str(settings.max_width or sink.width),
            StructuredCell(
                sources["max_width"] if settings.max_width else "terminal", wrappable=False
            ),
        ]
    )
    table.add_row(
        [
            StructuredCell("Min column width", wrappable=False),
            str(settings.min_column_width),
            StructuredCell(sources["min_column_width"], wrappable=False),
        ]
    )

    if verbose:
        table.add_separator()
        table.add_row(["Python", platform.python_version(), platform.python_implementation()])
        table.add_row(["Platform", platform.system(), platform.release()])

    table.render()
    logger.info("Status check complete", config_found=config is not None)
