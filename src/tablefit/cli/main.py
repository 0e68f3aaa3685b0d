"""Main CLI entry point using Typer."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.markup import escape

from tablefit import __version__
from tablefit.cli.commands import init, render, status
from tablefit.core.config.models import ProfileConfig, load_profile
from tablefit.logging.config import configure_logging

app = typer.Typer(
    name="tablefit",
    help="Render tabular data as tables that fit the terminal.",
    add_completion=True,
)

console = Console()
err_console = Console(stderr=True)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"tablefit version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output.",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Enable debug mode.",
    ),
    json_logs: bool = typer.Option(
        False,
        "--json-logs",
        help="Write console log lines as JSON.",
    ),
) -> None:
    """tablefit - Render tabular data as tables that fit the terminal.

    Logging follows the default profile of the config file; --verbose and
    --debug override its level.
    """
    try:
        profile = load_profile()
    except ValueError as e:
        # Keep going so init --force can replace a broken config.
        err_console.print(f"[yellow]Warning:[/yellow] ignoring logging profile: {escape(str(e))}")
        profile = ProfileConfig()

    configure_logging(
        verbose=verbose,
        debug=debug or profile.debug,
        json_output=json_logs,
        log_level=profile.log_level,
    )


# Register subcommands
app.add_typer(init.app, name="init")
app.command()(render.render)
app.command()(status.status)


if __name__ == "__main__":
    app()
