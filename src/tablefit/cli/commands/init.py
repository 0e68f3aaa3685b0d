"""Init command for writing the default configuration."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.panel import Panel

from tablefit.core.config import models
from tablefit.logging import get_logger

app = typer.Typer(help="Write the default tablefit configuration.")
console = Console()
logger = get_logger(__name__)


@app.callback(invoke_without_command=True)
def init(
    ctx: typer.Context,
    force: bool = typer.Option(
        False,
        "--force",
        "-f",
        help="Overwrite existing configuration.",
    ),
) -> None:
    """Write default table settings to ~/.config/tablefit/config.yaml."""
    if ctx.invoked_subcommand is not None:
        return

    config_file = models.CONFIG_FILE
    logger.info("Initializing config", path=str(config_file))

    if config_file.exists() and not force:
        console.print(f"[yellow]Configuration already exists at {config_file}[/yellow]")
        console.print("Use --force to overwrite.")
        raise typer.Exit(code=1)

    config_file.parent.mkdir(parents=True, exist_ok=True)
    config_file.write_text(models.TablefitConfig().to_yaml())

    console.print(
        Panel(
            f"[green]Configuration initialized successfully![/green]\n\n"
            f"Configuration created at: {config_file}\n\n"
            f"Next steps:\n"
            f"  1. Set table.max_width or table.min_column_width in {config_file}\n"
            f"  2. Run [bold]tablefit status[/bold] to see the resolved settings",
            title="tablefit init",
            border_style="green",
        )
    )

    logger.info("Configuration initialized", config_file=str(config_file))
