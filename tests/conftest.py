"""Shared pytest fixtures for tablefit tests."""

from __future__ import annotations

import io
import logging
import os
import tempfile
from collections.abc import Callable, Generator
from pathlib import Path

import pytest
import structlog
import typer
from rich.console import Console
from typer.testing import CliRunner

from tablefit.cli.main import app
from tablefit.cli.output import RichSink


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Typer CLI test runner."""
    return CliRunner()


@pytest.fixture
def temp_dir() -> Generator[Path]:
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def temp_config_file(temp_dir: Path) -> Path:
    """Create a temporary config file."""
    config_path = temp_dir / "config.yaml"
    config_path.write_text(
        """
version: "1.0"
profiles:
  default:
    debug: true
table:
  max_width: 60
  min_column_width: 8
"""
    )
    return config_path


@pytest.fixture(autouse=True)
def reset_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Reset environment variables for each test."""
    for key in list(os.environ.keys()):
        if key.startswith("TABLEFIT_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def isolate_paths(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep config and log files out of the real home directory."""
    monkeypatch.setattr("tablefit.logging.config.LOG_DIR", tmp_path / "state")
    monkeypatch.setattr("tablefit.logging.config.LOG_FILE", tmp_path / "state" / "tablefit.log")
    monkeypatch.setattr("tablefit.core.config.models.CONFIG_DIR", tmp_path / "config")
    monkeypatch.setattr(
        "tablefit.core.config.models.CONFIG_FILE", tmp_path / "config" / "config.yaml"
    )


@pytest.fixture(autouse=True)
def reset_logging() -> Generator[None]:
    """Undo the logging setup a test made, including structlog configuration."""
    root = logging.getLogger()
    original_handlers = list(root.handlers)
    original_level = root.level
    yield
    for handler in root.handlers:
        if handler not in original_handlers:
            handler.close()
    root.handlers = original_handlers
    root.setLevel(original_level)
    structlog.reset_defaults()

@pytest.fixture
def console() -> Console:
    """A plain-text Rich console with a fixed width, writing to a buffer."""
    return Console(file=io.StringIO(), width=80, color_system=None, legacy_windows=False)


@pytest.fixture
def sink(console: Console) -> RichSink:
    """A RichSink writing to the buffered console."""
    return RichSink(console)


@pytest.fixture
def read_output(console: Console) -> Callable[[], str]:
    """Return a function reading everything written to the ``console`` fixture."""

    def read() -> str:
        file = console.file
        assert isinstance(file, io.StringIO)
        return file.getvalue()

    return read


@pytest.fixture
def cli_app() -> typer.Typer:
    """Return the CLI app for testing."""
    return app
