"""Configuration models with Pydantic validation."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator

from tablefit.layout.planner import DEFAULT_MIN_COLUMN_WIDTH

# XDG-compliant config location
CONFIG_DIR = Path.home() / ".config" / "tablefit"
CONFIG_FILE = CONFIG_DIR / "config.yaml"

ENV_MAX_WIDTH = "TABLEFIT_MAX_WIDTH"
ENV_MIN_COLUMN_WIDTH = "TABLEFIT_MIN_COLUMN_WIDTH"
ENV_OVERRIDES = {
    "max_width": ENV_MAX_WIDTH,
    "min_column_width": ENV_MIN_COLUMN_WIDTH,
}

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

CONFIG_HEADER = """\
# tablefit configuration
#
# table.max_width: maximum table width in columns (empty = terminal width)
# table.min_column_width: width below which wrappable columns are not squeezed
"""


class ProfileConfig(BaseModel):
    """Settings for a named profile."""

    debug: bool = Field(default=False, description="Enable debug logging")
    log_level: str = Field(default="WARNING", description="Console log level for the profile")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        normalized = value.upper()
        if normalized not in VALID_LOG_LEVELS:
            raise ValueError(
                f"Invalid log_level '{value}', expected one of {', '.join(VALID_LOG_LEVELS)}"
            )
        return normalized


class TableConfig(BaseModel):
    """Defaults for adaptive table layout."""

    max_width: int | None = Field(
        default=None, ge=1, description="Maximum table width; None uses the terminal width"
    )
    min_column_width: int = Field(
        default=DEFAULT_MIN_COLUMN_WIDTH,
        ge=1,
        description="Width below which wrappable columns are not squeezed",
    )


class TablefitConfig(BaseModel):
    """Root configuration file model."""

    version: str = Field(default="1.0")
    profiles: dict[str, ProfileConfig] = Field(
        default_factory=lambda: {"default": ProfileConfig()}
    )
    table: TableConfig = Field(default_factory=TableConfig)

    def to_yaml(self) -> str:
        """Serialize to YAML with an explanatory comment header."""
        body = yaml.safe_dump(self.model_dump(), sort_keys=False)
        return f"{CONFIG_HEADER}\n{body}"


def load_raw_config(path: Path | None = None) -> dict[str, Any]:
    """Load the config file as a plain dict.

    Returns an empty dict when the file is missing, empty or not valid YAML.
    """
    config_path = path if path is not None else CONFIG_FILE
    if not config_path.exists():
        return {}
    try:
        data = yaml.safe_load(config_path.read_text())
    except yaml.YAMLError:
        return {}
    return data if isinstance(data, dict) else {}


def load_config(path: Path | None = None) -> TablefitConfig | None:
    """Load and validate the config file.

    Returns:
        The parsed configuration, or None if the file does not exist.

    Raises:
        ValueError: If the file is not valid YAML or fails validation.
    """
    config_path = path if path is not None else CONFIG_FILE
    if not config_path.exists():
        return None
    try:
        data = yaml.safe_load(config_path.read_text())
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {config_path}: {e}") from e
    return TablefitConfig.model_validate(data or {})


def load_profile(name: str = "default", path: Path | None = None) -> ProfileConfig:
    """Load one logging profile from the config file.

    Only the profile itself is validated, so a broken table section does not
    stop logging from being set up. A missing or unreadable file, or a missing
    profile, gives the default profile.

    Raises:
        ValueError: If the profile fails validation.
    """
    profiles = load_raw_config(path).get("profiles")
    if not isinstance(profiles, dict):
        return ProfileConfig()
    return ProfileConfig.model_validate(profiles.get(name) or {})


def _env_int(name: str) -> int | None:
    value = os.environ.get(name)
    if value is None or not value.strip():
        return None
    try:
        return int(value)
    except ValueError as e:
        raise ValueError(f"{name} must be an integer, got '{value}'") from e


def resolve_table_config(config: TablefitConfig | None = None) -> TableConfig:
    """Table settings from the config file with environment overrides applied.

    Priority:
    1. Environment variables (TABLEFIT_MAX_WIDTH, TABLEFIT_MIN_COLUMN_WIDTH)
    2. Config file (~/.config/tablefit/config.yaml)
    3. Built-in defaults
    """
    table = config.table if config is not None else TableConfig()
    overrides: dict[str, int] = {}
    for field_name, env_name in ENV_OVERRIDES.items():
        value = _env_int(env_name)
        if value is not None:
            overrides[field_name] = value
    if not overrides:
        return table
    return TableConfig.model_validate({**table.model_dump(), **overrides})


def table_config_sources(config: TablefitConfig | None = None) -> dict[str, str]:
    """Where each resolved table setting comes from.

    Returns:
        Mapping of setting name to "environment", "config file" or "default",
        following the resolution order of ``resolve_table_config``.
    """
    file_fields = config.table.model_fields_set if config is not None else set()
    sources: dict[str, str] = {}
    for field_name, env_name in ENV_OVERRIDES.items():
        if _env_int(env_name) is not None:
            sources[field_name] = "environment"
        elif field_name in file_fields:
            sources[field_name] = "config file"
        else:
            sources[field_name] = "default"
    return sources
