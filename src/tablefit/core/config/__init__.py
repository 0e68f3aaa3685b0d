"""Configuration management with Pydantic validation."""

from tablefit.core.config.models import (
    ProfileConfig,
    TableConfig,
    TablefitConfig,
    load_config,
    load_profile,
    resolve_table_config,
    table_config_sources,
)

__all__ = [
    "ProfileConfig",
    "TableConfig",
    "TablefitConfig",
    "load_config",
    "load_profile",
    "resolve_table_config",
    "table_config_sources",
]
