"""Logging configuration for tablefit."""

from tablefit.logging.config import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
