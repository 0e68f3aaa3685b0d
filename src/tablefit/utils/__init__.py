"""Utility functions for tablefit."""

from tablefit.utils.sources import FORMATS, TableData, detect_format, parse_table

__all__ = [
    "FORMATS",
    "TableData",
    "detect_format",
    "parse_table",
]
