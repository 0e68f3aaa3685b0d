"""Centralized CLI output utilities.

This package provides consistent table output across all CLI commands.
Tables that must fit the terminal should use AdaptiveTable.

Usage:
    from tablefit.cli.output import AdaptiveTable

    table = AdaptiveTable(title="Results")
    table.set_headers(["Name", "Value"])
    table.add_row(["foo", "bar"])
    table.render()
"""

from tablefit.cli.output.adaptive import AdaptiveTable
from tablefit.cli.output.sink import OutputSink, RichSink
from tablefit.cli.output.table import Table, paint
from tablefit.layout.cells import SEPARATOR, PlainCell, Row, StructuredCell

__all__ = [
    "SEPARATOR",
    "AdaptiveTable",
    "OutputSink",
    "PlainCell",
    "RichSink",
    "Row",
    "StructuredCell",
    "Table",
    "paint",
]
