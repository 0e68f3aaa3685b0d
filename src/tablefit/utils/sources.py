"""Loading tabular data from CSV, TSV, JSON and YAML text."""

from __future__ import annotations

import csv
import io
import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from tablefit.layout.cells import SEPARATOR

FORMATS = ("csv", "tsv", "json", "yaml")

_SUFFIXES = {
    ".csv": "csv",
    ".tsv": "tsv",
    ".tab": "tsv",
    ".json": "json",
    ".yaml": "yaml",
    ".yml": "yaml",
}


@dataclass
class TableData:
    """Header and body values ready to be added to a table."""

    headers: list[Any] = field(default_factory=list)
    rows: list[Any] = field(default_factory=list)


def detect_format(path: Path | None, explicit: str | None = None) -> str:
    """Pick the input format from an explicit choice or the file suffix.

    Defaults to CSV when neither gives an answer, e.g. for stdin.

    Raises:
        ValueError: If the explicit format is not supported.
    """
    if explicit is not None:
        fmt = explicit.lower()
        if fmt not in FORMATS:
            raise ValueError(
                f"Unsupported format '{explicit}', expected one of {', '.join(FORMATS)}"
            )
        return fmt
    if path is not None:
        return _SUFFIXES.get(path.suffix.lower(), "csv")
    return "csv"


def _scalar(value: Any) -> Any:
    if isinstance(value, dict | list):
        return json.dumps(value, sort_keys=True, default=str)
    if value is None or isinstance(value, str | int | float):
        return value
    # YAML dates and timestamps
    return str(value)


def _from_records(records: list[Any], header: bool) -> TableData:
    """Build table data from a list of mappings, lists or nulls.

    Mapping keys become headers in order of first appearance. ``None``
    entries become separators.
    """
    if any(isinstance(record, dict) for record in records):
        keys: list[str] = []
        for record in records:
            if isinstance(record, dict):
                keys.extend(str(key) for key in record if str(key) not in keys)
        rows: list[Any] = []
        for record in records:
            if record is None:
                rows.append(SEPARATOR)
            elif isinstance(record, dict):
                values = {str(key): value for key, value in record.items()}
                rows.append([_scalar(values.get(key)) for key in keys])
            else:
                raise ValueError("Cannot mix mappings and lists in one table")
        return TableData(headers=list(keys) if header else [], rows=rows)

    rows = [
        SEPARATOR if record is None else [_scalar(value) for value in record]
        for record in records
    ]
    if header and rows and rows[0] is not SEPARATOR:
        return TableData(headers=rows[0], rows=rows[1:])
    return TableData(rows=rows)


def parse_table(text: str, fmt: str, header: bool = True) -> TableData:
    """Parse text in the given format into headers and rows.

    Args:
        text: Raw input.
        fmt: One of ``FORMATS``.
        header: Use the first row (or the mapping keys) as headers.

    Raises:
        ValueError: If the input cannot be parsed or is not a list of records.
    """
    if fmt in ("csv", "tsv"):
        delimiter = "\t" if fmt == "tsv" else ","
        records: Any = [list(row) for row in csv.reader(io.StringIO(text), delimiter=delimiter)]
    elif fmt == "json":
        try:
            records = json.loads(text) if text.strip() else []
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON: {e}") from e
    else:
        try:
            records = yaml.safe_load(text) or []
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML: {e}") from e

    if not isinstance(records, list):
        raise ValueError("Input must be a list of rows")
    for record in records:
        if record is not None and not isinstance(record, dict | list):
            raise ValueError(f"Each row must be a list or a mapping, got {type(record).__name__}")
    return _from_records(records, header)
