"""Cell and row types for adaptive tables.

A cell is either a ``PlainCell`` (bare text) or a ``StructuredCell`` carrying
column-span and wrap-ability metadata. Both expose the same ``text``, ``span``
and ``wrappable`` attributes so layout code can treat them uniformly.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import Any

from tablefit.layout.exceptions import InvalidCellError, InvalidRowError


@dataclass(frozen=True, slots=True)
class PlainCell:
    """A cell holding only text."""

    text: str

    @property
    def span(self) -> int:
        return 1

    @property
    def wrappable(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class StructuredCell:
    """A cell with explicit column span and wrap-ability."""

    text: str
    span: int = 1
    wrappable: bool = True

    def __post_init__(self) -> None:
        if self.span < 1:
            raise InvalidCellError(
                f"Column span must be at least 1, got {self.span}",
                details=self.text,
            )


Cell = PlainCell | StructuredCell


class Separator:
    """Marker for a horizontal rule between body rows."""

    _instance: Separator | None = None

    def __new__(cls) -> Separator:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "SEPARATOR"


SEPARATOR = Separator()


@dataclass(frozen=True, slots=True)
class Row:
    """An ordered sequence of cells."""

    cells: tuple[Cell, ...] = ()

    def __post_init__(self) -> None:
        for cell in self.cells:
            if not isinstance(cell, PlainCell | StructuredCell):
                raise InvalidRowError(
                    "Row cells must be PlainCell or StructuredCell instances",
                    details=f"got {type(cell).__name__}",
                )

    def __iter__(self) -> Iterator[Cell]:
        return iter(self.cells)

    def __len__(self) -> int:
        return len(self.cells)

    @property
    def column_count(self) -> int:
        """Number of columns this row covers, accounting for spans."""
        return sum(cell.span for cell in self.cells)


RowLike = Row | Separator


def to_cell(value: Any) -> Cell:
    """Coerce a raw value into a cell.

    Strings become plain cells, numbers are rendered with ``str()`` and
    ``None`` becomes an empty cell.

    Raises:
        InvalidCellError: If the value has no text representation.
    """
    if isinstance(value, PlainCell | StructuredCell):
        return value
    if value is None:
        return PlainCell("")
    if isinstance(value, str):
        return PlainCell(value)
    if isinstance(value, bool):
        return PlainCell("true" if value else "false")
    if isinstance(value, int | float):
        return PlainCell(str(value))
    raise InvalidCellError(f"Unsupported cell value of type {type(value).__name__}")


def to_row(value: Any) -> RowLike:
    """Coerce a raw value into a row or separator.

    Raises:
        InvalidRowError: If the value is not a row, a separator or a list/tuple
            of cell values.
    """
    if isinstance(value, Row | Separator):
        return value
    if not isinstance(value, list | tuple):
        raise InvalidRowError(
            "A row must be a list of cells or a separator",
            details=f"got {type(value).__name__}",
        )
    return _row_from_values(value)


def to_header_rows(headers: Sequence[Any]) -> list[Row]:
    """Normalise header input into a list of header rows.

    ``headers`` is either a single row of cell values or a sequence of rows.
    """
    if isinstance(headers, Row):
        return [headers]
    if not isinstance(headers, list | tuple):
        raise InvalidRowError(
            "Headers must be a list of cells or a list of rows",
            details=f"got {type(headers).__name__}",
        )
    if not headers:
        return []
    if not all(isinstance(item, Row | list | tuple) for item in headers):
        headers = [headers]

    return [item if isinstance(item, Row) else _row_from_values(item) for item in headers]


def _row_from_values(values: list[Any] | tuple[Any, ...]) -> Row:
    try:
        return Row(tuple(to_cell(item) for item in values))
    except InvalidCellError as e:
        raise InvalidRowError(f"Invalid cell in row: {e.message}", details=e.details) from e


def body_rows(rows: Iterable[RowLike]) -> Iterable[Row]:
    """Yield only the content rows, skipping separators."""
    for row in rows:
        if isinstance(row, Row):
            yield row
