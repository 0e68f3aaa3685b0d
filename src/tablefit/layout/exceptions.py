"""Table layout exceptions."""

from __future__ import annotations


class TableError(Exception):
    """Base exception for table layout errors."""

    def __init__(self, message: str, details: str | None = None) -> None:
        """Initialize exception.

        Args:
            message: Error message.
            details: Additional details.
        """
        super().__init__(message)
        self.message = message
        self.details = details


class InvalidRowError(TableError):
    """Raised when a row is neither a sequence of cells nor a separator."""


class InvalidCellError(TableError):
    """Raised when a cell value cannot be used as table content."""
