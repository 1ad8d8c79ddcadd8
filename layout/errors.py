"""
Exceptions raised while building, anchoring or querying layout entities.

All of them signal caller error; none are retryable.
"""

from __future__ import annotations

from typing import Any


class LayoutError(Exception):
    """Base class for every layout failure."""


class InvalidAddress(LayoutError, ValueError):
    """A column/row pair that does not name a sheet cell."""

    def __init__(self, column: Any, row: Any = "") -> None:
        self.column = column
        self.row = row
        super().__init__(f"Invalid sheet cell address. Address given: {column}{row}")


class InvalidDimension(LayoutError, ValueError):
    def __init__(self, dimension: str, size: Any) -> None:
        self.dimension = dimension
        self.size = size
        super().__init__(f"Invalid table cell dimension given. {dimension}: {size}")


class Unanchored(LayoutError):
    def __init__(self, entity: Any = None) -> None:
        name = type(entity).__name__ if entity is not None else "Entity"
        super().__init__(f"{name} has not been anchored to a sheet cell")


class ColumnWidthLocked(LayoutError):
    def __init__(self, width: int) -> None:
        self.width = width
        super().__init__(
            f"Column width is locked at {width} once content has been added"
        )


class UnsupportedMutation(LayoutError):
    """Direct mutation of a derived value, or structural change after anchoring."""
