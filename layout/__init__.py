"""
Sheet table layout model.

Entities, leaves first:
  1. Cell    : a value and style occupying one or more merged sheet cells
  2. Column  : cells stacked vertically, sharing one locked width
  3. Table   : columns / sub-tables side by side, with header and footer bands

Anchoring a root entity resolves the sheet position of every descendant.
"""

from layout.errors import (
    ColumnWidthLocked,
    InvalidAddress,
    InvalidDimension,
    LayoutError,
    Unanchored,
    UnsupportedMutation,
)
from layout.base import Entity
from layout.cell import Cell
from layout.column import Column
from layout.table import Table

__all__ = [
    "Entity",
    "Cell",
    "Column",
    "Table",
    "LayoutError",
    "InvalidAddress",
    "InvalidDimension",
    "Unanchored",
    "ColumnWidthLocked",
    "UnsupportedMutation",
]
