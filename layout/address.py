"""
Sheet-cell address arithmetic.

Columns are letter identifiers (A..Z, AA..AZ, ...) mapped to 1-based
ordinals with openpyxl's helpers; rows are 1-based integers.
"""

from __future__ import annotations

import re
from typing import List, Tuple

from openpyxl.utils import column_index_from_string, get_column_letter

from layout.errors import InvalidAddress

_COLUMN_RE = re.compile(r"^[A-Za-z]+$")
_ADDRESS_RE = re.compile(r"^([A-Za-z]+)([1-9][0-9]*)$")

# Ordinal of 'ZZZ', the last column openpyxl can name
MAX_COLUMN_ORDINAL = 18278


def _valid_row(row) -> bool:
    return isinstance(row, int) and not isinstance(row, bool) and row >= 1


def valid_sheet_cell(column, row) -> bool:
    """Return True if *column* / *row* form a well-formed sheet cell."""
    if not isinstance(column, str) or not _COLUMN_RE.match(column):
        return False
    if not _valid_row(row):
        return False
    try:
        column_index_from_string(column.upper())
    except ValueError:
        return False
    return True


def validate_sheet_cell(column, row) -> Tuple[str, int]:
    """Validate and normalise a column/row pair.  Raises ``InvalidAddress``."""
    if not valid_sheet_cell(column, row):
        raise InvalidAddress(column, row)
    return column.upper(), row


def to_ordinal(column: str) -> int:
    """'A' → 1, 'Z' → 26, 'AA' → 27."""
    if not isinstance(column, str) or not _COLUMN_RE.match(column):
        raise InvalidAddress(column)
    try:
        return column_index_from_string(column.upper())
    except ValueError as exc:
        raise InvalidAddress(column) from exc


def from_ordinal(ordinal: int) -> str:
    """1 → 'A', 28 → 'AB'."""
    if isinstance(ordinal, bool) or not isinstance(ordinal, int):
        raise InvalidAddress(ordinal)
    try:
        return get_column_letter(ordinal)
    except ValueError as exc:
        raise InvalidAddress(ordinal) from exc


def advance(column: str, n: int) -> str:
    """Return the column *n* places to the right of *column* (left if negative)."""
    return from_ordinal(to_ordinal(column) + n)


def address_of(column: str, row: int) -> str:
    column, row = validate_sheet_cell(column, row)
    return f"{column}{row}"


def split_address(address: str) -> Tuple[str, int]:
    """Parse 'AB12' → ('AB', 12)."""
    m = _ADDRESS_RE.match(address.strip()) if isinstance(address, str) else None
    if not m:
        raise InvalidAddress(address)
    return validate_sheet_cell(m.group(1), int(m.group(2)))


def column_span(first: str, last: str) -> List[str]:
    """Every column letter from *first* to *last*, inclusive."""
    start, end = to_ordinal(first), to_ordinal(last)
    if end < start:
        start, end = end, start
    return [get_column_letter(i) for i in range(start, end + 1)]
