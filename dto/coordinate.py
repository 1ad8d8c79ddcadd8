from __future__ import annotations

from pydantic import BaseModel, field_validator

from openpyxl.utils import column_index_from_string, get_column_letter


class AnchorPoint(BaseModel):
    """A single sheet cell: letter column + 1-based row."""

    column: str
    row: int

    model_config = {"frozen": True}

    @field_validator("column")
    @classmethod
    def _upper_letters(cls, v: str) -> str:
        if not v.isalpha() or not v.isascii():
            raise ValueError(f"column must be letters, got {v!r}")
        return v.upper()

    @field_validator("row")
    @classmethod
    def _positive_row(cls, v: int) -> int:
        if v < 1:
            raise ValueError(f"row must be >= 1, got {v}")
        return v

    @property
    def ordinal(self) -> int:
        return column_index_from_string(self.column)

    @property
    def address(self) -> str:
        return f"{self.column}{self.row}"

    def offset(self, columns: int = 0, rows: int = 0) -> "AnchorPoint":
        """Return the point *columns* to the right and *rows* below this one."""
        return AnchorPoint(
            column=get_column_letter(self.ordinal + columns),
            row=self.row + rows,
        )

    def __str__(self) -> str:
        return self.address


class Dimension(BaseModel):
    """Width / height measured in sheet cells."""

    width: int = 1
    height: int = 1

    model_config = {"frozen": True}


class BoundingBox(BaseModel):
    top_left: AnchorPoint
    bottom_right: AnchorPoint

    model_config = {"frozen": True}

    @property
    def width(self) -> int:
        return self.bottom_right.ordinal - self.top_left.ordinal + 1

    @property
    def height(self) -> int:
        return self.bottom_right.row - self.top_left.row + 1

    @property
    def is_single_cell(self) -> bool:
        return self.top_left == self.bottom_right

    @property
    def range_string(self) -> str:
        """'B2:D6', or just 'B2' for a single cell."""
        if self.is_single_cell:
            return self.top_left.address
        return f"{self.top_left.address}:{self.bottom_right.address}"
