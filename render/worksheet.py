"""
RenderSink backed by an openpyxl worksheet.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Set, Tuple

from openpyxl.cell.cell import MergedCell
from openpyxl.utils import column_index_from_string, range_boundaries
from openpyxl.worksheet.worksheet import Worksheet

from layout.address import column_span
from layout.constants import MIN_COLUMN_WIDTH
from render.sink import RenderSink
from render.styles import apply_style

logger = logging.getLogger(__name__)

# Extra characters of breathing room added to the longest value
_WIDTH_PADDING = 2


class WorksheetSink(RenderSink):

    def __init__(self, ws: Worksheet, min_column_width: Optional[float] = None) -> None:
        self._ws = ws
        self._min_width = MIN_COLUMN_WIDTH if min_column_width is None else min_column_width

    @property
    def worksheet(self) -> Worksheet:
        return self._ws

    # ------------------------------------------------------------------
    # RenderSink
    # ------------------------------------------------------------------

    def apply_range_style(self, top_left: str, bottom_right: str, style: Dict[str, Any]) -> None:
        min_col, min_row, max_col, max_row = range_boundaries(f"{top_left}:{bottom_right}")
        for row in self._ws.iter_rows(
            min_row=min_row, max_row=max_row, min_col=min_col, max_col=max_col
        ):
            for cell in row:
                if isinstance(cell, MergedCell):
                    continue  # only the master cell of a merge carries style
                apply_style(
                    cell,
                    style,
                    top=cell.row == min_row,
                    bottom=cell.row == max_row,
                    left=cell.column == min_col,
                    right=cell.column == max_col,
                )

    def merge_range(self, top_left: str, bottom_right: str) -> None:
        self._ws.merge_cells(f"{top_left}:{bottom_right}")

    def set_cell_value(self, address: str, value: Any) -> None:
        self._ws[address].value = value

    def apply_cell_style(self, address: str, style: Dict[str, Any]) -> None:
        apply_style(self._ws[address], style)

    def auto_size_column_range(self, first_column: str, last_column: str) -> None:
        spanning = self._multi_column_masters()
        for letter in column_span(first_column, last_column):
            idx = column_index_from_string(letter)
            longest = 0
            for (cell,) in self._ws.iter_rows(min_col=idx, max_col=idx):
                if cell.value is None or isinstance(cell, MergedCell):
                    continue
                # A value merged across several columns says nothing about this one
                if (cell.row, cell.column) in spanning:
                    continue
                longest = max(longest, len(str(cell.value)))
            width = max(self._min_width, longest + _WIDTH_PADDING)
            self._ws.column_dimensions[letter].width = width
            logger.debug("Column %s auto-sized to %s", letter, width)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _multi_column_masters(self) -> Set[Tuple[int, int]]:
        """(row, col) of the top-left cell of every merge wider than one column."""
        return {
            (mr.min_row, mr.min_col)
            for mr in self._ws.merged_cells.ranges
            if mr.max_col > mr.min_col
        }
