"""
Spreadsheet table facade: renders a sequence of tables onto one sheet.

Tables are stacked vertically from a configurable origin.  For each table
the facade anchors it at the running cursor (which resolves every
descendant's position), walks its render items (table range, header,
elements, footer, outer before inner) and forwards them to a
``RenderSink``.  After all tables are placed, each table's column range is
auto-sized.

The facade never writes a cell itself; it only decides where and what.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, List, Optional, Union

from openpyxl.worksheet.worksheet import Worksheet

from dto.coordinate import AnchorPoint, BoundingBox
from dto.render import RenderItem
from layout import constants
from layout.address import validate_sheet_cell
from layout.base import Entity
from layout.cell import Cell
from layout.column import Column
from layout.errors import InvalidDimension, Unanchored
from layout.table import Table
from render.sink import RenderSink
from render.styles import DEFAULT_STYLES, StylePayload, merge_styles
from render.worksheet import WorksheetSink

logger = logging.getLogger(__name__)

# divisor(sink, cursor) -> rows used by the separator (None means 0)
DivisorFunction = Callable[[RenderSink, AnchorPoint], Optional[int]]


def _check_gap(name: str, rows: Any) -> int:
    if isinstance(rows, bool) or not isinstance(rows, int) or rows < 0:
        raise InvalidDimension(name, rows)
    return rows


class SpreadsheetTableFacade:

    def __init__(
        self,
        sink: Union[RenderSink, Worksheet],
        anchor_column: Optional[str] = None,
        anchor_row: Optional[int] = None,
        table_gap: Optional[int] = None,
    ) -> None:
        if isinstance(sink, Worksheet):
            sink = WorksheetSink(sink)
        if not isinstance(sink, RenderSink):
            raise TypeError(f"Expected a RenderSink or Worksheet, got {type(sink).__name__}")

        column, row = validate_sheet_cell(
            constants.ANCHOR_COLUMN if anchor_column is None else anchor_column,
            constants.ANCHOR_ROW if anchor_row is None else anchor_row,
        )
        self._sink = sink
        self._origin = AnchorPoint(column=column, row=row)
        self._table_gap = _check_gap(
            "Gap", constants.TABLE_GAP if table_gap is None else table_gap
        )
        self._tables: List[Table] = []
        self._divisor: Optional[DivisorFunction] = None
        self._apply_default_styling = constants.APPLY_DEFAULT_STYLE
        self._regions: List[BoundingBox] = []

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    @property
    def sink(self) -> RenderSink:
        return self._sink

    @property
    def origin(self) -> AnchorPoint:
        return self._origin

    @property
    def regions(self) -> List[BoundingBox]:
        """Bounding box of every table rendered by the last ``export``."""
        return list(self._regions)

    def add_tables(self, *tables: Optional[Table]) -> "SpreadsheetTableFacade":
        """Queue tables for export, top to bottom.  ``None`` is skipped."""
        for table in tables:
            if table is None:
                continue
            if not isinstance(table, Table):
                raise TypeError(f"Expected a Table, got {type(table).__name__}")
            self._tables.append(table)
        return self

    def set_divisor_function(self, divisor: Optional[DivisorFunction]) -> "SpreadsheetTableFacade":
        """
        Replace the blank-row gap between tables with a custom separator.

        The divisor receives the sink and the cursor (first row below the
        table just rendered) and returns how many rows it used.
        """
        self._divisor = divisor
        return self

    @property
    def divisor_function(self) -> Optional[DivisorFunction]:
        return self._divisor

    def apply_default_style(self, apply: bool) -> "SpreadsheetTableFacade":
        self._apply_default_styling = bool(apply)
        return self

    # ------------------------------------------------------------------
    # Export
    # ------------------------------------------------------------------

    def export(self) -> "SpreadsheetTableFacade":
        cursor = self._origin
        regions: List[BoundingBox] = []

        logger.info("Exporting %d table(s) from %s", len(self._tables), cursor.address)

        for index, table in enumerate(self._tables):
            table.anchor(cursor.column, cursor.row)
            if table.width == 0 or table.height == 0:
                logger.warning("Table %d at %s is empty, skipping", index, cursor.address)
                continue

            self.render_table(table)
            box = table.bounds()
            regions.append(box)
            logger.info("  table %d -> %s", index, box.range_string)

            cursor = AnchorPoint(column=cursor.column, row=box.bottom_right.row + 1)
            if self._divisor is not None:
                used = self._divisor(self._sink, cursor)
                cursor = cursor.offset(rows=_check_gap("Divisor rows", 0 if used is None else used))
            else:
                cursor = cursor.offset(rows=self._table_gap)

        # Second pass: every table is placed, size the columns they occupy
        for box in regions:
            self._sink.auto_size_column_range(box.top_left.column, box.bottom_right.column)

        self._regions = regions
        return self

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render_table(self, table: Table) -> "SpreadsheetTableFacade":
        return self._render(table, Table)

    def render_column(self, column: Column) -> "SpreadsheetTableFacade":
        return self._render(column, Column)

    def render_cell(self, cell: Cell) -> "SpreadsheetTableFacade":
        return self._render(cell, Cell)

    def _render(self, entity: Entity, kind: type) -> "SpreadsheetTableFacade":
        if not isinstance(entity, kind):
            raise TypeError(f"Expected a {kind.__name__}, got {type(entity).__name__}")
        if not entity.is_anchored:
            raise Unanchored(entity)
        for item in entity.render_items():
            self._emit(item)
        return self

    def _style_for(self, item: RenderItem) -> StylePayload:
        if not self._apply_default_styling:
            return item.style
        return merge_styles(DEFAULT_STYLES.get(item.role, {}), item.style)

    def _emit(self, item: RenderItem) -> None:
        style = self._style_for(item)
        top_left = item.bounds.top_left.address
        bottom_right = item.bounds.bottom_right.address

        if item.is_range:
            if style:
                self._sink.apply_range_style(top_left, bottom_right, style)
            return

        if item.needs_merge:
            self._sink.merge_range(top_left, bottom_right)
        self._sink.set_cell_value(top_left, item.value)
        if style:
            self._sink.apply_cell_style(top_left, style)
