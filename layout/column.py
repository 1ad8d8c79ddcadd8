"""
SheetColumn-style entity: an ordered set of values rendered vertically,
each one below the last.

A column is an atomic table.  It holds body cells and, optionally, a header
(rendered above the body) and a footer (rendered below it).  Every cell
shares the column's width; heights may vary, so the column's height is the
sum of its cells' heights.  The width locks as soon as any cell is added.
"""

from __future__ import annotations

import copy
import logging
from typing import Any, Dict, Iterable, Iterator, List, Optional

from dto.render import RenderItem
from layout.base import Entity, check_size
from layout.cell import Cell
from layout.errors import ColumnWidthLocked, UnsupportedMutation

logger = logging.getLogger(__name__)


class Column(Entity):

    def __init__(
        self,
        header: Any = None,
        width: int = 1,
        *,
        values: Iterable[Any] = (),
        footer: Any = None,
        style: Optional[Dict[str, Any]] = None,
        header_style: Optional[Dict[str, Any]] = None,
        footer_style: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__()
        self._cells: List[Cell] = []
        # None means *no* header cell; an empty string is a header with no text
        self._header: Optional[Cell] = None
        self._footer: Optional[Cell] = None
        self._header_style: Dict[str, Any] = {}
        self._footer_style: Dict[str, Any] = {}
        self._locked_width = False

        self.set_width(width)
        self.set_style(style)
        self.set_header_style(header_style)
        self.set_footer_style(footer_style)
        if header is not None:
            self.set_header(header)
        self.add_values(values)
        if footer is not None:
            self.set_footer(footer)

    # ------------------------------------------------------------------
    # Dimensions
    # ------------------------------------------------------------------

    @property
    def height(self) -> int:
        return sum(cell.height for cell in self._stack())

    @property
    def locked_width(self) -> bool:
        return self._locked_width

    def set_width(self, width: int) -> "Column":
        self._check_mutable()
        if self._locked_width:
            raise ColumnWidthLocked(self.width)
        self._resize(width=check_size("Width", width))
        return self

    def set_height(self, height: int) -> "Column":
        raise UnsupportedMutation(
            "Column height is the sum of its cell heights and cannot be set"
        )

    # ------------------------------------------------------------------
    # Building
    # ------------------------------------------------------------------

    def _new_cell(self, value: Any, height: int, style: Optional[Dict[str, Any]]) -> Cell:
        self._check_mutable()
        check_size("Height", height)
        self._locked_width = True
        return Cell(value, width=self.width, height=height, style=style)

    def add_values(
        self,
        values: Iterable[Any],
        height: int = 1,
        style: Optional[Dict[str, Any]] = None,
    ) -> "Column":
        """
        Append one body cell per value, in order.

        A bare string is a single value, not a sequence of characters.
        """
        if isinstance(values, (str, bytes)):
            values = [values]
        values = list(values)
        if not values:
            return self
        cells = [self._new_cell(value, height, style) for value in values]
        self._cells.extend(cells)
        logger.debug("Column: added %d value(s), height now %d", len(cells), self.height)
        return self

    def add_cell(
        self,
        value: Any,
        height: int = 1,
        style: Optional[Dict[str, Any]] = None,
    ) -> "Column":
        self._cells.append(self._new_cell(value, height, style))
        return self

    def set_header(self, value: Any, style: Optional[Dict[str, Any]] = None) -> "Column":
        self._header = self._new_cell(value, 1, None)
        if style is not None:
            self.set_header_style(style)
        return self

    def set_footer(self, value: Any, style: Optional[Dict[str, Any]] = None) -> "Column":
        self._footer = self._new_cell(value, 1, None)
        if style is not None:
            self.set_footer_style(style)
        return self

    def set_header_style(self, style: Optional[Dict[str, Any]]) -> "Column":
        self._header_style = copy.deepcopy(dict(style)) if style else {}
        return self

    def set_footer_style(self, style: Optional[Dict[str, Any]]) -> "Column":
        self._footer_style = copy.deepcopy(dict(style)) if style else {}
        return self

    # ------------------------------------------------------------------
    # Read access (copies only)
    # ------------------------------------------------------------------

    @property
    def values(self) -> List[Any]:
        return [cell.value for cell in self._cells]

    @property
    def cells(self) -> List[Cell]:
        return [cell.clone() for cell in self._cells]

    @property
    def header(self) -> Optional[Cell]:
        return self._header.clone() if self._header is not None else None

    @property
    def footer(self) -> Optional[Cell]:
        return self._footer.clone() if self._footer is not None else None

    @property
    def header_style(self) -> Dict[str, Any]:
        return copy.deepcopy(self._header_style)

    @property
    def footer_style(self) -> Dict[str, Any]:
        return copy.deepcopy(self._footer_style)

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------

    def _stack(self) -> List[Cell]:
        """Header, body cells and footer in vertical order."""
        stack: List[Cell] = []
        if self._header is not None:
            stack.append(self._header)
        stack.extend(self._cells)
        if self._footer is not None:
            stack.append(self._footer)
        return stack

    def _children(self) -> List[Entity]:
        return list(self._stack())

    def resolve_addresses(self) -> None:
        column, row = self._anchor.column, self._anchor.row
        for cell in self._stack():
            cell.anchor(column, row)
            row += cell.height

    def render_items(self) -> Iterator[RenderItem]:
        if self.height == 0:
            return
        yield RenderItem(role="column", bounds=self.bounds(), style=self.style)
        if self._header is not None:
            yield from self._header.render_items("column_header", self.header_style)
        for cell in self._cells:
            yield from cell.render_items()
        if self._footer is not None:
            yield from self._footer.render_items("column_footer", self.footer_style)
