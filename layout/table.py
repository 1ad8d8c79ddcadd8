"""
Table entity: an ordered collection of columns and sub-tables, each one
rendered to the right of the previous one, with an optional header band
above and footer band below.

A table's width is the sum of its elements' widths and its height is the
height of its tallest element, plus one row per band.  Neither can be set
directly.

Elements are owned exclusively: ``add_elements`` stores unanchored clones
of what it is given, and read accessors hand out copies.
"""

from __future__ import annotations

import copy
import logging
from typing import Any, Dict, Iterator, List, Optional, Sequence

from dto.render import RenderItem
from layout.address import from_ordinal
from layout.base import Entity
from layout.cell import Cell
from layout.column import Column
from layout.errors import UnsupportedMutation

logger = logging.getLogger(__name__)


class Table(Entity):

    def __init__(
        self,
        *elements: Entity,
        header: Any = None,
        footer: Any = None,
        style: Optional[Dict[str, Any]] = None,
        header_style: Optional[Dict[str, Any]] = None,
        footer_style: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__()
        self._elements: List[Entity] = []
        self._header: Optional[Cell] = None
        self._footer: Optional[Cell] = None
        self._header_style: Dict[str, Any] = {}
        self._footer_style: Dict[str, Any] = {}

        self.set_style(style)
        self.set_header_style(header_style)
        self.set_footer_style(footer_style)
        self.add_elements(*elements)
        if header is not None:
            self.set_header(header)
        if footer is not None:
            self.set_footer(footer)

    # ------------------------------------------------------------------
    # Dimensions (derived only)
    # ------------------------------------------------------------------

    def _bands(self) -> List[Cell]:
        return [band for band in (self._header, self._footer) if band is not None]

    @property
    def width(self) -> int:
        body = sum(element.width for element in self._elements)
        if body > 0:
            return body
        # No body extent (no elements, or only empty sub-tables): as wide as the widest band
        return max((band.width for band in self._bands()), default=0)

    @property
    def height(self) -> int:
        body = max((element.height for element in self._elements), default=0)
        return body + len(self._bands())

    def set_width(self, width: int) -> "Table":
        raise UnsupportedMutation("Table width is the sum of its element widths")

    def set_height(self, height: int) -> "Table":
        raise UnsupportedMutation("Table height is derived from its elements")

    # ------------------------------------------------------------------
    # Building
    # ------------------------------------------------------------------

    def add_elements(self, *elements: Optional[Entity]) -> "Table":
        """Append columns / sub-tables left to right.  ``None`` is skipped."""
        self._check_mutable()
        owned: List[Entity] = []
        for element in elements:
            if element is None:
                continue
            if not isinstance(element, (Column, Table)):
                raise TypeError(
                    f"Table elements must be Column or Table, got {type(element).__name__}"
                )
            owned.append(element.clone(keep_anchor=False))
        self._elements.extend(owned)
        return self

    def add_values(self, *rows: Sequence[Any]) -> "Table":
        """
        Build the table row by row: the i-th value of every row is appended
        to the i-th element, which must be a column.

        Rows may be shorter than the element count; a longer row is rejected
        before anything is written.
        """
        self._check_mutable()
        for index, row in enumerate(rows):
            if isinstance(row, (str, bytes)) or not isinstance(row, Sequence):
                raise TypeError(f"Row {index} must be a sequence of values, got {row!r}")
            if len(row) > len(self._elements):
                raise UnsupportedMutation(
                    f"Row {index} has {len(row)} values but the table has "
                    f"{len(self._elements)} element(s)"
                )
            for position in range(len(row)):
                if not isinstance(self._elements[position], Column):
                    raise UnsupportedMutation(
                        f"Element {position} is a "
                        f"{type(self._elements[position]).__name__}; row values "
                        "can only be added to columns"
                    )

        for row in rows:
            for column, value in zip(self._elements, row):
                column.add_cell(value)
        logger.debug("Table: added %d row(s)", len(rows))
        return self

    def set_header(
        self,
        value: Any,
        style: Optional[Dict[str, Any]] = None,
        width: int = 1,
    ) -> "Table":
        """
        Set the header band.  *width* only matters while the table has no
        elements; otherwise the band spans the table.
        """
        self._check_mutable()
        self._header = Cell(value, width=width)
        if style is not None:
            self.set_header_style(style)
        return self

    def set_footer(
        self,
        value: Any,
        style: Optional[Dict[str, Any]] = None,
        width: int = 1,
    ) -> "Table":
        self._check_mutable()
        self._footer = Cell(value, width=width)
        if style is not None:
            self.set_footer_style(style)
        return self

    def set_header_style(self, style: Optional[Dict[str, Any]]) -> "Table":
        self._header_style = copy.deepcopy(dict(style)) if style else {}
        return self

    def set_footer_style(self, style: Optional[Dict[str, Any]]) -> "Table":
        self._footer_style = copy.deepcopy(dict(style)) if style else {}
        return self

    # ------------------------------------------------------------------
    # Read access (copies only)
    # ------------------------------------------------------------------

    @property
    def elements(self) -> List[Entity]:
        return [element.clone() for element in self._elements]

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

    def _children(self) -> List[Entity]:
        children: List[Entity] = []
        if self._header is not None:
            children.append(self._header)
        children.extend(self._elements)
        if self._footer is not None:
            children.append(self._footer)
        return children

    def resolve_addresses(self) -> None:
        origin = self._anchor
        width = self.width
        row = origin.row

        if self._header is not None:
            if width > 0:
                self._header._resize(width=width)
            self._header.anchor(origin.column, row)
            row += 1

        # Elements sit side by side on the row below the header
        ordinal = origin.ordinal
        body_height = 0
        for element in self._elements:
            element.anchor(from_ordinal(ordinal), row)
            ordinal += element.width
            body_height = max(body_height, element.height)

        if self._footer is not None:
            if width > 0:
                self._footer._resize(width=width)
            self._footer.anchor(origin.column, row + body_height)

        logger.debug(
            "Table at %s resolved: %d element(s), %dx%d",
            origin.address,
            len(self._elements),
            width,
            self.height,
        )

    def render_items(self) -> Iterator[RenderItem]:
        if self.width == 0 or self.height == 0:
            return
        yield RenderItem(role="table", bounds=self.bounds(), style=self.style)
        if self._header is not None:
            yield from self._header.render_items("table_header", self.header_style)
        for element in self._elements:
            yield from element.render_items()
        if self._footer is not None:
            yield from self._footer.render_items("table_footer", self.footer_style)
