"""
Base class for every layout entity (cell, column, table).

An entity occupies a rectangle of sheet cells: an anchor (its top-left
cell) plus a width and height measured in sheet cells.  Anchoring an entity
resolves the anchors of all its descendants and freezes its structure;
after that only value and style payloads may change.  Use ``clone`` to get
an unanchored, editable copy.
"""

from __future__ import annotations

import copy
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Iterator, List, Optional

from dto.coordinate import AnchorPoint, BoundingBox, Dimension
from dto.render import RenderItem
from layout.address import MAX_COLUMN_ORDINAL, advance, to_ordinal, validate_sheet_cell
from layout.errors import (
    InvalidAddress,
    InvalidDimension,
    LayoutError,
    Unanchored,
    UnsupportedMutation,
)

logger = logging.getLogger(__name__)


def check_size(dimension: str, size: Any) -> int:
    """Return *size* if it is a positive int, else raise ``InvalidDimension``."""
    if isinstance(size, bool) or not isinstance(size, int) or size <= 0:
        raise InvalidDimension(dimension, size)
    return size


class Entity(ABC):
    """Interface shared by cells, columns and tables."""

    def __init__(self) -> None:
        self._anchor: Optional[AnchorPoint] = None
        self._dimension = Dimension()
        self._style: Dict[str, Any] = {}

    # ------------------------------------------------------------------
    # Extension points
    # ------------------------------------------------------------------

    @abstractmethod
    def resolve_addresses(self) -> None:
        """
        Anchor every child relative to this entity's own anchor.

        Called by ``anchor`` once the new anchor is stored.  Leaves have
        nothing to resolve.
        """
        ...

    @abstractmethod
    def render_items(self) -> Iterator[RenderItem]:
        """Yield render snapshots for this entity and its descendants, in order."""
        ...

    def _children(self) -> List["Entity"]:
        return []

    # ------------------------------------------------------------------
    # Dimensions
    # ------------------------------------------------------------------

    @property
    def width(self) -> int:
        return self._dimension.width

    @property
    def height(self) -> int:
        return self._dimension.height

    @property
    def dimension(self) -> Dimension:
        return Dimension(width=self.width, height=self.height)

    def set_width(self, width: int) -> "Entity":
        self._check_mutable()
        self._resize(width=check_size("Width", width))
        return self

    def set_height(self, height: int) -> "Entity":
        self._check_mutable()
        self._resize(height=check_size("Height", height))
        return self

    def _resize(self, width: Optional[int] = None, height: Optional[int] = None) -> None:
        # Parents use this to impose geometry on children, frozen or not.
        update = {}
        if width is not None:
            update["width"] = width
        if height is not None:
            update["height"] = height
        self._dimension = self._dimension.model_copy(update=update)

    # ------------------------------------------------------------------
    # Anchoring
    # ------------------------------------------------------------------

    def anchor(self, column: str, row: int) -> "Entity":
        """
        Anchor the entity's top-left corner at *column* / *row* and resolve
        every descendant's position.  Returns ``self`` for chaining.

        On failure every anchor and size in the subtree is left as it was.
        """
        column, row = validate_sheet_cell(column, row)
        if to_ordinal(column) + max(self.width, 1) - 1 > MAX_COLUMN_ORDINAL:
            raise InvalidAddress(column, row)

        saved = [(entity, entity._anchor, entity._dimension) for entity in self.walk()]
        self._anchor = AnchorPoint(column=column, row=row)
        try:
            self.resolve_addresses()
        except LayoutError:
            for entity, anchor, dimension in saved:
                entity._anchor = anchor
                entity._dimension = dimension
            raise
        logger.debug("%s anchored at %s", type(self).__name__, self._anchor.address)
        return self

    @property
    def is_anchored(self) -> bool:
        return self._anchor is not None

    @property
    def anchor_point(self) -> AnchorPoint:
        if self._anchor is None:
            raise Unanchored(self)
        return self._anchor

    @property
    def anchor_address(self) -> str:
        return self.anchor_point.address

    def lower_right_cell(self) -> AnchorPoint:
        """Return the bottom-right sheet cell covered by this entity."""
        top_left = self.anchor_point
        width, height = self.width, self.height
        if width == 1 and height == 1:
            return top_left
        if width < 1:
            raise InvalidDimension("Width", width)
        if height < 1:
            raise InvalidDimension("Height", height)
        return AnchorPoint(
            column=advance(top_left.column, width - 1),
            row=top_left.row + height - 1,
        )

    def lower_right_address(self) -> str:
        return self.lower_right_cell().address

    def bounds(self) -> BoundingBox:
        return BoundingBox(top_left=self.anchor_point, bottom_right=self.lower_right_cell())

    def _check_mutable(self) -> None:
        if self._anchor is not None:
            raise UnsupportedMutation(
                f"{type(self).__name__} anchored at {self._anchor.address} can no "
                "longer change structure; clone it first"
            )

    # ------------------------------------------------------------------
    # Style / copies
    # ------------------------------------------------------------------

    @property
    def style(self) -> Dict[str, Any]:
        return copy.deepcopy(self._style)

    def set_style(self, style: Optional[Dict[str, Any]]) -> "Entity":
        self._style = copy.deepcopy(dict(style)) if style else {}
        return self

    def walk(self) -> Iterator["Entity"]:
        """Pre-order iteration over this entity and all of its descendants."""
        yield self
        for child in self._children():
            yield from child.walk()

    def clone(self, keep_anchor: bool = True) -> "Entity":
        """
        Deep copy of this entity.

        With ``keep_anchor=False`` every anchor in the copy is cleared, so
        the copy can be edited and placed again.
        """
        dup = copy.deepcopy(self)
        if not keep_anchor:
            for entity in dup.walk():
                entity._anchor = None
        return dup

    def __repr__(self) -> str:
        where = self._anchor.address if self._anchor else "unanchored"
        return f"{type(self).__name__}({self.width}x{self.height} @ {where})"
