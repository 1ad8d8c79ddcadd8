from __future__ import annotations

from typing import Any, Dict, Iterator, Optional

from dto.render import RenderItem, RenderRole
from layout.base import Entity


class Cell(Entity):
    """
    A value with a style and a size.

    The size counts the sheet cells merged to form this table cell, with the
    anchor as origin.  Unlike columns and tables, cells have no header or
    footer.
    """

    def __init__(
        self,
        value: Any = None,
        width: int = 1,
        height: int = 1,
        style: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__()
        self.set_width(width)
        self.set_height(height)
        self.set_style(style)
        self._value = value

    def resolve_addresses(self) -> None:
        pass

    @property
    def value(self) -> Any:
        return self._value

    def set_value(self, value: Any) -> "Cell":
        self._value = value
        return self

    def render_items(
        self,
        role: RenderRole = "cell",
        style: Optional[Dict[str, Any]] = None,
    ) -> Iterator[RenderItem]:
        yield RenderItem(
            role=role,
            bounds=self.bounds(),
            value=self._value,
            style=self.style if style is None else style,
        )
