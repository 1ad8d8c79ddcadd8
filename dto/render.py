"""
RenderItem: the snapshot a resolved entity hands to the facade.

Items are emitted in render order (table range, header, children, footer)
and never reference the live entity tree, so a sink cannot mutate layout
state through them.
"""

from __future__ import annotations

from typing import Any, Dict, Literal

from pydantic import BaseModel

from dto.coordinate import BoundingBox

RenderRole = Literal[
    "table",
    "table_header",
    "table_footer",
    "column",
    "column_header",
    "column_footer",
    "cell",
]

# Roles that describe a styled range rather than a single valued table cell
RANGE_ROLES = frozenset({"table", "column"})


class RenderItem(BaseModel):
    role: RenderRole
    bounds: BoundingBox
    value: Any = None
    style: Dict[str, Any] = {}

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    @property
    def is_range(self) -> bool:
        return self.role in RANGE_ROLES

    @property
    def needs_merge(self) -> bool:
        return not self.is_range and not self.bounds.is_single_cell
