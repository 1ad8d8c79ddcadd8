"""
Style payloads and their translation to openpyxl style objects.

A payload is a plain dict the layout carries without interpreting:

    {
        "font":          {...Font kwargs},
        "fill":          {...PatternFill kwargs},
        "alignment":     {...Alignment kwargs},
        "border":        {"outline": <side>, "inside": <side>},
        "number_format": "0.00",
    }

A border side is either a style name ("thin", "thick", ...) or a dict of
``Side`` kwargs.
"""

from __future__ import annotations

import copy
from typing import Any, Dict, Optional, Union

from openpyxl.cell.cell import Cell
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side

StylePayload = Dict[str, Any]

STYLE_KEYS = frozenset({"font", "fill", "alignment", "border", "number_format"})

# ── Defaults applied by the facade when default styling is on ───────
DEFAULT_STYLES: Dict[str, StylePayload] = {
    "table": {
        "border": {"outline": "thick", "inside": "thin"},
    },
    "table_header": {
        "alignment": {"horizontal": "center"},
        "fill": {
            "fill_type": "solid",
            "start_color": "FFA0A0A0",
            "end_color": "FFA0A0A0",
        },
    },
    "table_footer": {},
    "column_header": {
        "alignment": {"horizontal": "center"},
    },
    "column_footer": {
        "font": {"bold": True},
    },
}


def merge_styles(base: StylePayload, override: StylePayload) -> StylePayload:
    """
    Layer *override* on top of *base*.  Nested dicts (font, fill, ...) are
    merged key by key; anything else is replaced.
    """
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = {**merged[key], **copy.deepcopy(value)}
        else:
            merged[key] = copy.deepcopy(value)
    return merged


def _side(value: Union[str, Dict[str, Any], None]) -> Optional[Side]:
    if value is None:
        return None
    if isinstance(value, str):
        return Side(style=value)
    return Side(**value)


def _border_for(
    current: Border,
    sides: Dict[str, Any],
    top: bool,
    bottom: bool,
    left: bool,
    right: bool,
) -> Border:
    """
    Build the border of one cell in a styled rectangle.  Edges on the
    rectangle's outline take the outline side, the rest the inside side;
    unspecified sides keep what the cell already has.
    """
    outline = _side(sides.get("outline"))
    inside = _side(sides.get("inside"))

    def pick(on_edge: bool, existing: Side) -> Side:
        chosen = outline if on_edge else inside
        return chosen if chosen is not None else existing

    return Border(
        left=pick(left, current.left),
        right=pick(right, current.right),
        top=pick(top, current.top),
        bottom=pick(bottom, current.bottom),
    )


def apply_style(
    cell: Cell,
    style: StylePayload,
    *,
    top: bool = True,
    bottom: bool = True,
    left: bool = True,
    right: bool = True,
) -> None:
    """
    Write *style* onto an openpyxl cell.  The edge flags say which sides of
    the cell lie on the outline of the styled rectangle.
    """
    unknown = set(style) - STYLE_KEYS
    if unknown:
        raise ValueError(f"Unsupported style key(s): {sorted(unknown)}")

    if "font" in style:
        cell.font = Font(**style["font"])
    if "fill" in style:
        cell.fill = PatternFill(**style["fill"])
    if "alignment" in style:
        cell.alignment = Alignment(**style["alignment"])
    if "number_format" in style:
        cell.number_format = style["number_format"]
    if "border" in style:
        cell.border = _border_for(cell.border, style["border"], top, bottom, left, right)
