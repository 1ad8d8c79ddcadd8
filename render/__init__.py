from render.sink import RenderSink
from render.styles import DEFAULT_STYLES, apply_style, merge_styles
from render.worksheet import WorksheetSink

__all__ = [
    "RenderSink",
    "WorksheetSink",
    "DEFAULT_STYLES",
    "apply_style",
    "merge_styles",
]
