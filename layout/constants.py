"""
Environment-driven defaults.

Values are read once, when this module is first imported.  Importing it
calls ``dotenv.load_dotenv()``, which copies any variables from a local
``.env`` into ``os.environ`` without overriding ones already set.
"""

import os

import dotenv

dotenv.load_dotenv()


def _flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


# Top-left sheet cell where the first exported table is anchored
ANCHOR_COLUMN: str = os.getenv("SHEET_TABLE_ANCHOR_COLUMN", "B").upper()
ANCHOR_ROW: int = int(os.getenv("SHEET_TABLE_ANCHOR_ROW", "2"))

# Blank rows left between consecutive tables when no divisor is set
TABLE_GAP: int = int(os.getenv("SHEET_TABLE_GAP", "1"))

APPLY_DEFAULT_STYLE: bool = _flag("SHEET_TABLE_DEFAULT_STYLE")

# Lower bound for auto-sized column widths (Excel character units)
MIN_COLUMN_WIDTH: float = float(os.getenv("SHEET_TABLE_MIN_COLUMN_WIDTH", "8"))
