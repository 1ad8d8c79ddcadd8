"""
Base class for rendering sinks.

A sink knows how to write into a concrete sheet; the layout only tells it
*where* (A1-style addresses) and *what* (values and opaque style payloads).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict


class RenderSink(ABC):
    """Interface every sheet backend must implement."""

    @abstractmethod
    def apply_range_style(self, top_left: str, bottom_right: str, style: Dict[str, Any]) -> None:
        """Apply *style* to every sheet cell in the rectangle."""
        ...

    @abstractmethod
    def merge_range(self, top_left: str, bottom_right: str) -> None:
        """Merge the rectangle into a single sheet cell."""
        ...

    @abstractmethod
    def set_cell_value(self, address: str, value: Any) -> None:
        ...

    @abstractmethod
    def apply_cell_style(self, address: str, style: Dict[str, Any]) -> None:
        ...

    @abstractmethod
    def auto_size_column_range(self, first_column: str, last_column: str) -> None:
        """Fit the width of every column from *first_column* to *last_column*."""
        ...
