from typing import Any, Dict, List, Tuple

import pytest

from render.sink import RenderSink


class RecordingSink(RenderSink):
    """Sink that remembers every call instead of writing a sheet."""

    def __init__(self) -> None:
        self.calls: List[Tuple[Any, ...]] = []

    def apply_range_style(self, top_left: str, bottom_right: str, style: Dict[str, Any]) -> None:
        self.calls.append(("range_style", top_left, bottom_right, style))

    def merge_range(self, top_left: str, bottom_right: str) -> None:
        self.calls.append(("merge", top_left, bottom_right))

    def set_cell_value(self, address: str, value: Any) -> None:
        self.calls.append(("value", address, value))

    def apply_cell_style(self, address: str, style: Dict[str, Any]) -> None:
        self.calls.append(("cell_style", address, style))

    def auto_size_column_range(self, first_column: str, last_column: str) -> None:
        self.calls.append(("auto_size", first_column, last_column))

    def of_kind(self, kind: str) -> List[Tuple[Any, ...]]:
        return [call for call in self.calls if call[0] == kind]


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()
