import pytest

from dto.coordinate import AnchorPoint, BoundingBox
from layout.address import (
    address_of,
    advance,
    column_span,
    from_ordinal,
    split_address,
    to_ordinal,
    valid_sheet_cell,
    validate_sheet_cell,
)
from layout.errors import InvalidAddress


@pytest.mark.parametrize(
    "column, ordinal",
    [("A", 1), ("Z", 26), ("AA", 27), ("AZ", 52), ("BA", 53), ("ZZ", 702), ("AAA", 703)],
)
def test_ordinals(column: str, ordinal: int) -> None:
    assert to_ordinal(column) == ordinal
    assert from_ordinal(ordinal) == column


@pytest.mark.parametrize("column", ["A", "M", "Z", "AA", "QZ", "XFD", "ZZZ"])
def test_ordinal_round_trip(column: str) -> None:
    assert from_ordinal(to_ordinal(column)) == column


def test_lower_case_columns_are_normalised() -> None:
    assert to_ordinal("ab") == 28
    assert validate_sheet_cell("ab", 3) == ("AB", 3)
    assert address_of("ab", 12) == "AB12"


@pytest.mark.parametrize(
    "column, row",
    [("", 1), ("A1", 1), ("1", 1), ("A", 0), ("A", -3), ("A", "2"), ("A", True), ("A-", 2), ("AAAA", 1)],
)
def test_invalid_cells(column, row) -> None:
    assert not valid_sheet_cell(column, row)
    with pytest.raises(InvalidAddress):
        validate_sheet_cell(column, row)


def test_invalid_address_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        to_ordinal("A1")


def test_out_of_range_ordinals() -> None:
    with pytest.raises(InvalidAddress):
        from_ordinal(0)
    with pytest.raises(InvalidAddress):
        from_ordinal(18279)


def test_advance_crosses_letter_boundaries() -> None:
    assert advance("Z", 1) == "AA"
    assert advance("AZ", 1) == "BA"
    assert advance("AB", -1) == "AA"
    assert advance("C", 0) == "C"


def test_split_address() -> None:
    assert split_address("AB12") == ("AB", 12)
    assert split_address("c7") == ("C", 7)
    for bad in ("12AB", "A0", "A", ""):
        with pytest.raises(InvalidAddress):
            split_address(bad)


def test_column_span() -> None:
    assert column_span("Y", "AB") == ["Y", "Z", "AA", "AB"]
    assert column_span("C", "C") == ["C"]


def test_anchor_point_offset_uses_ordinals() -> None:
    point = AnchorPoint(column="Y", row=5)
    assert point.offset(columns=3, rows=2).address == "AB7"
    assert point.ordinal == 25
    assert str(point) == "Y5"


def test_bounding_box_geometry() -> None:
    box = BoundingBox(
        top_left=AnchorPoint(column="B", row=2),
        bottom_right=AnchorPoint(column="D", row=6),
    )
    assert box.width == 3
    assert box.height == 5
    assert box.range_string == "B2:D6"
    assert not box.is_single_cell
