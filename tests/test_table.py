import pytest

from layout import (
    Cell,
    Column,
    InvalidAddress,
    InvalidDimension,
    Table,
    UnsupportedMutation,
)


def _column(width: int, height: int) -> Column:
    return Column(width=width).add_values(list(range(height)))


def test_width_is_sum_and_height_is_max() -> None:
    table = Table(_column(2, 3), _column(1, 5), _column(3, 1))
    assert table.width == 6
    assert table.height == 5


def test_header_and_footer_add_one_row_each() -> None:
    table = Table(_column(2, 3), _column(1, 5), header="Title")
    assert table.height == 6
    table.set_footer("Totals")
    assert table.height == 7
    assert table.width == 3


def test_children_placed_left_to_right() -> None:
    table = Table(_column(2, 1), _column(1, 1), _column(3, 1)).anchor("C", 4)
    assert [element.anchor_address for element in table.elements] == ["C4", "E4", "F4"]


def test_children_start_below_header() -> None:
    table = Table(_column(2, 1), _column(1, 1), _column(3, 1), header="H").anchor("C", 4)
    assert [element.anchor_address for element in table.elements] == ["C5", "E5", "F5"]
    assert table.header.bounds().range_string == "C4:H4"


def test_two_columns_anchored_at_b2() -> None:
    table = Table(_column(2, 3), _column(1, 2)).anchor("B", 2)
    first, second = table.elements
    assert first.bounds().range_string == "B2:C4"
    assert second.bounds().range_string == "D2:D3"
    assert table.lower_right_address() == "D4"


def test_footer_sits_below_tallest_element() -> None:
    table = Table(_column(1, 2), _column(1, 4), header="H", footer="F").anchor("A", 1)
    assert table.footer.bounds().range_string == "A6:B6"
    assert table.lower_right_address() == "B6"


def test_nested_table_is_resolved_recursively() -> None:
    inner = Table(Column("x", values=[1, 2]), Column("y", values=[3, 4]), header="Inner")
    outer = Table(Column("Label", 2, values=["a", "b", "c"]), inner, header="Outer")
    outer.anchor("B", 2)

    assert outer.width == 4
    assert outer.height == 5
    roles = [(item.role, item.bounds.range_string, item.value) for item in outer.render_items()]
    assert roles == [
        ("table", "B2:E6", None),
        ("table_header", "B2:E2", "Outer"),
        ("column", "B3:C6", None),
        ("column_header", "B3:C3", "Label"),
        ("cell", "B4:C4", "a"),
        ("cell", "B5:C5", "b"),
        ("cell", "B6:C6", "c"),
        ("table", "D3:E6", None),
        ("table_header", "D3:E3", "Inner"),
        ("column", "D4:D6", None),
        ("column_header", "D4", "x"),
        ("cell", "D5", 1),
        ("cell", "D6", 2),
        ("column", "E4:E6", None),
        ("column_header", "E4", "y"),
        ("cell", "E5", 3),
        ("cell", "E6", 4),
    ]


def test_reanchoring_moves_every_descendant() -> None:
    table = Table(_column(1, 2), _column(2, 1), header="H")
    table.anchor("A", 1)
    table.anchor("C", 10)
    first, second = table.elements
    assert first.anchor_address == "C11"
    assert second.anchor_address == "D11"
    assert table.header.anchor_address == "C10"


def test_dimensions_are_derived_only() -> None:
    table = Table(_column(1, 1))
    with pytest.raises(UnsupportedMutation):
        table.set_width(3)
    with pytest.raises(UnsupportedMutation):
        table.set_height(3)


def test_add_elements_takes_a_private_copy() -> None:
    column = Column(width=2)
    table = Table(column)
    column.add_values([1, 2, 3])
    assert table.height == 0
    assert column.height == 3


def test_add_elements_skips_none_and_rejects_cells() -> None:
    table = Table(None, _column(1, 1))
    assert len(table.elements) == 1
    with pytest.raises(TypeError):
        table.add_elements(Cell("x"))


def test_adding_a_table_to_itself_copies_it() -> None:
    table = Table(_column(2, 2))
    table.add_elements(table)
    assert table.width == 4
    assert len(table.elements) == 2


def test_add_values_builds_by_row() -> None:
    table = Table(Column(), Column(), Column())
    table.add_values([1], [5, 6], [7, 8, 9])
    assert [element.values for element in table.elements] == [[1, 5, 7], [6, 8], [9]]
    assert table.height == 3


def test_add_values_rejects_long_rows_before_writing() -> None:
    table = Table(Column(), Column(), Column())
    with pytest.raises(UnsupportedMutation):
        table.add_values([1, 2], [10, 11, 12, 13])
    assert [element.values for element in table.elements] == [[], [], []]


def test_add_values_only_targets_columns() -> None:
    table = Table(Column(), Table(Column()))
    table.add_values([1])
    with pytest.raises(UnsupportedMutation):
        table.add_values([1, 2])
    with pytest.raises(TypeError):
        table.add_values("12")


def test_header_only_table_takes_band_width() -> None:
    table = Table().set_header("Report", width=3)
    assert table.width == 3
    assert table.height == 1
    table.set_footer("End")
    assert table.height == 2
    table.anchor("B", 2)
    assert table.footer.bounds().range_string == "B3:D3"
    assert table.lower_right_address() == "D3"


def test_empty_table_has_no_extent() -> None:
    table = Table()
    assert table.width == 0
    assert table.height == 0
    table.anchor("A", 1)
    with pytest.raises(InvalidDimension):
        table.lower_right_cell()
    assert list(table.render_items()) == []


def test_no_structural_changes_after_anchor() -> None:
    table = Table(Column()).anchor("A", 1)
    with pytest.raises(UnsupportedMutation):
        table.add_elements(Column())
    with pytest.raises(UnsupportedMutation):
        table.add_values([1])
    with pytest.raises(UnsupportedMutation):
        table.set_header("late")
    table.set_style({"font": {"bold": True}})
    assert table.style == {"font": {"bold": True}}


def test_clone_without_anchor_can_be_rebuilt() -> None:
    table = Table(Column(), header="H").anchor("A", 1)
    copy = table.clone(keep_anchor=False)
    copy.add_values(["value"])
    assert copy.height == 2
    assert table.height == 1
    assert not any(entity.is_anchored for entity in copy.walk())


def test_failed_reanchor_leaves_table_in_place() -> None:
    table = Table(Column(values=[1]), Column(values=[2]), Column(values=[3]))
    table.anchor("A", 1)
    with pytest.raises(InvalidAddress):
        table.anchor("ZZY", 1)
    assert table.anchor_address == "A1"
    assert [element.anchor_address for element in table.elements] == ["A1", "B1", "C1"]
    assert table.lower_right_address() == "C1"


def test_table_may_end_on_last_column() -> None:
    table = Table(Column(values=[1]), Column(values=[2]), header="Title")
    table.anchor("ZZY", 1)
    assert [element.anchor_address for element in table.elements] == ["ZZY2", "ZZZ2"]
    assert table.header.bounds().range_string == "ZZY1:ZZZ1"


def test_header_over_empty_sub_table_takes_band_width() -> None:
    table = Table(Table(), header="Title")
    assert table.width == 1
    assert table.height == 1
    table.anchor("A", 1)
    items = list(table.render_items())
    assert [(item.role, item.bounds.range_string, item.value) for item in items] == [
        ("table", "A1", None),
        ("table_header", "A1", "Title"),
    ]
