import pandas as pd
import pytest

from column import Column
from table_layout import Layout


def _layout(header_color="white"):
    return Layout(
        columns=[{"name": "time", "width": 10}, Column(name="level", width=5)],
        header_color=header_color,
    )


def test_columns_accept_mappings_and_objects():
    layout = _layout()
    assert [(c.name, c.width) for c in layout.columns] == [("time", 10), ("level", 5)]
    assert layout.column_names == ["time", "level"]


def test_header_uses_one_color_for_every_column():
    header = _layout(header_color="yellow").build_header_row()
    assert [c.value for c in header] == ["time", "level"]
    assert {c.color for c in header} == {"yellow"}


def test_cells_follow_column_order_not_row_order():
    layout = _layout()
    cells = layout.build_cells_for_row({"level": {"value": "INFO", "color": "green"}, "time": "12:00"})
    assert [c.value for c in cells] == ["12:00", "INFO"]
    assert [c.color for c in cells] == [None, "green"]


def test_missing_values_become_empty_cells():
    cells = _layout().build_cells_for_row({"time": "12:00"})
    assert cells[1].text == ""
    assert cells[1].color is None
    assert [c.text for c in _layout().build_cells_for_row({})] == ["", ""]


def test_falsy_values_are_kept():
    cells = _layout().build_cells_for_row({"time": 0, "level": False})
    assert [c.text for c in cells] == ["0", "False"]


def test_lookup_falls_back_to_string_key():
    layout = Layout(columns=[{"name": 1, "width": 3}])
    assert layout.build_cells_for_row({"1": "x"})[0].text == "x"
    assert layout.build_cells_for_row({1: "y"})[0].text == "y"


@pytest.mark.parametrize("row", [pd.Series({"time": "a"}), "12:00 INFO", None, ["12:00"]])
def test_rows_that_are_not_mappings_render_empty(row):
    cells = _layout().build_cells_for_row(row)
    assert [c.text for c in cells] == ["", ""]


def test_format_row_pairs_cells_with_columns():
    layout = _layout()
    formatted = layout.format_row(layout.build_cells_for_row({"time": "a", "level": "WARNING"}))
    assert formatted == [("a         ", None), ("WARN…", None)]


def test_malformed_column_fails_at_construction():
    with pytest.raises(ValueError):
        Layout(columns=[{"name": "time"}])
