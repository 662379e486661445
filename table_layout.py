from collections.abc import Mapping

from cell import Cell
from column import Column


class Layout:
    """Ordered column set: turns keyed row data into cells in column order."""

    def __init__(self, columns, header_color="white"):
        if columns is None:
            columns = []
        self.columns = [Column.from_spec(col) for col in columns]
        self.header_color = header_color

    @property
    def column_names(self) -> list[str]:
        return [col.key for col in self.columns]

    def build_header_row(self) -> list[Cell]:
        return [Cell(raw_value=col.key, color=self.header_color) for col in self.columns]

    def build_cells_for_row(self, row) -> list[Cell]:
        cells = []
        for col in self.columns:
            raw = _lookup(row, col)
            cells.append(Cell.from_raw("" if raw is None else raw))
        return cells

    def format_row(self, cells):
        return [col.format_cell(cell) for cell, col in zip(cells, self.columns)]


def _lookup(row, col):
    # anything that is not a mapping has no columns to show
    if not isinstance(row, Mapping):
        return None
    if col.name in row:
        return row[col.name]
    return row.get(col.key)
