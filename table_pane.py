# ~/Apps/tailgrid/table_pane.py
import logging

from colors import pair_for
from status_bar import render_status
from viewport import STYLE_CURRENT, STYLE_CURRENT_SELECTED, STYLE_SELECTED

logger = logging.getLogger(__name__)

# (bold, reverse) per highlight style
ROW_ATTRS = {
    STYLE_CURRENT_SELECTED: (True, True),
    STYLE_CURRENT: (False, True),
    STYLE_SELECTED: (True, False),
    None: (False, False),
}

HEADER_Y = 0
BODY_Y = 1
RESERVED_LINES = 2  # header + status


def body_height(lines: int) -> int:
    return max(1, lines - RESERVED_LINES)


class TablePane:
    def __init__(self):
        self._warned_colors = set()

    # ---------- rendering ----------
    def draw(self, surface, layout, entries, viewport, status):
        """Draw header, the visible ``(row_id, row)`` entries and the status line.

        ``entries`` starts at ``viewport.offset``.
        """
        surface.clear()
        h, w = surface.size()

        header = layout.format_row(layout.build_header_row())
        self.draw_row(surface, HEADER_Y, header, bold=True)

        max_rows = max(0, h - RESERVED_LINES)
        for idx, (row_id, row) in enumerate(entries[:max_rows]):
            position = viewport.offset + idx
            cells = layout.build_cells_for_row(row)
            bold, reverse = ROW_ATTRS[viewport.visible_style(position, row_id)]
            self.draw_row(surface, BODY_Y + idx, layout.format_row(cells), bold, reverse)

        self._draw_status_line(surface, h, w, status)
        surface.refresh()

    def draw_status(self, surface, status):
        h, w = surface.size()
        self._draw_status_line(surface, h, w, status)
        surface.refresh()

    def _draw_status_line(self, surface, h, w, status):
        if h <= 0:
            return
        surface.write(h - 1, 0, render_status(status, w))

    def draw_row(self, surface, y, formatted_cells, bold=False, reverse=False):
        x = 0
        for cell in formatted_cells:
            parts = cell if isinstance(cell, list) else [cell]
            for text, color in parts:
                surface.write(y, x, text, self._pair(color), bold, reverse)
                x += len(text)
            # gap between columns
            surface.write(y, x, " ", None, bold, reverse)
            x += 1

    def _pair(self, color):
        if color is None:
            return None
        pair = pair_for(color)
        key = repr(color)
        if pair is None and key not in self._warned_colors:
            self._warned_colors.add(key)
            logger.debug("unknown color %r rendered without color", color)
        return pair
