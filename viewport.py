STYLE_CURRENT_SELECTED = "current+selected"
STYLE_CURRENT = "current"
STYLE_SELECTED = "selected"


class Viewport:
    """Cursor, scroll offset, pause flag and selected row ids."""

    def __init__(self):
        self.cursor = 0
        self.offset = 0
        self.paused = False
        self.selected: set[int] = set()

    def adjust_offset(self, height: int) -> None:
        height = max(1, height)
        if self.cursor < self.offset:
            self.offset = self.cursor
        elif self.cursor >= self.offset + height:
            self.offset = self.cursor - height + 1

    def move_up(self, height: int) -> bool:
        if self.cursor <= 0:
            return False
        self.cursor -= 1
        self.adjust_offset(height)
        return True

    def move_down(self, size: int, height: int) -> bool:
        if self.cursor >= size - 1:
            return False
        self.cursor += 1
        self.adjust_offset(height)
        return True

    def toggle(self, row_id: int) -> None:
        if row_id in self.selected:
            self.selected.remove(row_id)
        else:
            self.selected.add(row_id)

    def anchor_new_row(self, size: int) -> None:
        """Keep the cursor and view on the same rows after a prepend."""
        last = max(0, size - 1)
        self.cursor = min(self.cursor + 1, last)
        self.offset = min(self.offset + 1, last)

    def forget(self, row_id) -> None:
        if row_id is not None:
            self.selected.discard(row_id)

    def reset(self) -> None:
        self.cursor = 0
        self.offset = 0
        self.selected.clear()

    def visible_style(self, position: int, row_id: int):
        current = position == self.cursor
        selected = row_id in self.selected
        if current and selected:
            return STYLE_CURRENT_SELECTED
        if current:
            return STYLE_CURRENT
        if selected:
            return STYLE_SELECTED
        return None
