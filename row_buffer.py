from collections import deque
from itertools import islice


class RowBuffer:
    """Bounded newest-first row store.

    Each row gets a sequence id on arrival. Ids only grow and every push takes
    the next one, so the position of a retained row is ``newest_id - row_id``.
    """

    def __init__(self, max_rows: int = 100_000):
        if isinstance(max_rows, bool) or not isinstance(max_rows, int) or max_rows <= 0:
            raise ValueError(f"max_rows must be a positive integer, got {max_rows!r}")
        self.max_rows = max_rows
        self._entries = deque()
        self._next_id = 0

    def push(self, row):
        row_id = self._next_id
        self._next_id += 1
        self._entries.appendleft((row_id, row))
        evicted = None
        if len(self._entries) > self.max_rows:
            evicted, _ = self._entries.pop()
        return row_id, evicted

    def __len__(self) -> int:
        return len(self._entries)

    def __getitem__(self, position):
        return self._entries[position][1]

    @property
    def rows(self) -> list:
        return [row for _, row in self._entries]

    def ids(self) -> list[int]:
        return [row_id for row_id, _ in self._entries]

    def entry_at(self, position):
        if position < 0 or position >= len(self._entries):
            return None
        return self._entries[position]

    def window(self, offset: int, count: int) -> list:
        if count <= 0 or offset >= len(self._entries):
            return []
        offset = max(0, offset)
        return list(islice(self._entries, offset, offset + count))

    def position_of(self, row_id: int):
        if not self._entries:
            return None
        position = self._entries[0][0] - row_id
        if 0 <= position < len(self._entries):
            return position
        return None
