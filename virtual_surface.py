from collections import deque


class VirtualSurface:
    """In-memory stand-in for CursesSurface used by the tests."""

    def __init__(self, lines=24, cols=80, keys=None):
        self.lines = lines
        self.cols = cols
        self.keys = deque(keys or [])
        self.initialized = False
        self.torn_down = False
        self.refreshes = 0
        self.clears = 0
        self.writes = []
        self._grid = {}

    def init(self):
        self.initialized = True

    def teardown(self):
        self.torn_down = True

    def size(self):
        return self.lines, self.cols

    def clear(self):
        self.clears += 1
        self.writes = []
        self._grid = {}

    def write(self, y, x, text, pair=None, bold=False, reverse=False):
        if y < 0 or y >= self.lines or x >= self.cols or not text:
            return
        text = text[: self.cols - x]
        self.writes.append((y, x, text, pair, bold, reverse))
        for i, ch in enumerate(text):
            self._grid[(y, x + i)] = ch

    def refresh(self):
        self.refreshes += 1

    def read_key(self):
        if self.keys:
            return self.keys.popleft()
        return None

    def line(self, y):
        return "".join(self._grid.get((y, x), " ") for x in range(self.cols))

    def writes_on(self, y):
        return [w for w in self.writes if w[0] == y]
