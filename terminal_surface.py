import curses
import os

from colors import setup_colors
from input_handler import normalize_key

# Make ESC snappy
os.environ.setdefault("ESCDELAY", "25")


class CursesSurface:
    """The character grid the table draws on, backed by stdscr."""

    def __init__(self):
        self.stdscr = None
        self.color_pairs = 0

    def init(self):
        self.stdscr = curses.initscr()
        curses.noecho()
        curses.cbreak()
        self.stdscr.keypad(True)
        self.stdscr.nodelay(True)
        try:
            curses.curs_set(0)
        except curses.error:
            pass
        if curses.has_colors():
            curses.start_color()
            count = min(curses.COLORS, curses.COLOR_PAIRS - 1)
            setup_colors(curses.init_pair, curses.COLOR_BLACK, count)
            self.color_pairs = min(256, count)
        self.stdscr.clear()

    def teardown(self):
        if self.stdscr is None:
            return
        self.stdscr.keypad(False)
        curses.nocbreak()
        curses.echo()
        curses.endwin()
        self.stdscr = None

    def size(self):
        return self.stdscr.getmaxyx()

    def clear(self):
        self.stdscr.erase()

    def write(self, y, x, text, pair=None, bold=False, reverse=False):
        h, w = self.stdscr.getmaxyx()
        if y < 0 or y >= h or x >= w or not text:
            return
        attr = curses.A_NORMAL
        if pair is not None and 0 < pair <= self.color_pairs:
            attr |= curses.color_pair(pair)
        if bold:
            attr |= curses.A_BOLD
        if reverse:
            attr |= curses.A_REVERSE
        try:
            self.stdscr.addnstr(y, x, text, w - x, attr)
        except curses.error:
            # writing the bottom-right cell moves the cursor off screen
            pass

    def refresh(self):
        self.stdscr.refresh()

    def read_key(self):
        return normalize_key(self.stdscr.getch())
