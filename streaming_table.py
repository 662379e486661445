# ~/Apps/tailgrid/streaming_table.py
import logging
import os
import threading
import time

import pandas as pd

from input_handler import InputHandler, merge_keybindings
from row_buffer import RowBuffer
from status_bar import help_text
from table_layout import Layout
from table_pane import TablePane, body_height
from terminal_surface import CursesSurface
from viewport import Viewport

logger = logging.getLogger(__name__)

DEFAULT_LINES = 24
DEFAULT_POLL_INTERVAL = 0.1


class StreamingTable:
    """A live table: new rows land on top, the oldest fall off past ``max_rows``.

    ``add_row`` may be called from any thread. Keys are read by a polling
    thread started with ``start``. Every state change and the redraw that
    follows it run under one lock, so the surface is only touched by one
    thread at a time.

        table = StreamingTable(columns=[{"name": "time", "width": 10}])
        with table:
            table.add_row({"time": "12:00"})
            table.wait()
    """

    def __init__(
        self,
        columns=None,
        max_rows=100_000,
        keybindings=None,
        header_color="white",
        poll_interval=DEFAULT_POLL_INTERVAL,
        export_dir=None,
        surface=None,
    ):
        self._layout = Layout(columns=columns, header_color=header_color)
        self.buffer = RowBuffer(max_rows)
        self.viewport = Viewport()
        self.keybindings = merge_keybindings(keybindings)
        self.input_handler = InputHandler(self.keybindings, self)
        self.help = help_text(self.keybindings)
        self.pane = TablePane()
        self.surface = surface if surface is not None else CursesSurface()
        self.poll_interval = poll_interval
        self.export_dir = export_dir or os.getcwd()

        self.lock = threading.RLock()
        self.should_exit = False
        self.started = False
        self.input_error = None
        self._input_thread = None

        self.status_msg = None
        self.status_msg_until = 0

    # ---------------- state ----------------

    @property
    def layout(self):
        return self._layout

    @layout.setter
    def layout(self, new_layout):
        with self.lock:
            self._layout = new_layout
            self.draw()

    @property
    def max_rows(self) -> int:
        return self.buffer.max_rows

    @property
    def rows(self) -> list:
        with self.lock:
            return self.buffer.rows

    @property
    def paused(self) -> bool:
        return self.viewport.paused

    @property
    def current_row_index(self) -> int:
        return self.viewport.cursor

    @property
    def offset(self) -> int:
        return self.viewport.offset

    @property
    def selected_row_ids(self) -> set:
        with self.lock:
            return set(self.viewport.selected)

    def display_height(self) -> int:
        lines = self.surface.size()[0] if self.started else DEFAULT_LINES
        return body_height(lines)

    def _set_status(self, msg, seconds=3):
        self.status_msg = msg
        self.status_msg_until = time.time() + seconds

    def _status_context(self):
        return {
            "status_msg": self.status_msg,
            "status_until": self.status_msg_until,
            "paused": self.viewport.paused,
            "selected": len(self.viewport.selected),
            "rows": len(self.buffer),
            "max_rows": self.buffer.max_rows,
            "help": self.help,
        }

    # ---------------- lifecycle ----------------

    def start(self):
        self.setup()
        self.start_input_handling()
        self.draw()

    def setup(self):
        with self.lock:
            self.surface.init()
            self.should_exit = False
            self.started = True
        logger.info("table started: %d columns, max_rows=%d", len(self._layout.columns), self.max_rows)

    def stop(self):
        self.should_exit = True
        thread = self._input_thread
        if thread is not None and thread is not threading.current_thread():
            thread.join()
        self._input_thread = None
        with self.lock:
            if self.started:
                self.started = False
                self.surface.teardown()
                logger.info("table stopped")

    def wait(self, timeout=None) -> bool:
        """Block until the input loop ends. Returns False on timeout."""
        thread = self._input_thread
        if thread is None:
            return True
        thread.join(timeout)
        return not thread.is_alive()

    def __enter__(self):
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.stop()
        return False

    # ---------------- ingestion ----------------

    def add_row(self, row_data):
        with self.lock:
            if not self.started:
                return
            _, evicted = self.buffer.push(row_data)
            self.viewport.forget(evicted)
            if self.viewport.paused:
                self.viewport.anchor_new_row(len(self.buffer))
            else:
                self.draw()

    # ---------------- input ----------------

    def start_input_handling(self):
        self._input_thread = threading.Thread(
            target=self._input_loop, name="tailgrid-input", daemon=True
        )
        self._input_thread.start()

    def _input_loop(self):
        try:
            while not self.should_exit:
                self.handle_input()
                time.sleep(self.poll_interval)
        except Exception as exc:
            self.input_error = exc
            logger.exception("input loop stopped")
            with self.lock:
                self._set_status(f"Error in input thread: {exc}", seconds=float("inf"))
                self.draw_footer()

    def handle_input(self):
        with self.lock:
            if not self.started:
                return
            key = self.surface.read_key()
            self.input_handler.handle_input(key)

    def quit(self):
        self.should_exit = True

    def navigate_up(self):
        with self.lock:
            if self.viewport.move_up(self.display_height()):
                self.draw()

    def navigate_down(self):
        with self.lock:
            if self.viewport.move_down(len(self.buffer), self.display_height()):
                self.draw()

    def adjust_offset(self):
        with self.lock:
            self.viewport.adjust_offset(self.display_height())

    def toggle_selection(self):
        with self.lock:
            entry = self.buffer.entry_at(self.viewport.cursor)
            if entry is not None:
                self.viewport.toggle(entry[0])
            self.draw()

    def toggle_pause(self):
        with self.lock:
            if self.viewport.paused:
                self.viewport.paused = False
                self.viewport.reset()
                logger.info("resumed with %d rows buffered", len(self.buffer))
                self.draw()
            else:
                self.viewport.paused = True
                logger.info("paused")
                self.draw_footer()

    # ---------------- export ----------------

    def snapshot(self, selected_only=False) -> pd.DataFrame:
        with self.lock:
            layout = self._layout
            entries = self.buffer.window(0, len(self.buffer))
            if selected_only:
                entries = [e for e in entries if e[0] in self.viewport.selected]
            records = []
            for _, row in entries:
                records.append([cell.text for cell in layout.build_cells_for_row(row)])
            index = pd.Index([row_id for row_id, _ in entries], name="row_id")
        return pd.DataFrame(records, columns=layout.column_names, index=index)

    def export(self):
        """Write the selected rows (all rows when none are selected) to CSV."""
        with self.lock:
            df = self.snapshot(selected_only=bool(self.viewport.selected))
            path = None
            try:
                os.makedirs(self.export_dir, exist_ok=True)
                path = self._export_path()
                df.to_csv(path, index=False)
            except OSError as exc:
                logger.warning("export to %s failed: %s", self.export_dir, exc)
                self._set_status(f"Export failed: {exc}")
                path = None
            else:
                logger.info("exported %d rows to %s", len(df), path)
                self._set_status(f"Exported {len(df)} rows to {path}")
            self.draw_footer()
            return path

    def _export_path(self):
        stamp = time.strftime("%Y%m%d-%H%M%S")
        path = os.path.join(self.export_dir, f"tailgrid-{stamp}.csv")
        n = 1
        while os.path.exists(path):
            path = os.path.join(self.export_dir, f"tailgrid-{stamp}-{n}.csv")
            n += 1
        return path

    # ---------------- drawing ----------------

    def draw(self):
        with self.lock:
            if not self.started:
                return
            vp = self.viewport
            height = self.display_height()
            # the terminal may have shrunk since the last move
            vp.adjust_offset(height)
            entries = self.buffer.window(vp.offset, height)
            self.pane.draw(self.surface, self._layout, entries, vp, self._status_context())

    def draw_footer(self):
        with self.lock:
            if not self.started:
                return
            self.pane.draw_status(self.surface, self._status_context())
