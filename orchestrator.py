# ~/Apps/hexview/orchestrator.py
import logging
import time

from byte_grid import ByteGrid
from config_paths import FPS_DEFAULT
from hex_pane import HexPane
from key_dispatcher import KeyDispatcher
from row_layout import MIN_WIDTH, compute_row_layout
from terminal import CURSOR_BLOCK
from viewport import ViewportState


logger = logging.getLogger(__name__)


class Orchestrator:
    def __init__(self, terminal, buffer: bytes, fps=FPS_DEFAULT, sleep=time.sleep):
        self.term = terminal
        self.buffer = buffer
        self.state = ViewportState()
        self.pane = HexPane()
        self.dispatcher = KeyDispatcher()
        self.sleep = sleep
        # whole milliseconds, rounded down: 15 fps -> 66 ms
        self.frame_delay = int(1000 / fps) / 1000

        self.exit_requested = False
        self._last_size = None

    # ---------------- frame ----------------

    def _read_size(self):
        width, height = self.term.get_size()
        if (width, height) != self._last_size:
            if self._last_size is not None:
                logger.debug(f"Terminal resized to {width}x{height}")
            if width < MIN_WIDTH:
                logger.warning(f"Terminal width {width} below {MIN_WIDTH}; clamping to one byte per row")
            self._last_size = (width, height)
        return width, height

    def step(self) -> bool:
        """Run one frame; False once a quit key has been consumed."""
        width, height = self._read_size()
        layout = compute_row_layout(width)
        grid = ByteGrid(self.buffer, layout.row_width)

        key = self.term.poll_key_event(0)
        if key is not None:
            if self.dispatcher.dispatch(key, self.state, width, height, grid.row_count):
                self.exit_requested = True
                return False

        self.state.fit(width, height, grid.row_count)
        self.redraw(grid, layout, height)
        return True

    def redraw(self, grid, layout, height):
        self.term.clear_screen()
        self.term.set_cursor_style(CURSOR_BLOCK)
        self.pane.draw(self.term, grid, layout, self.state, height)
        self.term.move_cursor(self.state.cursor_col, self.state.cursor_row)
        self.term.flush()

    # ---------------- main loop ----------------

    def run(self):
        logger.info(f"Viewer started ({len(self.buffer)} bytes)")
        with self.term.raw_mode():
            self.term.clear_screen()
            self.term.flush()
            try:
                while self.step():
                    self.sleep(self.frame_delay)
            finally:
                self.term.clear_screen()
                self.term.move_cursor(0, 0)
                self.term.flush()
        logger.info("Viewer stopped")
