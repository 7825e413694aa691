# ~/Apps/hexview/terminal.py
import contextlib
import curses
import logging


logger = logging.getLogger(__name__)

CURSOR_HIDDEN = 0
CURSOR_NORMAL = 1
CURSOR_BLOCK = 2


class Terminal:
    """Thin capability layer over a curses window.

    curses writes are positional, so the write helpers take the target cell
    directly. Everything is buffered until flush().
    """

    def __init__(self, stdscr):
        self.stdscr = stdscr
        self._pairs = {}
        self._has_colors = False
        try:
            curses.start_color()
            curses.use_default_colors()
            self._has_colors = curses.has_colors()
        except curses.error:
            self._has_colors = False
        self.stdscr.keypad(True)

    # ---------- terminal mode ----------
    def enable_raw_mode(self):
        curses.raw()
        curses.noecho()

    def disable_raw_mode(self):
        curses.noraw()

    @contextlib.contextmanager
    def raw_mode(self):
        self.enable_raw_mode()
        try:
            yield self
        finally:
            try:
                self.disable_raw_mode()
            except curses.error:
                logger.warning("Could not leave raw mode")

    def set_cursor_style(self, style):
        try:
            curses.curs_set(style)
        except curses.error:
            # some terminals only support a subset of visibilities
            pass

    # ---------- geometry ----------
    def get_size(self):
        h, w = self.stdscr.getmaxyx()
        return w, h

    # ---------- output ----------
    def clear_screen(self):
        self.stdscr.erase()

    def move_cursor(self, col, row):
        try:
            self.stdscr.move(row, col)
        except curses.error:
            pass

    def write_plain(self, col, row, text):
        self._write(col, row, text, curses.A_NORMAL)

    def write_styled(self, col, row, text, fg, bg):
        self._write(col, row, text, self._attr_for(fg, bg))

    def _write(self, col, row, text, attr):
        h, w = self.stdscr.getmaxyx()
        if row < 0 or row >= h or col < 0 or col >= w:
            return
        try:
            self.stdscr.addnstr(row, col, text, w - col, attr)
        except curses.error:
            # writing the bottom-right cell moves the cursor off screen
            pass

    def _attr_for(self, fg, bg):
        if not self._has_colors:
            return curses.A_REVERSE
        key = (fg, bg)
        if key not in self._pairs:
            pair_id = len(self._pairs) + 1
            try:
                curses.init_pair(pair_id, fg, bg)
            except curses.error:
                return curses.A_REVERSE
            self._pairs[key] = pair_id
        return curses.color_pair(self._pairs[key])

    def flush(self):
        self.stdscr.refresh()

    # ---------- input ----------
    def poll_key_event(self, timeout=0.0):
        """Return one pending key code, or None if nothing arrived in time."""
        self.stdscr.timeout(max(0, int(timeout * 1000)))
        ch = self.stdscr.getch()
        if ch == -1:
            return None
        return ch
