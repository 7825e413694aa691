import curses
import unittest
from unittest.mock import patch

import terminal
from terminal import Terminal


class DummyWin:
    def __init__(self, h=5, w=10, keys=()):
        self._h = h
        self._w = w
        self.keys = list(keys)
        self.writes = []
        self.timeouts = []
        self.moves = []
        self.refreshed = 0
        self.erased = 0

    def getmaxyx(self):
        return self._h, self._w

    def keypad(self, flag):
        self.keypad_flag = flag

    def addnstr(self, y, x, text, n, attr=0):
        if y == self._h - 1 and x + min(len(text), n) >= self._w:
            self.writes.append((y, x, text[:n], attr))
            raise curses.error("addnstr() returned ERR")
        self.writes.append((y, x, text[:n], attr))

    def move(self, y, x):
        if y >= self._h or x >= self._w:
            raise curses.error("move() returned ERR")
        self.moves.append((y, x))

    def erase(self):
        self.erased += 1

    def refresh(self):
        self.refreshed += 1

    def timeout(self, ms):
        self.timeouts.append(ms)

    def getch(self):
        return self.keys.pop(0) if self.keys else -1


def _make(win, has_colors=True):
    with patch.object(curses, "start_color"), patch.object(
        curses, "use_default_colors"
    ), patch.object(curses, "has_colors", return_value=has_colors):
        return Terminal(win)


class TerminalTests(unittest.TestCase):
    def test_size_is_width_then_height(self):
        term = _make(DummyWin(h=24, w=80))
        self.assertEqual(term.get_size(), (80, 24))

    def test_poll_returns_none_when_idle(self):
        win = DummyWin(keys=[ord("j")])
        term = _make(win)
        self.assertEqual(term.poll_key_event(0), ord("j"))
        self.assertIsNone(term.poll_key_event(0))
        self.assertEqual(win.timeouts, [0, 0])

    def test_off_screen_writes_are_dropped(self):
        win = DummyWin(h=5, w=10)
        term = _make(win)
        term.write_plain(12, 0, "ab")
        term.write_plain(0, 7, "ab")
        self.assertEqual(win.writes, [])

    def test_bottom_right_write_error_is_swallowed(self):
        win = DummyWin(h=5, w=10)
        term = _make(win)
        term.write_plain(8, 4, "ff")
        self.assertEqual(len(win.writes), 1)

    def test_writes_are_truncated_to_screen_width(self):
        win = DummyWin(h=5, w=10)
        term = _make(win)
        term.write_plain(8, 0, " | ")
        self.assertEqual(win.writes[0][2], " |")

    def test_move_cursor_off_screen_is_ignored(self):
        win = DummyWin(h=5, w=10)
        term = _make(win)
        term.move_cursor(20, 20)
        term.move_cursor(3, 1)
        self.assertEqual(win.moves, [(1, 3)])

    def test_styled_write_uses_color_pair(self):
        win = DummyWin()
        term = _make(win)
        with patch.object(curses, "init_pair") as init_pair, patch.object(
            curses, "color_pair", side_effect=lambda n: n << 8
        ):
            term.write_styled(0, 0, "41", curses.COLOR_BLACK, curses.COLOR_BLUE)
            term.write_styled(3, 0, "42", curses.COLOR_BLACK, curses.COLOR_BLUE)
        init_pair.assert_called_once_with(1, curses.COLOR_BLACK, curses.COLOR_BLUE)
        self.assertEqual(win.writes[0][3], 1 << 8)

    def test_styled_write_without_colors_reverses(self):
        win = DummyWin()
        term = _make(win, has_colors=False)
        term.write_styled(0, 0, "41", curses.COLOR_BLACK, curses.COLOR_BLUE)
        self.assertEqual(win.writes[0][3], curses.A_REVERSE)

    def test_raw_mode_is_restored_on_error(self):
        term = _make(DummyWin())
        with patch.object(curses, "raw") as raw, patch.object(
            curses, "noecho"
        ), patch.object(curses, "noraw") as noraw:
            with self.assertRaises(ValueError):
                with term.raw_mode():
                    raw.assert_called_once_with()
                    raise ValueError("frame failed")
        noraw.assert_called_once_with()

    def test_cursor_style_errors_are_ignored(self):
        term = _make(DummyWin())
        with patch.object(curses, "curs_set", side_effect=curses.error) as curs_set:
            term.set_cursor_style(terminal.CURSOR_BLOCK)
        curs_set.assert_called_once_with(terminal.CURSOR_BLOCK)

    def test_flush_refreshes_once(self):
        win = DummyWin()
        term = _make(win)
        term.clear_screen()
        term.flush()
        self.assertEqual((win.erased, win.refreshed), (1, 1))


if __name__ == "__main__":
    unittest.main()
