# ~/Apps/hexview/viewport.py


class ViewportState:
    """Cursor cell plus the index of the first visible grid row.

    The cursor lives in terminal cells: `cursor_row` is relative to the top
    of the viewport and `cursor_col // 3` is the byte index within the row.
    """

    def __init__(self):
        self.cursor_col = 0
        self.cursor_row = 0
        self.start_row = 0

    @staticmethod
    def max_start_row(height: int, row_count: int) -> int:
        return max(0, row_count - height)

    # ---------- navigation ----------
    def move_right(self, width: int):
        self.cursor_col = max(0, min(self.cursor_col + 1, width - 1))

    def move_left(self):
        self.cursor_col = max(0, self.cursor_col - 1)

    def move_down(self, height: int, row_count: int):
        last_row = max(0, height - 1)
        if self.cursor_row >= last_row:
            # pinned to the bottom: scroll while rows remain below
            if self.start_row < self.max_start_row(height, row_count):
                self.start_row += 1
            self.cursor_row = last_row
        else:
            self.cursor_row += 1

    def move_up(self):
        if self.cursor_row <= 0:
            self.start_row = max(0, self.start_row - 1)
            self.cursor_row = 0
        else:
            self.cursor_row -= 1

    def jump_to_start(self):
        self.start_row = 0

    def jump_to_end(self, height: int, row_count: int):
        self.start_row = self.max_start_row(height, row_count)

    # ---------- frame sync ----------
    def fit(self, width: int, height: int, row_count: int):
        """Pull cursor and scroll offset back inside the current frame.

        Called every frame; a terminal shrink or a wider row layout can leave
        both pointing past the end.
        """
        self.cursor_col = min(max(0, self.cursor_col), max(0, width - 1))
        self.cursor_row = min(max(0, self.cursor_row), max(0, height - 1))
        self.start_row = min(
            max(0, self.start_row), self.max_start_row(height, row_count)
        )

    def highlighted_cell(self):
        """(viewport row, byte index) under the cursor, or None on a gap."""
        if self.cursor_col % 3 == 2:
            return None
        return self.cursor_row, self.cursor_col // 3

