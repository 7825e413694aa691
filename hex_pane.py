# ~/Apps/hexview/hex_pane.py
import curses


PLACEHOLDER_GLYPH = "."
SEPARATOR = " | "


def literal_glyph(byte: int) -> str:
    """Character shown for `byte` in the literal panel.

    The byte value is used as a code point directly (Latin-1 range), not
    decoded as UTF-8. Code points that do not render as a single visible
    cell fall back to PLACEHOLDER_GLYPH.
    """
    ch = chr(byte)
    if not ch.isprintable():
        return PLACEHOLDER_GLYPH
    return ch


class HexPane:
    HIGHLIGHT_FG = curses.COLOR_BLACK
    HIGHLIGHT_BG = curses.COLOR_BLUE

    def draw(self, term, grid, layout, state, height):
        """Queue one frame of hex and literal panels; the caller flushes."""
        highlighted = state.highlighted_cell()
        visible = grid.rows(state.start_row, state.start_row + max(0, height))

        for row_idx, chunk in enumerate(visible):
            row_len = len(chunk)
            for i in range(layout.row_width):
                active = highlighted == (row_idx, i)
                if i >= row_len:
                    term.write_plain(layout.hex_col(i), row_idx, "  ")
                else:
                    self._cell(term, layout.hex_col(i), row_idx, f"{chunk[i]:02x}", active)

            term.write_plain(layout.separator_col, row_idx, SEPARATOR)

            for i in range(layout.row_width):
                active = highlighted == (row_idx, i)
                if i >= row_len:
                    term.write_plain(layout.literal_col(i), row_idx, " ")
                else:
                    self._cell(
                        term, layout.literal_col(i), row_idx, literal_glyph(chunk[i]), active
                    )

    def _cell(self, term, col, row, text, active):
        if active:
            term.write_styled(col, row, text, self.HIGHLIGHT_FG, self.HIGHLIGHT_BG)
        else:
            term.write_plain(col, row, text)
