from dataclasses import dataclass

# narrowest terminal that fits one hex cell, the separator and one glyph
MIN_WIDTH = 6


@dataclass(frozen=True)
class RowLayout:
    row_width: int
    literal_offset: int

    @property
    def separator_col(self) -> int:
        return self.literal_offset - 3

    def hex_col(self, idx: int) -> int:
        return idx * 3

    def literal_col(self, idx: int) -> int:
        return self.literal_offset + idx


def compute_row_layout(width: int) -> RowLayout:
    """Bytes per row and literal panel start for a terminal `width` cells wide.

    Each byte costs three cells in the hex panel and one in the literal
    panel; two more go to the separator. Widths below MIN_WIDTH still get
    one byte per row so the grid never slices by zero.
    """
    row_width = max(1, (width - 2) // 4)
    return RowLayout(row_width=row_width, literal_offset=3 * row_width + 2)
