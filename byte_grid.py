class ByteGrid:
    """Read-only row view over a byte buffer.

    Rows are memoryview slices, so building a grid every frame copies nothing.
    """

    def __init__(self, buffer: bytes, row_width: int):
        if row_width < 1:
            raise ValueError(f"row_width must be >= 1, got {row_width}")
        self.view = memoryview(buffer)
        self.row_width = row_width

    def __len__(self):
        return self.row_count

    def __iter__(self):
        for idx in range(self.row_count):
            yield self.row(idx)

    @property
    def byte_count(self) -> int:
        return len(self.view)

    @property
    def row_count(self) -> int:
        return -(-self.byte_count // self.row_width)

    def row(self, idx: int) -> memoryview:
        if idx < 0 or idx >= self.row_count:
            raise IndexError(f"row {idx} out of range (0..{self.row_count - 1})")
        start = idx * self.row_width
        return self.view[start : start + self.row_width]

    def rows(self, start: int, stop: int) -> list[memoryview]:
        start = max(0, start)
        stop = min(self.row_count, stop)
        return [self.row(idx) for idx in range(start, stop)]
