from __future__ import annotations


class RouteLenError(Exception):
    """Base class for errors raised by routelen."""


class IndexOutOfRange(RouteLenError, IndexError):
    def __init__(self, row: int, col: int, rows: int, cols: int):
        self.row, self.col = row, col
        self.rows, self.cols = rows, cols
        super().__init__(f"index ({row}, {col}) out of range for {rows}x{cols} matrix")


class InvalidDimensions(RouteLenError, ValueError):
    pass
