from __future__ import annotations
import operator
from dataclasses import dataclass
from typing import Callable, Tuple, TypeVar

import numpy as np

from .errors import IndexOutOfRange, InvalidDimensions

T = TypeVar("T")
CellGenerator = Callable[[int, int], T]


@dataclass(frozen=True)
class DenseMatrix:
    """Immutable rows x cols matrix stored as a flat row-major tuple."""
    rows: int
    cols: int
    cells: Tuple

    def __post_init__(self):
        object.__setattr__(self, "cells", tuple(self.cells))
        if self.rows < 0 or self.cols < 0:
            raise InvalidDimensions(f"dimensions must be >= 0, got {self.rows}x{self.cols}")
        if len(self.cells) != self.rows * self.cols:
            raise InvalidDimensions(
                f"{self.rows}x{self.cols} matrix needs {self.rows * self.cols} cells, got {len(self.cells)}")

    @staticmethod
    def build(rows: int, cols: int, generator: CellGenerator) -> "DenseMatrix":
        """Fill every cell (r, c) with generator(r, c), in row-major order."""
        if rows < 0 or cols < 0:
            raise InvalidDimensions(f"dimensions must be >= 0, got {rows}x{cols}")
        cells = tuple(generator(r, c) for r in range(rows) for c in range(cols))
        return DenseMatrix(rows=rows, cols=cols, cells=cells)

    @property
    def shape(self) -> Tuple[int, int]:
        return self.rows, self.cols

    def at(self, row: int, col: int):
        try:
            row, col = operator.index(row), operator.index(col)
        except TypeError as err:
            raise IndexOutOfRange(row, col, self.rows, self.cols) from err
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexOutOfRange(row, col, self.rows, self.cols)
        return self.cells[row * self.cols + col]

    def to_numpy(self) -> np.ndarray:
        return np.array(self.cells, dtype=float).reshape(self.rows, self.cols)
