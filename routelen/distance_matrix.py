"""Distance matrix over a list of locatable elements.

A distance matrix holds the distances, taken pairwise, between the elements
of a list. For N elements it is N x N, with zeros on the diagonal. Routes are
sequences of indices into that list and their length is the sum of the
matrix entries along their edges.

    >>> from routelen.location import Location
    >>> dm = DistanceMatrix.from_elements([Location(1, 2), Location(2, 4), Location(3, 2)])
    >>> dm.length([1, 2, 0], Traversal.CYCLIC)
    8
    >>> dm.length([1, 2, 0])
    5
"""
from __future__ import annotations
from typing import Callable, Iterable, Optional, Sequence

import pandas as pd

from .dense_matrix import DenseMatrix
from .edges import Traversal, TraversalLike, edge_reduce
from .errors import InvalidDimensions

DistanceFn = Callable[[object, object], float]


def _locatable_distance(a, b) -> float:
    return a.distance(b)


class DistanceMatrix:
    def __init__(self, matrix: DenseMatrix):
        if matrix.rows != matrix.cols:
            raise InvalidDimensions(f"distance matrix must be square, got {matrix.rows}x{matrix.cols}")
        self.matrix = matrix

    @classmethod
    def from_elements(cls, elements: Iterable, distance: Optional[DistanceFn] = None) -> "DistanceMatrix":
        """Build the N x N matrix of distance(elements[i], elements[j]).

        The diagonal is 0 without calling distance. When distance is None the
        elements' own distance() method is used.
        """
        elements = tuple(elements)
        distance = distance or _locatable_distance
        size = len(elements)

        def producer(i: int, j: int):
            if i == j:
                return 0
            return distance(elements[i], elements[j])

        return cls(DenseMatrix.build(size, size, producer))

    @property
    def size(self) -> int:
        return self.matrix.rows

    def get(self, row: int, col: int):
        return self.matrix.at(row, col)

    def length(self, route: Iterable[int], mode: TraversalLike = Traversal.ACYCLIC):
        """Total distance along route; cyclic mode adds the edge back to the start."""
        at = self.matrix.at
        return edge_reduce(route, 0, lambda i, j, acc: acc + at(i, j), mode)

    def to_frame(self, labels: Optional[Sequence] = None) -> pd.DataFrame:
        labels = list(labels) if labels is not None else list(range(self.size))
        if len(labels) != self.size:
            raise ValueError(f"expected {self.size} labels, got {len(labels)}")
        return pd.DataFrame(self.matrix.to_numpy(), index=labels, columns=labels)

    def __repr__(self):
        return f"DistanceMatrix(size={self.size})"
