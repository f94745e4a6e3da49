"""Edge walks over ordered sequences.

An edge is a pair of consecutive elements (pred, succ). In cyclic mode the
successor of the last element is the first one, so the walk ends with the
edge (last, first); a single element is its own successor.
"""
from __future__ import annotations
from enum import Enum
from typing import Callable, Iterable, Iterator, List, Tuple, TypeVar, Union

E = TypeVar("E")
R = TypeVar("R")
A = TypeVar("A")


class Traversal(str, Enum):
    ACYCLIC = "acyclic"
    CYCLIC = "cyclic"


TraversalLike = Union[Traversal, str]


def _edge_count(n: int, mode: TraversalLike) -> int:
    mode = Traversal(mode)
    if mode is Traversal.ACYCLIC:
        return max(n - 1, 0)
    if mode is Traversal.CYCLIC:
        return n
    raise ValueError(f"Unknown traversal {mode!r}")


def iter_edges(sequence: Iterable[E], mode: TraversalLike = Traversal.ACYCLIC) -> Iterator[Tuple[E, E]]:
    """Yield (pred, succ) for every edge of sequence, in traversal order."""
    seq = tuple(sequence)
    n = len(seq)
    count = _edge_count(n, mode)
    return ((seq[k], seq[(k + 1) % n]) for k in range(count))


def edge_map(sequence: Iterable[E], fn: Callable[[E, E], R],
             mode: TraversalLike = Traversal.ACYCLIC) -> List[R]:
    """Return [fn(pred, succ) for each edge].

    >>> edge_map([1, 2, 3], lambda a, b: a + b)
    [3, 5]
    >>> edge_map([1, 2, 3], lambda a, b: a + b, Traversal.CYCLIC)
    [3, 5, 4]
    """
    return [fn(pred, succ) for pred, succ in iter_edges(sequence, mode)]


def edge_reduce(sequence: Iterable[E], initial: A, fn: Callable[[E, E, A], A],
                mode: TraversalLike = Traversal.ACYCLIC) -> A:
    """Left fold of fn(pred, succ, acc) over every edge, starting from initial.

    >>> edge_reduce([1, 2, 3], 0, lambda a, b, acc: a + b + acc)
    8
    >>> edge_reduce([1, 2, 3], 0, lambda a, b, acc: a + b + acc, "cyclic")
    12
    """
    acc = initial
    for pred, succ in iter_edges(sequence, mode):
        acc = fn(pred, succ, acc)
    return acc
