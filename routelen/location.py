from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@runtime_checkable
class Locatable(Protocol):
    def distance(self, other) -> float:
        ...


@dataclass(frozen=True)
class Location:
    """A point on the plane. Distances are Euclidean, rounded up to a whole number."""
    x: float
    y: float

    def distance(self, other: "Location") -> int:
        return math.ceil(euclidean(self, other))


def euclidean(a: Location, b: Location) -> float:
    return math.hypot(a.x - b.x, a.y - b.y)
