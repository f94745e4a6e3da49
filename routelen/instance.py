from __future__ import annotations
import random
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from .distance_matrix import DistanceFn, DistanceMatrix
from .edges import Traversal, TraversalLike
from .location import Location


@dataclass
class RouteInstance:
    locations: List[Location]
    name: str = "euclidean"

    @staticmethod
    def from_coords(coords: Iterable[Tuple[float, float]], name: str = "euclidean"):
        return RouteInstance(locations=[Location(x, y) for x, y in coords], name=name)

    @staticmethod
    def random_euclidean(n: int, seed: Optional[int] = None, square_size: float = 100.0, name: str = "random_euclidean"):
        if n < 0:
            raise ValueError(f"n must be >= 0, got {n}")
        rng = random.Random(seed)
        locations = [Location(rng.uniform(0, square_size), rng.uniform(0, square_size)) for _ in range(n)]
        return RouteInstance(locations=locations, name=name)

    def n_locations(self) -> int:
        return len(self.locations)

    @property
    def coords(self) -> List[Tuple[float, float]]:
        return [(loc.x, loc.y) for loc in self.locations]

    def distance_matrix(self, distance: Optional[DistanceFn] = None) -> DistanceMatrix:
        return DistanceMatrix.from_elements(self.locations, distance)

    def route_length(self, route: List[int], mode: TraversalLike = Traversal.CYCLIC):
        """Length of a single route. Builds the full N x N matrix on each call; reuse
        distance_matrix() when evaluating many routes."""
        return self.distance_matrix().length(route, mode)
