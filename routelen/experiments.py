from __future__ import annotations
import csv
import os
import random
import statistics
from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Optional, Sequence, Tuple

from .edges import Traversal, TraversalLike
from .instance import RouteInstance


@dataclass
class ExperimentConfig:
    n_locations: int = 20
    square_size: float = 100.0
    n_routes: int = 10
    mode: Traversal = Traversal.CYCLIC
    seed: Optional[int] = None


def random_route(n: int, rng: random.Random) -> List[int]:
    route = list(range(n))
    rng.shuffle(route)
    return route


def sample_route_lengths(instance: RouteInstance, n_routes: int = 10, mode: TraversalLike = Traversal.CYCLIC,
                         base_seed: int = 42):
    """Length statistics of n_routes random permutations of the instance."""
    if n_routes < 1:
        raise ValueError(f"n_routes must be >= 1, got {n_routes}")
    mode = Traversal(mode)
    D = instance.distance_matrix()
    lengths = []
    routes = []
    for r in range(n_routes):
        route = random_route(instance.n_locations(), random.Random(base_seed + r))
        lengths.append(D.length(route, mode))
        routes.append(route)
    stats = {
        "mean_length": statistics.mean(lengths),
        "std_length": statistics.stdev(lengths) if len(lengths) > 1 else 0.0,
        "min_length": min(lengths),
        "max_length": max(lengths),
        "median_length": statistics.median(lengths),
        "mode": mode.value,
        "n_routes": n_routes,
    }
    return stats, list(zip(lengths, routes))


def _append_row(csv_path: str, row: Dict[str, Any]):
    write_header = not os.path.exists(csv_path)
    with open(csv_path, "a", newline="") as f:
        w = csv.DictWriter(f, fieldnames=row.keys())
        if write_header:
            w.writeheader()
        w.writerow(row)


def run_size_sweep(sizes: Sequence[int], modes: Optional[Sequence[TraversalLike]] = None,
                   base_cfg: Optional[ExperimentConfig] = None, n_routes: Optional[int] = None, base_seed: int = 100,
                   csv_path: Optional[str] = None) -> List[Dict[str, Any]]:
    """Route length stats per (size, mode). modes and n_routes default to base_cfg.mode and base_cfg.n_routes."""
    base_cfg = base_cfg or ExperimentConfig()
    modes = modes if modes is not None else (base_cfg.mode,)
    n_routes = n_routes if n_routes is not None else base_cfg.n_routes
    rows = []
    for n in sizes:
        cfg = ExperimentConfig(**{**asdict(base_cfg), "n_locations": n})
        instance = RouteInstance.random_euclidean(cfg.n_locations, seed=cfg.seed, square_size=cfg.square_size,
                                                  name=f"sweep{n}")
        for mode in modes:
            stats, _ = sample_route_lengths(instance, n_routes=n_routes, mode=mode, base_seed=base_seed)
            row = {"n_locations": n, **stats}
            rows.append(row)
            if csv_path is not None:
                _append_row(csv_path, row)
    return rows


def best_route(details: List[Tuple[float, List[int]]]) -> Tuple[float, List[int]]:
    """Shortest (length, route) pair of a sample."""
    return min(details, key=lambda d: d[0])
