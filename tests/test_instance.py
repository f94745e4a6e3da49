"""Tests for locations, instances and route sampling."""
import csv

import pytest

from routelen import (ExperimentConfig, Locatable, Location, RouteInstance, Traversal, best_route,
                      run_size_sweep, sample_route_lengths)


class TestLocation:
    def test_distance_rounds_up(self):
        assert Location(1, 2).distance(Location(2, 4)) == 3
        assert Location(0, 0).distance(Location(3, 4)) == 5

    def test_is_locatable(self):
        assert isinstance(Location(0, 0), Locatable)


class TestRouteInstance:
    def test_from_coords(self):
        inst = RouteInstance.from_coords([(1, 2), (2, 4), (3, 2)], name="tiny")
        assert inst.n_locations() == 3
        assert inst.coords == [(1, 2), (2, 4), (3, 2)]
        assert inst.route_length([1, 2, 0]) == 8
        assert inst.route_length([1, 2, 0], Traversal.ACYCLIC) == 5

    def test_random_is_reproducible(self):
        a = RouteInstance.random_euclidean(10, seed=7)
        b = RouteInstance.random_euclidean(10, seed=7)
        assert a.coords == b.coords
        assert all(0 <= x <= 100 and 0 <= y <= 100 for x, y in a.coords)

    def test_random_rejects_negative(self):
        with pytest.raises(ValueError):
            RouteInstance.random_euclidean(-1)

    def test_distance_matrix_size(self):
        inst = RouteInstance.random_euclidean(6, seed=1)
        assert inst.distance_matrix().size == 6


class TestSampling:
    def test_stats(self):
        inst = RouteInstance.random_euclidean(8, seed=3)
        stats, details = sample_route_lengths(inst, n_routes=5, mode="cyclic", base_seed=1)
        assert stats["n_routes"] == 5
        assert stats["mode"] == "cyclic"
        assert len(details) == 5
        assert stats["min_length"] <= stats["median_length"] <= stats["max_length"]
        D = inst.distance_matrix()
        for length, route in details:
            assert sorted(route) == list(range(8))
            assert length == D.length(route, Traversal.CYCLIC)
        assert details[0][0] == inst.route_length(details[0][1])
        assert best_route(details)[0] == stats["min_length"]

    def test_cyclic_is_never_shorter(self):
        inst = RouteInstance.random_euclidean(8, seed=3)
        open_stats, _ = sample_route_lengths(inst, n_routes=4, mode=Traversal.ACYCLIC, base_seed=9)
        closed_stats, _ = sample_route_lengths(inst, n_routes=4, mode=Traversal.CYCLIC, base_seed=9)
        assert closed_stats["mean_length"] >= open_stats["mean_length"]

    def test_single_route_has_zero_std(self):
        inst = RouteInstance.random_euclidean(4, seed=3)
        stats, _ = sample_route_lengths(inst, n_routes=1)
        assert stats["std_length"] == 0.0

    def test_needs_routes(self):
        with pytest.raises(ValueError):
            sample_route_lengths(RouteInstance.random_euclidean(3, seed=0), n_routes=0)

    def test_size_sweep_writes_csv(self, tmp_path):
        path = tmp_path / "sweep.csv"
        rows = run_size_sweep([3, 5], modes=tuple(Traversal), base_cfg=ExperimentConfig(seed=11), n_routes=2,
                              csv_path=str(path))
        assert len(rows) == 4
        assert [r["n_locations"] for r in rows] == [3, 3, 5, 5]
        with open(path, newline="") as f:
            written = list(csv.DictReader(f))
        assert len(written) == 4
        assert written[0]["mode"] == "acyclic"

    def test_size_sweep_defaults_to_config(self):
        cfg = ExperimentConfig(seed=1, mode=Traversal.ACYCLIC, n_routes=3)
        rows = run_size_sweep([3, 4], base_cfg=cfg)
        assert [r["mode"] for r in rows] == ["acyclic", "acyclic"]
        assert [r["n_routes"] for r in rows] == [3, 3]

    def test_size_sweep_arguments_override_config(self):
        cfg = ExperimentConfig(seed=1, mode=Traversal.ACYCLIC, n_routes=3)
        rows = run_size_sweep([3], modes=["cyclic"], base_cfg=cfg, n_routes=2)
        assert rows[0]["mode"] == "cyclic"
        assert rows[0]["n_routes"] == 2
