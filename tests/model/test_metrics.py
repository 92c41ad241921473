"""Tests for segregation_ca.model.metrics module."""

from __future__ import annotations

import numpy as np
import pytest

from segregation_ca.model.actor import Actor
from segregation_ca.model.grid import Grid
from segregation_ca.model.metrics import (
    actor_counts,
    neighbor_counts,
    satisfied_fraction,
    segregation_index,
)

B = Actor.BLUE
R = Actor.RED
N = Actor.NONE


class TestNeighborCounts:
    def test_scenario_centre(self, scenario_grid: Grid) -> None:
        n_neighbors, n_alike = neighbor_counts(scenario_grid.cells)
        assert n_neighbors[1, 1] == 4
        assert n_alike[1, 1] == 1

    def test_edges_do_not_wrap(self) -> None:
        grid = Grid.from_rows([[R, N, B], [N, N, N], [B, N, B]])
        n_neighbors, _ = neighbor_counts(grid.cells)
        assert n_neighbors[0, 0] == 0

    def test_empty_cells_have_no_alike(self, scenario_grid: Grid) -> None:
        _, n_alike = neighbor_counts(scenario_grid.cells)
        assert n_alike[2, 1] == 0


class TestSatisfiedFraction:
    def test_scenario(self, scenario_grid: Grid) -> None:
        # 5 occupied cells, (1,1) and (2,0) unsatisfied
        assert satisfied_fraction(scenario_grid.cells, 0.5) == pytest.approx(3 / 5)

    def test_empty_world_counts_as_satisfied(self) -> None:
        assert satisfied_fraction(Grid(3).cells, 0.5) == 1.0


class TestSegregationIndex:
    def test_uniform_world(self) -> None:
        assert segregation_index(Grid.from_rows([[B, B], [B, B]]).cells) == 1.0

    def test_checkerboard(self) -> None:
        cells = Grid.from_rows([[B, R], [R, B]]).cells
        # Each cell: 1 alike out of 3 neighbours
        assert segregation_index(cells) == pytest.approx(1 / 3)

    def test_isolated_agents_are_ignored(self) -> None:
        assert segregation_index(Grid.from_rows([[B, N], [N, N]]).cells) == 0.0


class TestActorCounts:
    def test_labels(self, scenario_grid: Grid) -> None:
        assert actor_counts(scenario_grid.cells) == {"blue": 2, "red": 3, "empty": 4}

    def test_values_are_plain_ints(self) -> None:
        counts = actor_counts(np.full((2, 2), int(N), dtype=np.int8))
        assert all(type(v) is int for v in counts.values())
