"""Tests for segregation_ca.model.vacancy module."""

from __future__ import annotations

import numpy as np
import pytest

from segregation_ca.errors import InvariantBrokenError
from segregation_ca.model.actor import Actor
from segregation_ca.model.grid import Grid
from segregation_ca.model.vacancy import create_index_list, populate_with_actor
from tests.helpers import FirstVacancy, LastVacancy


class TestCreateIndexList:
    def test_every_element_is_its_index(self) -> None:
        assert create_index_list(5) == [0, 1, 2, 3, 4]

    def test_empty(self) -> None:
        assert create_index_list(0) == []


class TestPopulateWithActor:
    def test_consumes_chosen_positions(self) -> None:
        grid = Grid(3)
        vacancies = [1, 4, 7]
        populate_with_actor(grid, Actor.RED, vacancies, 2, FirstVacancy())
        assert vacancies == [7]
        assert grid.get(0, 1) == Actor.RED
        assert grid.get(1, 1) == Actor.RED
        assert grid.get(2, 1) == Actor.NONE

    def test_last_vacancy_source(self) -> None:
        grid = Grid(3)
        vacancies = [1, 4, 7]
        populate_with_actor(grid, Actor.BLUE, vacancies, 1, LastVacancy())
        assert vacancies == [1, 4]
        assert grid.get(2, 1) == Actor.BLUE

    def test_positions_are_distinct(self) -> None:
        grid = Grid(10)
        vacancies = create_index_list(100)
        populate_with_actor(grid, Actor.BLUE, vacancies, 60, np.random.default_rng(0))
        assert grid.count(Actor.BLUE) == 60
        assert len(vacancies) == 40
        flat = grid.cells.ravel()
        assert all(flat[i] == Actor.NONE for i in vacancies)

    def test_zero_count_is_noop(self) -> None:
        grid = Grid(2)
        vacancies = [0, 1]
        populate_with_actor(grid, Actor.RED, vacancies, 0, FirstVacancy())
        assert vacancies == [0, 1]
        assert grid.count(Actor.RED) == 0

    def test_underflow_is_invariant_broken(self) -> None:
        grid = Grid(2)
        vacancies = [0]
        with pytest.raises(InvariantBrokenError):
            populate_with_actor(grid, Actor.RED, vacancies, 2, FirstVacancy())
        assert vacancies == [0]
        assert grid.count(Actor.RED) == 0
