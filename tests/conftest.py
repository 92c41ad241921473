"""Shared fixtures for Segregation CA tests."""

from __future__ import annotations

import pytest

from segregation_ca.model.actor import Actor
from segregation_ca.model.grid import Grid

B = Actor.BLUE
R = Actor.RED
N = Actor.NONE


@pytest.fixture
def scenario_grid() -> Grid:
    return Grid.from_rows([
        [R, R, N],
        [N, B, N],
        [R, N, B],
    ])
