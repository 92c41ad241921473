"""Grid ownership for Segregation CA simulation."""

import numpy as np
from typing import Dict, Sequence, Tuple

from .actor import Actor
from ..errors import InvalidDimensionError


class Grid:
    """
    Square matrix of Actors, mutated in place by each step.

    Coordinate convention: (x, y) = (row, column), cells[x, y] for array
    indexing, linear index = x * side_length + y.
    """

    def __init__(self, side_length: int):
        check_side_length(side_length)
        self.side_length = side_length

        # Actor codes; every location starts out empty
        self.cells = np.full((side_length, side_length), Actor.NONE,
                             dtype=np.int8)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Actor]]) -> "Grid":
        """Build a grid from a square nested sequence of Actors."""
        grid = cls(len(rows))
        for x, row in enumerate(rows):
            if len(row) != grid.side_length:
                raise InvalidDimensionError("Grid rows must form a square")
            for y, actor in enumerate(row):
                grid.cells[x, y] = actor
        return grid

    @property
    def n_locations(self) -> int:
        return self.side_length * self.side_length

    def get(self, x: int, y: int) -> Actor:
        """Return the Actor at (x, y)."""
        return Actor(int(self.cells[x, y]))

    def set(self, x: int, y: int, actor: Actor) -> None:
        self.cells[x, y] = actor

    def set_index(self, index: int, actor: Actor) -> None:
        """Place actor at a linear (row-major) index."""
        self.cells[index // self.side_length, index % self.side_length] = actor

    def to_position(self, index: int) -> Tuple[int, int]:
        return index // self.side_length, index % self.side_length

    def is_valid_location(self, x: int, y: int) -> bool:
        return is_valid_location(self.side_length, x, y)

    def count(self, actor: Actor) -> int:
        return int(np.count_nonzero(self.cells == int(actor)))

    def counts(self) -> Dict[Actor, int]:
        """Number of cells holding each Actor."""
        return {actor: self.count(actor) for actor in Actor}

    def read(self) -> np.ndarray:
        """Return a read-only copy of the cell array."""
        view = self.cells.copy()
        view.flags.writeable = False
        return view


def is_valid_location(size: int, x: int, y: int) -> bool:
    """Check if (x, y) is inside a size x size world."""
    return 0 <= x < size and 0 <= y < size


def read_grid(grid: Grid) -> np.ndarray:
    """Read-only view of the grid for renderers and exporters."""
    return grid.read()


def check_side_length(side_length: int) -> None:
    """Reject anything but a positive integer side length."""
    if isinstance(side_length, bool) or not isinstance(side_length, (int, np.integer)):
        raise InvalidDimensionError(
            f"Side length must be an integer, got {side_length!r}")
    if side_length <= 0:
        raise InvalidDimensionError(
            f"Side length must be positive, got {side_length}")
