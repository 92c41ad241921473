"""Moore-neighbourhood satisfaction evaluation."""

from typing import List

from .actor import Actor, State
from .grid import Grid, is_valid_location

# Moore neighbourhood (8-connected)
MOORE_OFFSETS = [
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1)
]


def evaluate(grid: Grid, x: int, y: int, threshold: float) -> State:
    """
    Decide whether the occupant of (x, y) is satisfied.

    The occupant is satisfied when it has no occupied neighbours, or when
    the alike share of its occupied neighbours reaches the threshold:
    n_alike >= threshold * n_neighbors. Empty cells are NA.
    """
    current = grid.cells[x, y]
    if current == Actor.NONE:
        return State.NA

    size = grid.side_length
    n_neighbors = 0
    n_alike = 0
    for dx, dy in MOORE_OFFSETS:
        nx, ny = x + dx, y + dy
        if not is_valid_location(size, nx, ny):
            continue
        neighbor = grid.cells[nx, ny]
        if neighbor != Actor.NONE:
            n_neighbors += 1
            if neighbor == current:
                n_alike += 1

    if n_neighbors == 0 or n_alike >= threshold * float(n_neighbors):
        return State.SATISFIED
    return State.UNSATISFIED


def evaluate_all(grid: Grid, threshold: float) -> List[State]:
    """Evaluate every cell in row-major order, indexed by linear index."""
    size = grid.side_length
    return [evaluate(grid, x, y, threshold)
            for x in range(size)
            for y in range(size)]
