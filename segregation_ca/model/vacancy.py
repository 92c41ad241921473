"""Vacancy list helpers shared by initialization and stepping."""

from typing import List, Protocol

from .actor import Actor
from .grid import Grid
from ..errors import InvariantBrokenError


class RandomSource(Protocol):
    """Anything that draws a uniform integer in [low, high).

    numpy.random.Generator satisfies this protocol.
    """

    def integers(self, low: int, high: int) -> int:
        ...


def create_index_list(length: int) -> List[int]:
    """List where every element equals its own index."""
    return list(range(length))


def populate_with_actor(grid: Grid, actor: Actor, vacancies: List[int],
                        count: int, rng: RandomSource) -> None:
    """
    Place count copies of actor at random vacant indices.

    Each chosen index is removed from vacancies so later calls cannot
    reuse it.
    """
    if count > len(vacancies):
        raise InvariantBrokenError(
            f"Cannot place {count} {actor.name} actors in "
            f"{len(vacancies)} vacant locations")

    for _ in range(count):
        selector = int(rng.integers(0, len(vacancies)))
        grid.set_index(vacancies.pop(selector), actor)
