"""Random seeding of the world with a proportional actor distribution."""

import math
from typing import Dict, Mapping

from .actor import Actor, PLACEMENT_ORDER
from .grid import Grid
from .vacancy import RandomSource, create_index_list, populate_with_actor
from ..errors import InvalidDistributionError, OutOfCapacityError


def actor_counts_for(n_locations: int,
                     distribution: Mapping[Actor, float]) -> Dict[Actor, int]:
    """Floor each fraction of n_locations, in placement order."""
    counts = {}
    for actor in PLACEMENT_ORDER:
        fraction = distribution.get(actor, 0.0)
        if not 0.0 <= fraction <= 1.0:
            raise InvalidDistributionError(
                f"Fraction for {actor.name} must be in [0, 1], got {fraction}")
        counts[actor] = math.floor(n_locations * fraction)
    return counts


def initialize_world(side_length: int,
                     distribution: Mapping[Actor, float],
                     rng: RandomSource) -> Grid:
    """
    Create a side_length x side_length grid seeded with random actors.

    All cells start as NONE, so locations left over after flooring the
    fractions stay empty. Actors are placed BLUE, RED, then NONE, each at
    positions drawn without replacement from the shrinking vacancy list.
    Capacity is checked before any placement.
    """
    grid = Grid(side_length)
    n_locations = grid.n_locations
    counts = actor_counts_for(n_locations, distribution)
    requested = sum(counts.values())
    if requested > n_locations:
        raise OutOfCapacityError(
            f"Distribution requests {requested} actors for "
            f"{n_locations} locations")

    vacancies = create_index_list(n_locations)
    for actor in PLACEMENT_ORDER:
        populate_with_actor(grid, actor, vacancies, counts[actor], rng)
    return grid
