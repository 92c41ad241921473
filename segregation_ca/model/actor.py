"""Actor and satisfaction state enumerations."""

from enum import Enum, IntEnum


class Actor(IntEnum):
    """Occupant of a grid cell. NONE marks an empty location."""
    BLUE = 0
    RED = 1
    NONE = 2


class State(Enum):
    """Satisfaction of a cell's occupant."""
    UNSATISFIED = "unsatisfied"
    SATISFIED = "satisfied"
    NA = "na"  # Not applicable, used for NONE cells


# Actors that are relocated each step, in placement order
AGENT_TYPES = (Actor.BLUE, Actor.RED)

# Placement order used when seeding the world
PLACEMENT_ORDER = (Actor.BLUE, Actor.RED, Actor.NONE)
