"""Model package for Segregation CA simulation."""

from .actor import Actor, State
from .grid import Grid, is_valid_location, read_grid
from .initializer import initialize_world
from .satisfaction import evaluate, evaluate_all
from .vacancy import RandomSource
from .state import SimulationState
from .engine import SimulationEngine, advance_step, relocate_unsatisfied

__all__ = [
    'Actor',
    'State',
    'Grid',
    'is_valid_location',
    'read_grid',
    'initialize_world',
    'evaluate',
    'evaluate_all',
    'RandomSource',
    'SimulationState',
    'SimulationEngine',
    'advance_step',
    'relocate_unsatisfied',
]
