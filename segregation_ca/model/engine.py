"""Simulation engine for Segregation CA."""

import numpy as np
from typing import Dict, Optional, TYPE_CHECKING

from .actor import Actor, State, AGENT_TYPES
from .grid import Grid
from .initializer import initialize_world
from .metrics import actor_counts, satisfied_fraction, segregation_index
from .satisfaction import evaluate_all
from .state import SimulationState
from .vacancy import RandomSource, populate_with_actor
from ..errors import ThresholdOutOfRangeError

if TYPE_CHECKING:
    from ..config import SimulationConfig


def check_threshold(threshold: float) -> None:
    if not 0.0 <= threshold <= 1.0:
        raise ThresholdOutOfRangeError(
            f"Threshold must be in [0, 1], got {threshold}")


def relocate_unsatisfied(grid: Grid, threshold: float,
                         rng: RandomSource) -> Dict[Actor, int]:
    """
    Advance the grid by one generation and report who moved.

    1. Evaluate every cell against the pre-step grid (read pass)
    2. Mark unsatisfied and empty cells as vacant
    3. Evacuate unsatisfied actors, counting them per type
    4. Repopulate vacant cells with the evacuated actors at random

    Returns the number of displaced actors per type.
    """
    check_threshold(threshold)

    # Phase 1: all decisions are taken before anything is mutated
    states = evaluate_all(grid, threshold)

    # Phase 2 & 3: collect vacancies and evacuate
    vacancies = []
    displaced = {actor: 0 for actor in AGENT_TYPES}
    for index, state in enumerate(states):
        if state == State.SATISFIED:
            continue
        if state == State.UNSATISFIED:
            displaced[grid.get(*grid.to_position(index))] += 1
            grid.set_index(index, Actor.NONE)
        vacancies.append(index)

    # Phase 4: reintroduce the removed actors in new random positions
    for actor in AGENT_TYPES:
        populate_with_actor(grid, actor, vacancies, displaced[actor], rng)

    return displaced


def advance_step(grid: Grid, threshold: float, rng: RandomSource) -> None:
    """Mutate grid in place by exactly one generation."""
    relocate_unsatisfied(grid, threshold, rng)


class SimulationEngine:
    """
    Owns the world and the random source, and drives it step by step.

    Implements:
    1. World initialization from a configured distribution
    2. Two-phase generation update (evaluate, then relocate)
    3. Read-only grid access for renderers
    4. State snapshot generation
    """

    def __init__(self, config: "SimulationConfig",
                 rng: Optional[RandomSource] = None):
        self.config = config
        self.current_step = 0
        check_threshold(config.threshold)
        self.rng = rng if rng is not None else np.random.default_rng(config.seed)

        self.grid = initialize_world(
            config.grid.side_length,
            config.distribution.as_mapping(),
            self.rng
        )

        # Metrics tracking
        self.last_displaced: Optional[int] = None
        self.total_displaced = 0

    def advance_step(self, threshold: Optional[float] = None) -> None:
        """Advance the owned grid by one generation."""
        self._relocate(threshold)

    def _relocate(self, threshold: Optional[float]) -> int:
        if threshold is None:
            threshold = self.config.threshold
        displaced = relocate_unsatisfied(self.grid, threshold, self.rng)
        moved = sum(displaced.values())
        self.last_displaced = moved
        self.total_displaced += moved
        return moved

    def read_grid(self) -> np.ndarray:
        """Return a read-only copy of the current actor grid."""
        return self.grid.read()

    def step(self) -> SimulationState:
        """Execute one generation and return the resulting snapshot."""
        moved = self._relocate(self.config.threshold)
        self.current_step += 1
        return self._create_state_snapshot(moved)

    def initial_state(self) -> SimulationState:
        """Snapshot of the freshly seeded world (step 0)."""
        return self._create_state_snapshot(0)

    def _create_state_snapshot(self, displaced: int) -> SimulationState:
        """Create snapshot of current simulation state."""
        cells = self.read_grid()
        metrics = dict(actor_counts(cells))
        metrics['displaced'] = displaced
        metrics['satisfied_fraction'] = satisfied_fraction(
            cells, self.config.threshold)
        metrics['segregation_index'] = segregation_index(cells)

        return SimulationState(
            step=self.current_step,
            grid=cells,
            metrics=metrics
        )

    def is_finished(self) -> bool:
        """Check if simulation should terminate."""
        if self.current_step >= self.config.max_steps:
            return True
        return self.config.stop_when_stable and self.last_displaced == 0

    def get_summary(self) -> Dict:
        """Get summary statistics for the simulation."""
        cells = self.read_grid()
        return {
            'total_steps': self.current_step,
            'total_displaced': self.total_displaced,
            'stable': self.last_displaced == 0,
            'satisfied_fraction': satisfied_fraction(cells, self.config.threshold),
            'segregation_index': segregation_index(cells)
        }
