"""State snapshot dataclass for Segregation CA simulation."""

from dataclasses import dataclass
from typing import Dict, Union
import numpy as np


@dataclass
class SimulationState:
    """Complete snapshot of simulation state at a given time step."""
    step: int
    grid: np.ndarray                            # Read-only copy of actor codes
    metrics: Dict[str, Union[int, float]]       # counts, displaced, satisfaction

    def to_csv_row(self) -> Dict[str, Union[int, float]]:
        """Convert to CSV-compatible format."""
        return {
            "step": self.step,
            "blue": self.metrics["blue"],
            "red": self.metrics["red"],
            "empty": self.metrics["empty"],
            "displaced": self.metrics["displaced"],
            "satisfied_fraction": self.metrics["satisfied_fraction"],
            "segregation_index": self.metrics["segregation_index"],
        }
