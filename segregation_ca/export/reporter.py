"""Summary report generation for Segregation CA simulation."""

from typing import List, Dict, Optional, TYPE_CHECKING
from pathlib import Path

if TYPE_CHECKING:
    from ..model.state import SimulationState


class Reporter:
    """Generates summary statistics and formatted text report."""

    def __init__(self, config_path: str, seed: Optional[int], threshold: float):
        self.config_path = config_path
        self.seed = seed
        self.threshold = threshold
        self.step_metrics: List[Dict] = []
        self.initial_segregation: Optional[float] = None
        self.peak_segregation = 0.0
        self.total_displaced = 0
        self.stable_step: Optional[int] = None

    def update(self, state: "SimulationState") -> None:
        """Accumulate metrics per step."""
        self.step_metrics.append(state.metrics.copy())

        current = state.metrics.get('segregation_index', 0.0)
        if self.initial_segregation is None:
            self.initial_segregation = current
        if current > self.peak_segregation:
            self.peak_segregation = current

        displaced = int(state.metrics.get('displaced', 0))
        self.total_displaced += displaced

        # First generation in which nobody moved
        if displaced == 0 and state.step > 0 and self.stable_step is None:
            self.stable_step = state.step

    def generate_summary(self, final_state: "SimulationState",
                         output_dir: Path,
                         csv_enabled: bool,
                         snapshot_enabled: bool,
                         gif_enabled: bool) -> str:
        """Returns formatted text report."""
        metrics = final_state.metrics
        satisfied = metrics.get('satisfied_fraction', 0) * 100
        initial = self.initial_segregation if self.initial_segregation is not None else 0.0
        final = metrics.get('segregation_index', 0)

        lines = [
            "",
            "=" * 80,
            "                    SEGREGATION CA SIMULATION REPORT",
            "=" * 80,
            f"Configuration: {self.config_path}",
            f"Random Seed: {self.seed if self.seed is not None else 'None (random)'}",
            f"Threshold:   {self.threshold:.2f}",
            "",
            "SIMULATION METRICS",
            "-" * 40,
            f"Total Steps:           {final_state.step}",
            f"Population:            {metrics.get('blue', 0)} blue / "
            f"{metrics.get('red', 0)} red / {metrics.get('empty', 0)} empty",
            f"Total Relocations:     {self.total_displaced}",
            f"Satisfied Agents:      {satisfied:.1f}%",
            f"Segregation Index:     {initial:.4f} -> {final:.4f} "
            f"(peak {self.peak_segregation:.4f})",
            "",
            "EMERGENT BEHAVIORS DETECTED",
            "-" * 40,
            f"[{'X' if self.stable_step is not None else ' '}] Stable Configuration: "
            + (f"reached at step {self.stable_step}" if self.stable_step is not None
               else "not reached"),
            "",
            "OUTPUT FILES",
            "-" * 40,
        ]

        # Output file paths
        if csv_enabled:
            lines.append(f"CSV Log:    {output_dir / 'simulation_log.csv'}")
        else:
            lines.append("CSV Log:    (disabled)")

        if snapshot_enabled:
            lines.append(f"Snapshot:   {output_dir / 'final_state.png'}")
        else:
            lines.append("Snapshot:   (disabled)")

        if gif_enabled:
            lines.append(f"Animation:  {output_dir / 'simulation.gif'}")
        else:
            lines.append("Animation:  (disabled)")

        lines.append("=" * 80)

        return "\n".join(lines)
