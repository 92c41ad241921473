"""Configuration dataclasses and YAML loader for Segregation CA simulation."""

from dataclasses import dataclass, field
from typing import Dict, Any, Optional
from pathlib import Path
import yaml

from .model.actor import Actor


@dataclass
class GridConfig:
    side_length: int = 30


@dataclass
class DistributionConfig:
    blue: float = 0.25   # share of BLUE actors
    red: float = 0.25    # share of RED actors
    none: float = 0.5    # share of empty locations

    def as_mapping(self) -> Dict[Actor, float]:
        return {Actor.BLUE: self.blue, Actor.RED: self.red, Actor.NONE: self.none}


@dataclass
class SimulationConfig:
    grid: GridConfig = field(default_factory=GridConfig)
    distribution: DistributionConfig = field(default_factory=DistributionConfig)
    threshold: float = 0.5   # share of surrounding neighbours that are alike
    max_steps: int = 200
    stop_when_stable: bool = True

    # Export flags (can be overridden by CLI)
    csv_enabled: bool = True
    snapshot_enabled: bool = True
    gif_enabled: bool = False
    quiet: bool = False
    seed: Optional[int] = None
    out_dir: Path = field(default_factory=lambda: Path("./output"))


_DISTRIBUTION_KEYS = ('blue', 'red', 'none')


def _parse_distribution(dist_raw: Dict[str, Any]) -> DistributionConfig:
    """Parse actor distribution from raw YAML data."""
    for key in dist_raw:
        if key not in _DISTRIBUTION_KEYS:
            raise ValueError(f"Unknown distribution key: {key}")
    defaults = DistributionConfig()
    return DistributionConfig(
        blue=float(dist_raw.get('blue', defaults.blue)),
        red=float(dist_raw.get('red', defaults.red)),
        none=float(dist_raw.get('none', defaults.none))
    )


def load_config(config_path: Path) -> SimulationConfig:
    """Load YAML configuration file; missing sections fall back to defaults."""
    with open(config_path) as f:
        raw = yaml.safe_load(f) or {}

    defaults = SimulationConfig()

    # Parse grid config
    grid_raw = raw.get('grid') or {}
    grid = GridConfig(
        side_length=int(grid_raw.get('side_length', defaults.grid.side_length))
    )

    distribution = _parse_distribution(raw.get('distribution') or {})

    # Parse simulation config
    sim_raw = raw.get('simulation') or {}

    # Parse export config (optional)
    export_raw = raw.get('export') or {}

    return SimulationConfig(
        grid=grid,
        distribution=distribution,
        threshold=float(sim_raw.get('threshold', defaults.threshold)),
        max_steps=int(sim_raw.get('max_steps', defaults.max_steps)),
        stop_when_stable=sim_raw.get('stop_when_stable', defaults.stop_when_stable),
        csv_enabled=export_raw.get('csv', True),
        snapshot_enabled=export_raw.get('snapshot', True),
        gif_enabled=export_raw.get('gif', False),
        seed=raw.get('seed', sim_raw.get('seed'))
    )
