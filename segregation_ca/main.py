#!/usr/bin/env python3
"""
Segregation Cellular Automata Simulation

A Schelling-style model: unsatisfied agents relocate to random vacant
cells until every agent has enough like neighbours.

Usage:
    segregation-ca [--config configs/default.yaml] [options]

Examples:
    segregation-ca
    segregation-ca --config configs/default.yaml --seed 42
    segregation-ca --config configs/intolerant.yaml --gif --out-dir results/
    segregation-ca --threshold 0.3 --steps 50 --no-csv --no-snapshot --quiet
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from .config import SimulationConfig, load_config
from .errors import SegregationError
from .model.engine import SimulationEngine
from .export.csv_writer import CSVWriter
from .export.visualizer import Visualizer
from .export.reporter import Reporter

# Buffer a GIF frame every N steps to reduce memory
GIF_FRAME_INTERVAL = 2
PROGRESS_INTERVAL = 10


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description='Segregation Cellular Automata Simulation',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    segregation-ca --config configs/default.yaml --seed 42
    segregation-ca --config configs/intolerant.yaml --gif --out-dir results/
    segregation-ca --threshold 0.3 --steps 50 --no-csv --no-snapshot --quiet
        """
    )

    parser.add_argument('--config', type=Path, default=None,
                        help='Path to YAML configuration file (default: built-in)')

    # Optional overrides
    parser.add_argument('--steps', type=int, default=None,
                        help='Override max simulation steps')
    parser.add_argument('--threshold', type=float, default=None,
                        help='Override share of like neighbours required')
    parser.add_argument('--out-dir', type=Path, default=Path('./output'),
                        help='Output directory for exports (default: ./output)')

    # Export toggles
    parser.add_argument('--csv', dest='csv', action='store_true', default=None,
                        help='Enable CSV export (default)')
    parser.add_argument('--no-csv', dest='csv', action='store_false',
                        help='Disable CSV export')

    parser.add_argument('--snapshot', dest='snapshot', action='store_true', default=None,
                        help='Enable final snapshot (default)')
    parser.add_argument('--no-snapshot', dest='snapshot', action='store_false',
                        help='Disable final snapshot')

    parser.add_argument('--gif', action='store_true', default=False,
                        help='Enable GIF animation export')

    parser.add_argument('--quiet', action='store_true', default=False,
                        help='Suppress stdout output')

    parser.add_argument('--seed', type=int, default=None,
                        help='Random seed for reproducibility')

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    # Load configuration
    if args.config is None:
        config = SimulationConfig()
    else:
        try:
            config = load_config(args.config)
        except FileNotFoundError:
            print(f"Error: Configuration file not found: {args.config}", file=sys.stderr)
            return 1
        except Exception as e:
            print(f"Error loading config: {e}", file=sys.stderr)
            return 1

    # Apply CLI overrides
    if args.steps is not None:
        config.max_steps = args.steps
    if args.threshold is not None:
        config.threshold = args.threshold
    if args.csv is not None:
        config.csv_enabled = args.csv
    if args.snapshot is not None:
        config.snapshot_enabled = args.snapshot
    if args.gif:
        config.gif_enabled = True
    config.quiet = args.quiet
    if args.seed is not None:
        config.seed = args.seed
    config.out_dir = args.out_dir

    if not config.quiet:
        dist = config.distribution
        print(f"Initializing simulation...")
        print(f"  Grid: {config.grid.side_length}x{config.grid.side_length}")
        print(f"  Distribution: blue={dist.blue}, red={dist.red}, empty={dist.none}")
        print(f"  Threshold: {config.threshold}")
        print(f"  Max steps: {config.max_steps}")

    try:
        engine = SimulationEngine(config)
    except SegregationError as e:
        print(f"Error initializing world: {e}", file=sys.stderr)
        return 1

    # Initialize exporters
    csv_writer = None
    if config.csv_enabled:
        csv_writer = CSVWriter(config.out_dir / 'simulation_log.csv')
        csv_writer.open()

    visualizer = Visualizer(config.grid.side_length)
    reporter = Reporter(str(args.config or '(defaults)'), config.seed, config.threshold)

    initial_state = engine.initial_state()
    reporter.update(initial_state)
    if csv_writer:
        csv_writer.append(initial_state)
    if config.gif_enabled:
        visualizer.buffer_frame(initial_state)

    if not config.quiet:
        print(f"\nRunning simulation...")

    final_state = initial_state
    try:
        while not engine.is_finished():
            state = engine.step()
            final_state = state

            if csv_writer:
                csv_writer.append(state)

            if config.gif_enabled:
                if state.step % GIF_FRAME_INTERVAL == 0 or engine.is_finished():
                    visualizer.buffer_frame(state)

            reporter.update(state)

            if not config.quiet and state.step % PROGRESS_INTERVAL == 0:
                moved = state.metrics.get('displaced', 0)
                satisfied = state.metrics.get('satisfied_fraction', 0)
                print(f"  Step {state.step}: {moved} relocated, {satisfied:.1%} satisfied")

    except KeyboardInterrupt:
        if not config.quiet:
            print("\nSimulation interrupted by user.")
    except SegregationError as e:
        print(f"Error during step {engine.current_step + 1}: {e}", file=sys.stderr)
        return 1
    finally:
        if csv_writer:
            csv_writer.close()

    if csv_writer and not config.quiet:
        print(f"\nCSV saved: {config.out_dir / 'simulation_log.csv'}")

    if config.snapshot_enabled:
        snapshot_path = config.out_dir / 'final_state.png'
        visualizer.save_snapshot(final_state, snapshot_path)
        if not config.quiet:
            print(f"Snapshot saved: {snapshot_path}")

    if config.gif_enabled:
        gif_path = config.out_dir / 'simulation.gif'
        if not config.quiet:
            print(f"Generating GIF ({len(visualizer.frames)} frames)...")
        visualizer.generate_gif(gif_path)
        if not config.quiet:
            print(f"Animation saved: {gif_path}")

    # Print summary report
    if not config.quiet:
        report = reporter.generate_summary(
            final_state,
            config.out_dir,
            config.csv_enabled,
            config.snapshot_enabled,
            config.gif_enabled
        )
        print(report)

    return 0


if __name__ == '__main__':
    sys.exit(main())
