"""Tests for segregation_ca.export package."""

from __future__ import annotations

import csv
from pathlib import Path

import numpy as np
from PIL import Image

from segregation_ca.export.csv_writer import CSVWriter
from segregation_ca.export.reporter import Reporter
from segregation_ca.export.visualizer import Visualizer
from segregation_ca.model.actor import Actor
from segregation_ca.model.state import SimulationState


def _state(step: int, displaced: int = 0, segregation: float = 0.5,
           side: int = 4) -> SimulationState:
    grid = np.full((side, side), int(Actor.NONE), dtype=np.int8)
    grid[0, 0] = Actor.BLUE
    grid[0, 1] = Actor.RED
    return SimulationState(
        step=step,
        grid=grid,
        metrics={
            "blue": 1,
            "red": 1,
            "empty": side * side - 2,
            "displaced": displaced,
            "satisfied_fraction": 0.75,
            "segregation_index": segregation,
        },
    )


class TestCSVWriter:
    def test_writes_header_and_rows(self, tmp_path: Path) -> None:
        path = tmp_path / "nested" / "log.csv"
        with CSVWriter(path) as writer:
            writer.append(_state(0))
            writer.append(_state(1, displaced=3))

        with open(path, newline="") as f:
            rows = list(csv.DictReader(f))
        assert [r["step"] for r in rows] == ["0", "1"]
        assert rows[1]["displaced"] == "3"
        assert list(rows[0].keys()) == CSVWriter.FIELDNAMES

    def test_append_opens_lazily(self, tmp_path: Path) -> None:
        writer = CSVWriter(tmp_path / "log.csv")
        writer.append(_state(0))
        writer.close()
        assert (tmp_path / "log.csv").read_text().startswith("step,blue,red")

    def test_close_is_idempotent(self, tmp_path: Path) -> None:
        writer = CSVWriter(tmp_path / "log.csv")
        writer.open()
        writer.close()
        writer.close()


class TestVisualizer:
    def test_rgb_mapping(self) -> None:
        image = Visualizer(4).to_rgb_image(_state(0).grid)
        assert image.shape == (4, 4, 3)
        assert image[0, 0].tolist() != image[0, 1].tolist()
        assert image[3, 3].tolist() == [1.0, 1.0, 1.0]

    def test_save_snapshot(self, tmp_path: Path) -> None:
        path = tmp_path / "out" / "final_state.png"
        Visualizer(4).save_snapshot(_state(2), path)
        assert path.exists()

    def test_gif_from_buffered_frames(self, tmp_path: Path) -> None:
        visualizer = Visualizer(4)
        visualizer.buffer_frame(_state(0))
        visualizer.buffer_frame(_state(1))
        path = tmp_path / "simulation.gif"
        visualizer.generate_gif(path)
        with Image.open(path) as gif:
            assert gif.n_frames == 2

    def test_gif_without_frames_writes_nothing(self, tmp_path: Path) -> None:
        path = tmp_path / "simulation.gif"
        Visualizer(4).generate_gif(path)
        assert not path.exists()


class TestReporter:
    def test_tracks_stability_and_peak(self) -> None:
        reporter = Reporter("cfg.yaml", 7, 0.5)
        reporter.update(_state(0, segregation=0.5))
        reporter.update(_state(1, displaced=4, segregation=0.7))
        reporter.update(_state(2, displaced=0, segregation=0.65))
        reporter.update(_state(3, displaced=0, segregation=0.65))
        assert reporter.initial_segregation == 0.5
        assert reporter.peak_segregation == 0.7
        assert reporter.total_displaced == 4
        assert reporter.stable_step == 2

    def test_initial_step_never_counts_as_stable(self) -> None:
        reporter = Reporter("cfg.yaml", None, 0.5)
        reporter.update(_state(0))
        assert reporter.stable_step is None

    def test_summary_text(self, tmp_path: Path) -> None:
        reporter = Reporter("cfg.yaml", None, 0.5)
        reporter.update(_state(0))
        reporter.update(_state(1, displaced=0))
        text = reporter.generate_summary(_state(1), tmp_path, True, False, False)
        assert "SEGREGATION CA SIMULATION REPORT" in text
        assert "None (random)" in text
        assert "reached at step 1" in text
        assert "Snapshot:   (disabled)" in text
        assert str(tmp_path / "simulation_log.csv") in text
