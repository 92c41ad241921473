"""Vectorised neighbourhood metrics over the whole grid."""

import numpy as np
from typing import Dict, Tuple
from scipy.ndimage import convolve

from .actor import Actor

# 3x3 Moore kernel, centre excluded
MOORE_KERNEL = np.array([
    [1, 1, 1],
    [1, 0, 1],
    [1, 1, 1]
], dtype=np.float64)

ACTOR_LABELS = {Actor.BLUE: "blue", Actor.RED: "red", Actor.NONE: "empty"}


def _count_around(mask: np.ndarray) -> np.ndarray:
    """Number of True cells among each location's in-bounds neighbours."""
    return convolve(mask.astype(np.float64), MOORE_KERNEL,
                    mode='constant', cval=0.0)


def neighbor_counts(cells: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """
    Return (n_neighbors, n_alike) arrays for every location.

    n_neighbors counts occupied neighbours; n_alike counts neighbours
    holding the same actor as the location itself (0 for empty cells).
    """
    blue = cells == int(Actor.BLUE)
    red = cells == int(Actor.RED)

    blue_around = _count_around(blue)
    red_around = _count_around(red)

    n_neighbors = blue_around + red_around
    n_alike = np.where(blue, blue_around, np.where(red, red_around, 0.0))
    return n_neighbors, n_alike


def satisfied_mask(cells: np.ndarray, threshold: float) -> np.ndarray:
    """Boolean mask of occupied locations whose occupant is satisfied."""
    occupied = cells != int(Actor.NONE)
    n_neighbors, n_alike = neighbor_counts(cells)
    satisfied = (n_neighbors == 0) | (n_alike >= threshold * n_neighbors)
    return occupied & satisfied


def satisfied_fraction(cells: np.ndarray, threshold: float) -> float:
    """Share of occupied locations whose occupant is satisfied."""
    occupied = np.count_nonzero(cells != int(Actor.NONE))
    if occupied == 0:
        return 1.0
    return float(np.count_nonzero(satisfied_mask(cells, threshold)) / occupied)


def segregation_index(cells: np.ndarray) -> float:
    """
    Mean share of alike neighbours over occupied locations that have at
    least one occupied neighbour. 0.0 when no such location exists.
    """
    occupied = cells != int(Actor.NONE)
    n_neighbors, n_alike = neighbor_counts(cells)
    mask = occupied & (n_neighbors > 0)
    if not np.any(mask):
        return 0.0
    return float(np.mean(n_alike[mask] / n_neighbors[mask]))


def actor_counts(cells: np.ndarray) -> Dict[str, int]:
    """Number of cells per actor, keyed by metric label."""
    return {
        ACTOR_LABELS[actor]: int(np.count_nonzero(cells == int(actor)))
        for actor in Actor
    }
