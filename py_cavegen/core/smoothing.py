"""
Cellular-automaton smoothing.

Each pass is a majority vote over the 8-cell Moore neighbourhood, computed
with a single 2D convolution against a snapshot of the previous pass.
Cells outside the grid count as blocked, which pulls the cave in from the
edges and keeps the outer ring blocked.
"""

import numpy as np
import structlog
from scipy.signal import convolve2d

from .grid import Cell

logger = structlog.get_logger()

# Counts the 8 neighbours, excluding the centre cell
NEIGHBOUR_KERNEL = np.array([[1, 1, 1], [1, 0, 1], [1, 1, 1]], dtype=np.int32)

MAJORITY = 4


def count_blocked_neighbours(grid: np.ndarray) -> np.ndarray:
    """Number of blocked Moore neighbours for every cell, out-of-bounds included."""
    blocked = (grid == Cell.BLOCKED).astype(np.int32)
    return convolve2d(blocked, NEIGHBOUR_KERNEL, mode="same", boundary="fill", fillvalue=1)


def smooth_step(grid: np.ndarray) -> np.ndarray:
    """
    Apply one smoothing pass and return the new grid.

    More than four blocked neighbours blocks the cell, fewer than four opens
    it, exactly four leaves it unchanged.
    """
    counts = count_blocked_neighbours(grid)
    smoothed = grid.copy()
    smoothed[counts > MAJORITY] = Cell.BLOCKED
    smoothed[counts < MAJORITY] = Cell.PASSABLE
    return smoothed


def smooth(grid: np.ndarray, passes: int) -> np.ndarray:
    """
    Run ``passes`` smoothing passes.

    Args:
        grid: Grid to smooth; left untouched
        passes: Number of passes, zero returns an unchanged copy

    Returns:
        Smoothed grid
    """
    if passes < 0:
        raise ValueError(f"passes must be non-negative, got {passes}")

    result = grid.copy()
    for _ in range(passes):
        result = smooth_step(result)

    logger.debug("Smoothing complete", passes=passes)
    return result
