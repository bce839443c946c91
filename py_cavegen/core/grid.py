"""
Grid primitives shared by every generation phase.

A cave grid is a dense ``numpy`` array of ``uint8`` with shape
``(width, height)``, indexed ``grid[x, y]``. Each cell holds a ``Cell``
value; there are no other tile types.
"""

from enum import IntEnum
from typing import NamedTuple, Tuple

import numpy as np

# 4-connected neighbourhood: up, down, left, right
DIRECTIONS: Tuple[Tuple[int, int], ...] = ((0, 1), (0, -1), (-1, 0), (1, 0))


class Cell(IntEnum):
    """Binary cell classification."""

    PASSABLE = 0
    BLOCKED = 1


class Coord(NamedTuple):
    """Integer grid coordinate."""

    x: int
    y: int

    def sqr_distance(self, other: "Coord") -> int:
        """Squared euclidean distance to another coordinate."""
        dx = self.x - other.x
        dy = self.y - other.y
        return dx * dx + dy * dy


def new_grid(width: int, height: int, fill: Cell = Cell.BLOCKED) -> np.ndarray:
    """Allocate a grid with every cell set to ``fill``."""
    return np.full((width, height), int(fill), dtype=np.uint8)


def in_bounds(grid: np.ndarray, x: int, y: int) -> bool:
    """Check whether (x, y) lies inside the grid."""
    return 0 <= x < grid.shape[0] and 0 <= y < grid.shape[1]


def border_mask(width: int, height: int) -> np.ndarray:
    """Boolean mask selecting the outermost ring of cells."""
    mask = np.zeros((width, height), dtype=bool)
    mask[0, :] = True
    mask[-1, :] = True
    mask[:, 0] = True
    mask[:, -1] = True
    return mask


def count_cells(grid: np.ndarray, cell: Cell) -> int:
    """Number of cells holding the given value."""
    return int(np.count_nonzero(grid == cell))


def add_border(grid: np.ndarray, border_size: int) -> np.ndarray:
    """
    Pad the grid with ``border_size`` blocked cells on every side.

    The frame exists for the renderer only and never feeds back into
    generation, so a new array is always returned.
    """
    if border_size < 0:
        raise ValueError(f"border_size must be non-negative, got {border_size}")
    return np.pad(grid, border_size, mode="constant", constant_values=int(Cell.BLOCKED))
