"""Seeded random fill of a fresh cave grid."""

import numpy as np
import structlog

from .alea_prng import AleaPRNG
from .grid import Cell, count_cells, new_grid

logger = structlog.get_logger()


def random_fill(width: int, height: int, fill_percent: int, prng: AleaPRNG) -> np.ndarray:
    """
    Build the initial noise grid.

    Border cells are always blocked. Every interior cell draws one value from
    the PRNG, x outer and y inner, and is blocked when the draw (an integer
    in [0, 100)) falls below ``fill_percent``.

    Args:
        width: Grid width
        height: Grid height
        fill_percent: Blocked probability in percent, 0-100
        prng: Run-owned Alea PRNG

    Returns:
        New grid of shape (width, height)
    """
    grid = new_grid(width, height, Cell.PASSABLE)

    for x in range(width):
        for y in range(height):
            if x == 0 or x == width - 1 or y == 0 or y == height - 1:
                grid[x, y] = Cell.BLOCKED
            elif prng.randint(0, 100) < fill_percent:
                grid[x, y] = Cell.BLOCKED

    logger.debug(
        "Random fill complete",
        width=width,
        height=height,
        fill_percent=fill_percent,
        blocked=count_cells(grid, Cell.BLOCKED),
    )
    return grid
