"""
Connected region extraction.

Regions are maximal 4-connected groups of cells sharing one value. They are
found with a breadth-first flood fill from every unvisited matching cell,
scanning x outer and y inner, so region order and tile order within a
region are deterministic for a given grid.
"""

from collections import deque
from typing import List, Tuple

import numpy as np
import structlog

from .grid import DIRECTIONS, Cell, Coord

logger = structlog.get_logger()

Region = List[Coord]


def get_region_tiles(
    grid: np.ndarray, start_x: int, start_y: int, cell: Cell, visited: np.ndarray
) -> Region:
    """
    Flood fill the region containing (start_x, start_y).

    Args:
        grid: Cave grid
        start_x: Start column
        start_y: Start row
        cell: Value the region is made of
        visited: Boolean buffer shaped like ``grid``; updated in place

    Returns:
        Region tiles in breadth-first discovery order
    """
    width, height = grid.shape
    tiles: Region = []
    queue = deque([Coord(start_x, start_y)])
    visited[start_x, start_y] = True

    while queue:
        tile = queue.popleft()
        tiles.append(tile)

        for dx, dy in DIRECTIONS:
            x = tile.x + dx
            y = tile.y + dy
            if 0 <= x < width and 0 <= y < height and not visited[x, y] and grid[x, y] == cell:
                visited[x, y] = True
                queue.append(Coord(x, y))

    return tiles


def get_regions(grid: np.ndarray, cell: Cell) -> List[Region]:
    """
    Partition every cell holding ``cell`` into 4-connected regions.

    Args:
        grid: Cave grid
        cell: Value to group

    Returns:
        Regions in scan order
    """
    width, height = grid.shape
    visited = np.zeros(grid.shape, dtype=bool)
    regions: List[Region] = []

    for x in range(width):
        for y in range(height):
            if not visited[x, y] and grid[x, y] == cell:
                regions.append(get_region_tiles(grid, x, y, cell, visited))

    return regions


def fill_region(grid: np.ndarray, region: Region, cell: Cell) -> None:
    """Set every tile of a region to ``cell``."""
    for tile in region:
        grid[tile.x, tile.y] = cell


def split_by_size(regions: List[Region], threshold: int) -> Tuple[List[Region], List[Region]]:
    """Split regions into (kept, discarded) by member count against ``threshold``."""
    kept: List[Region] = []
    discarded: List[Region] = []
    for region in regions:
        if len(region) < threshold:
            discarded.append(region)
        else:
            kept.append(region)
    return kept, discarded


def remove_small_wall_regions(grid: np.ndarray, wall_threshold_size: int) -> int:
    """
    Clear blocked specks: every blocked region below the threshold becomes passable.

    Args:
        grid: Cave grid, modified in place
        wall_threshold_size: Minimum blocked region size that survives

    Returns:
        Number of regions removed
    """
    _, discarded = split_by_size(get_regions(grid, Cell.BLOCKED), wall_threshold_size)
    for region in discarded:
        fill_region(grid, region, Cell.PASSABLE)

    logger.debug(
        "Small wall regions removed",
        removed=len(discarded),
        wall_threshold_size=wall_threshold_size,
    )
    return len(discarded)
