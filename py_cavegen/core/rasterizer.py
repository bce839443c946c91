"""
Line and disc rasterization used to carve passages.
"""

from typing import List

import numpy as np

from .grid import Cell, Coord, in_bounds


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def get_line(start: Coord, end: Coord) -> List[Coord]:
    """
    Trace the grid cells along the segment from ``start`` to ``end``.

    Steps one cell per iteration along the axis with the larger delta and
    accumulates the shorter delta; whenever the accumulator reaches the long
    delta, one compensating step is taken on the short axis. The accumulator
    starts at half the long delta so the staircase is centred on the segment.

    The result holds one cell per long-axis step: ``start`` is included,
    ``end`` is not, and identical endpoints give an empty line.
    """
    x, y = start.x, start.y
    dx = end.x - start.x
    dy = end.y - start.y

    inverted = False
    step = _sign(dx)
    gradient_step = _sign(dy)
    longest = abs(dx)
    shortest = abs(dy)

    if longest < shortest:
        inverted = True
        longest, shortest = shortest, longest
        step, gradient_step = gradient_step, step

    line: List[Coord] = []
    gradient_accumulation = longest // 2
    for _ in range(longest):
        line.append(Coord(x, y))

        if inverted:
            y += step
        else:
            x += step

        gradient_accumulation += shortest
        if gradient_accumulation >= longest:
            if inverted:
                x += gradient_step
            else:
                y += gradient_step
            gradient_accumulation -= longest

    return line


def draw_circle(grid: np.ndarray, centre: Coord, radius: int) -> int:
    """
    Open every cell within ``radius`` of ``centre``, clipped to the grid.

    Returns:
        Number of cells that changed from blocked to passable
    """
    opened = 0
    r_squared = radius * radius
    for x in range(-radius, radius + 1):
        for y in range(-radius, radius + 1):
            if x * x + y * y > r_squared:
                continue
            draw_x = centre.x + x
            draw_y = centre.y + y
            if in_bounds(grid, draw_x, draw_y):
                if grid[draw_x, draw_y] == Cell.BLOCKED:
                    opened += 1
                grid[draw_x, draw_y] = Cell.PASSABLE
    return opened


def carve_line(grid: np.ndarray, start: Coord, end: Coord, radius: int) -> int:
    """Carve a passage of the given radius along the traced line; returns cells opened."""
    return sum(draw_circle(grid, point, radius) for point in get_line(start, end))
