"""Shared fixtures for cave generation tests."""

import numpy as np
import pytest

from py_cavegen.core.grid import Cell


def _grid_from_rows(rows):
    """Build a grid from row strings: '#' blocked, '.' passable; rows[y][x] -> grid[x, y]."""
    height = len(rows)
    width = len(rows[0])
    grid = np.zeros((width, height), dtype=np.uint8)
    for y, row in enumerate(rows):
        assert len(row) == width
        for x, char in enumerate(row):
            grid[x, y] = Cell.BLOCKED if char == "#" else Cell.PASSABLE
    return grid


@pytest.fixture
def make_grid():
    """Factory turning an ASCII diagram into a cave grid."""
    return _grid_from_rows


@pytest.fixture
def two_room_grid(make_grid):
    """A 9-cell room on the left and a 4-cell room on the right."""
    return make_grid([
        "########",
        "#...#..#",
        "#...#..#",
        "#...####",
        "########",
    ])


@pytest.fixture
def chain_grid(make_grid):
    """Three strip rooms; the rightmost one is the largest."""
    row = "#..###..##.......#"
    return make_grid(["#" * len(row), row, row, row, "#" * len(row)])


@pytest.fixture
def split_cluster_grid(make_grid):
    """Two close pairs of rooms separated by a thick wall."""
    row = "#" + ".." + "#" + ".." + "#" * 10 + ".." + "#" + "......." + "#"
    return make_grid(["#" * len(row), row, row, row, "#" * len(row)])
