#!/usr/bin/env python3
"""
Simple demo script showing cave generation and regeneration.
"""

import numpy as np
from py_cavegen.config import MapConfig
from py_cavegen.core import CaveGenerator, Cell, NoViableRoomsError
from py_cavegen.utils.logging import configure_logging


class WallCountRenderer:
    """Stand-in renderer: reports how many wall cells a mesh would need."""

    def generate(self, grid, scale):
        return {"wall_cells": int(np.sum(grid == Cell.BLOCKED)), "scale": scale}


def main():
    """Demonstrate cave generation."""
    configure_logging()

    print("Py-CaveGen Demo")
    print("=" * 40)

    config = MapConfig(width=80, height=45, seed="demo123", random_fill_percent=47)
    generator = CaveGenerator(config, renderer=WallCountRenderer())

    cave = generator.generate()
    print(f"\nSeed: {cave.seed}")
    print(f"Rooms: {len(cave.rooms)} (main room has {cave.main_room.size} cells)")
    print(f"Passages carved: {len(cave.passages)}")
    print(f"Bordered grid shape: {cave.bordered_grid().shape}")
    print(f"Renderer output: {cave.mesh}")

    # Regenerating with a clock-derived seed gives a new cave every time
    random_config = config.model_copy(update={"use_random_seed": True})
    for attempt in range(3):
        try:
            cave = CaveGenerator(random_config).generate()
        except NoViableRoomsError as e:
            print(f"Attempt {attempt + 1}: {e}")
            continue
        print(f"Attempt {attempt + 1}: seed={cave.seed} rooms={len(cave.rooms)} passages={len(cave.passages)}")


if __name__ == "__main__":
    main()
