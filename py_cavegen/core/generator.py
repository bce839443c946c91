"""
Cave map generation pipeline.

Runs the full sequence for one map:

    random fill -> smoothing -> wall cleanup -> room extraction -> connection

and hands the bordered result to an optional renderer. Each call to
``CaveGenerator.generate`` owns a fresh grid, room list and PRNG, so the
generator can be invoked again at any time to regenerate.
"""

import time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Protocol, Tuple

import numpy as np
import structlog

from ..config.config import Settings, settings as default_settings
from ..config.map_config import MapConfig
from ..utils.random import create_prng, resolve_seed
from .connector import Passage, RoomConnector
from .grid import Cell, add_border, count_cells
from .noise_fill import random_fill
from .regions import remove_small_wall_regions
from .rooms import Room, extract_rooms, room_graph
from .smoothing import smooth

logger = structlog.get_logger()


class MeshRenderer(Protocol):
    """Anything that turns a finished grid into a renderable artifact."""

    def generate(self, grid: np.ndarray, scale: float) -> Any:
        ...


@dataclass
class CaveMap:
    """Result of one generation run."""

    config: MapConfig
    seed: str
    grid: np.ndarray
    rooms: List[Room]
    passages: List[Passage] = field(default_factory=list)
    walls_removed: int = 0
    mesh: Any = None

    @property
    def width(self) -> int:
        return self.grid.shape[0]

    @property
    def height(self) -> int:
        return self.grid.shape[1]

    @property
    def main_room(self) -> Room:
        return next(room for room in self.rooms if room.is_main_room)

    def bordered_grid(self) -> np.ndarray:
        """Grid padded with the configured blocked frame, ready for rendering."""
        return add_border(self.grid, self.config.border_size)

    def room_graph(self) -> List[Tuple[int, ...]]:
        return room_graph(self.rooms)

    def to_dict(self) -> Dict[str, Any]:
        """Summary suitable for logging or JSON export."""
        return {
            "seed": self.seed,
            "width": self.width,
            "height": self.height,
            "passable_cells": count_cells(self.grid, Cell.PASSABLE),
            "walls_removed": self.walls_removed,
            "rooms": [
                {
                    "index": room.index,
                    "size": room.size,
                    "edge_tiles": len(room.edge_tiles),
                    "is_main_room": room.is_main_room,
                    "connected_rooms": sorted(room.connected_rooms),
                }
                for room in self.rooms
            ],
            "passages": [
                {
                    "room_a": p.room_a,
                    "room_b": p.room_b,
                    "tile_a": list(p.tile_a),
                    "tile_b": list(p.tile_b),
                    "phase": p.phase,
                }
                for p in self.passages
            ],
        }


class CaveGenerator:
    """
    Generates connected cave maps from a ``MapConfig``.

    Example:
        >>> generator = CaveGenerator(MapConfig(width=64, height=36, seed="cave"))
        >>> cave = generator.generate()
        >>> cave.main_room.is_accessible_from_main_room
        True
    """

    def __init__(
        self,
        config: Optional[MapConfig] = None,
        settings: Optional[Settings] = None,
        renderer: Optional[MeshRenderer] = None,
    ):
        """
        Initialize the generator.

        Args:
            config: Generation options, defaults to ``MapConfig()``
            settings: Process settings providing size limits
            renderer: Optional renderer receiving the bordered grid

        Raises:
            ValueError: The configured grid exceeds the size limits
        """
        self.config = config or MapConfig()
        self.settings = settings or default_settings
        self.renderer = renderer

        if self.config.width > self.settings.max_map_width:
            raise ValueError(
                f"width {self.config.width} exceeds max_map_width {self.settings.max_map_width}"
            )
        if self.config.height > self.settings.max_map_height:
            raise ValueError(
                f"height {self.config.height} exceeds max_map_height {self.settings.max_map_height}"
            )

    def generate(self) -> CaveMap:
        """
        Run the full pipeline and return a new cave map.

        Raises:
            NoViableRoomsError: Every passable region fell below the room threshold
            UnreachableRoomError: A room could not be connected to the main room
        """
        config = self.config
        start = time.perf_counter()
        seed = resolve_seed(config.seed, config.use_random_seed)
        log = logger.bind(seed=seed, width=config.width, height=config.height)
        log.info("Starting cave generation")

        prng = create_prng(seed)
        grid = random_fill(config.width, config.height, config.random_fill_percent, prng)
        grid = smooth(grid, config.smooth_level)

        walls_removed = remove_small_wall_regions(grid, config.wall_threshold_size)
        rooms = extract_rooms(grid, config.room_threshold_size)
        passages = RoomConnector(grid, rooms, config.passage_width).connect()

        cave = CaveMap(
            config=config,
            seed=seed,
            grid=grid,
            rooms=rooms,
            passages=passages,
            walls_removed=walls_removed,
        )

        if self.renderer is not None:
            cave.mesh = self.renderer.generate(cave.bordered_grid(), 1)

        log.info(
            "Cave generation complete",
            rooms=len(rooms),
            passages=len(passages),
            walls_removed=walls_removed,
            runtime_ms=int((time.perf_counter() - start) * 1000),
        )
        return cave


def generate_cave(config: Optional[MapConfig] = None, **overrides: Any) -> CaveMap:
    """
    Convenience wrapper: build a config from keyword overrides and generate once.

    Example:
        >>> cave = generate_cave(width=40, height=30, seed="demo")
    """
    if overrides:
        base = (config or MapConfig()).model_dump()
        base.update(overrides)
        config = MapConfig(**base)
    return CaveGenerator(config).generate()
