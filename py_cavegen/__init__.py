"""
py_cavegen - seeded cellular-automaton cave map generator.
"""

from .config import MapConfig, Settings
from .core import (
    CaveGenerationError,
    CaveGenerator,
    CaveMap,
    Cell,
    Coord,
    NoViableRoomsError,
    UnreachableRoomError,
    generate_cave,
)

__version__ = "0.1.0"

__all__ = [
    "MapConfig",
    "Settings",
    "CaveGenerator",
    "CaveMap",
    "Cell",
    "Coord",
    "CaveGenerationError",
    "NoViableRoomsError",
    "UnreachableRoomError",
    "generate_cave",
]
