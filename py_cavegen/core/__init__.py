"""
Core cave generation functionality.
"""

from .grid import Cell, Coord, add_border
from .exceptions import CaveGenerationError, NoViableRoomsError, UnreachableRoomError
from .rooms import Room
from .connector import Passage, RoomConnector
from .generator import CaveGenerator, CaveMap, MeshRenderer, generate_cave

__all__ = ['Cell', 'Coord', 'add_border',
           'CaveGenerationError', 'NoViableRoomsError', 'UnreachableRoomError',
           'Room', 'Passage', 'RoomConnector',
           'CaveGenerator', 'CaveMap', 'MeshRenderer', 'generate_cave']
