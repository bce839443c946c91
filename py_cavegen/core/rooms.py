"""
Room model.

A room is a passable region that survived size filtering. Rooms live in a
plain list owned by one generation run and refer to each other by index, so
``connected_rooms`` is a set of list indices rather than object references.
"""

from dataclasses import dataclass, field
from typing import List, Set, Tuple

import numpy as np
import structlog

from .exceptions import NoViableRoomsError
from .grid import DIRECTIONS, Cell, Coord
from .regions import Region, fill_region, get_regions, split_by_size

logger = structlog.get_logger()


@dataclass
class Room:
    """A navigable cave room."""

    index: int
    tiles: List[Coord]
    edge_tiles: List[Coord]
    is_main_room: bool = False
    is_accessible_from_main_room: bool = False
    connected_rooms: Set[int] = field(default_factory=set)

    @property
    def size(self) -> int:
        return len(self.tiles)

    def is_connected(self, other: int) -> bool:
        return other in self.connected_rooms


def find_edge_tiles(grid: np.ndarray, tiles: Region) -> List[Coord]:
    """
    Room tiles with at least one blocked 4-neighbour.

    Cells beyond the grid edge count as blocked, the same convention the
    smoothing pass uses.
    """
    width, height = grid.shape
    edge_tiles: List[Coord] = []
    for tile in tiles:
        for dx, dy in DIRECTIONS:
            x = tile.x + dx
            y = tile.y + dy
            if not (0 <= x < width and 0 <= y < height) or grid[x, y] == Cell.BLOCKED:
                edge_tiles.append(tile)
                break
    return edge_tiles


def set_accessible_from_main_room(rooms: List[Room], index: int) -> None:
    """Mark a room, and every room reachable from it, as accessible."""
    stack = [index]
    while stack:
        room = rooms[stack.pop()]
        if room.is_accessible_from_main_room:
            continue
        room.is_accessible_from_main_room = True
        stack.extend(i for i in sorted(room.connected_rooms) if not rooms[i].is_accessible_from_main_room)


def connect_rooms(rooms: List[Room], a: int, b: int) -> None:
    """Record a symmetric connection and spread main-room accessibility across it."""
    if rooms[a].is_accessible_from_main_room:
        set_accessible_from_main_room(rooms, b)
    elif rooms[b].is_accessible_from_main_room:
        set_accessible_from_main_room(rooms, a)
    rooms[a].connected_rooms.add(b)
    rooms[b].connected_rooms.add(a)


def extract_rooms(grid: np.ndarray, room_threshold_size: int) -> List[Room]:
    """
    Fill small passable regions and promote the rest to rooms.

    The largest room (the first one found on a tie) becomes the main room and
    is accessible from itself.

    Args:
        grid: Cave grid, modified in place
        room_threshold_size: Minimum passable region size that becomes a room

    Returns:
        Surviving rooms in scan order

    Raises:
        NoViableRoomsError: No passable region reached the threshold
    """
    regions = get_regions(grid, Cell.PASSABLE)
    kept, discarded = split_by_size(regions, room_threshold_size)
    for region in discarded:
        fill_region(grid, region, Cell.BLOCKED)

    if not kept:
        logger.error(
            "No surviving rooms",
            regions=len(regions),
            room_threshold_size=room_threshold_size,
        )
        raise NoViableRoomsError(room_threshold_size, len(discarded))

    rooms = [
        Room(index=i, tiles=region, edge_tiles=find_edge_tiles(grid, region))
        for i, region in enumerate(kept)
    ]

    main_index = 0
    for room in rooms:
        if room.size > rooms[main_index].size:
            main_index = room.index
    rooms[main_index].is_main_room = True
    rooms[main_index].is_accessible_from_main_room = True

    logger.info(
        "Rooms extracted",
        rooms=len(rooms),
        regions_filled=len(discarded),
        main_room=main_index,
        main_room_size=rooms[main_index].size,
    )
    return rooms


def room_graph(rooms: List[Room]) -> List[Tuple[int, ...]]:
    """Adjacency of the room connection graph, sorted per room."""
    return [tuple(sorted(room.connected_rooms)) for room in rooms]
