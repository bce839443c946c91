"""
Room connection.

Connects every room to the main room in two phases:

1. Every room without any connection is joined to its nearest room. This
   gives each room at least one neighbour but can leave clusters that do not
   reach the main room.
2. While any room is still inaccessible, the single closest pair between an
   inaccessible and an accessible room is carved, and accessibility spreads
   through the newly joined cluster.

Distances are squared euclidean distances between edge tiles. Ties keep the
first pair found, scanning the edge tiles of the first room in the outer loop
and those of the second room in the inner loop.
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional

import numpy as np
import structlog

from .exceptions import UnreachableRoomError
from .grid import Coord
from .rasterizer import carve_line
from .rooms import Room, connect_rooms

logger = structlog.get_logger()


@dataclass
class Passage:
    """A carved connection between two rooms."""

    room_a: int
    room_b: int
    tile_a: Coord
    tile_b: Coord
    radius: int
    phase: int
    cells_opened: int = 0


@dataclass
class _Candidate:
    distance: int
    room_a: int
    room_b: int
    tile_a: Coord
    tile_b: Coord


def _closest_tiles(
    room_a: Room, room_b: Room, best: Optional[_Candidate]
) -> Optional[_Candidate]:
    """Improve ``best`` with the closest edge-tile pair between two rooms."""
    for tile_a in room_a.edge_tiles:
        for tile_b in room_b.edge_tiles:
            distance = tile_a.sqr_distance(tile_b)
            if best is None or distance < best.distance:
                best = _Candidate(distance, room_a.index, room_b.index, tile_a, tile_b)
    return best


class RoomConnector:
    """Carves passages until every room is reachable from the main room."""

    def __init__(self, grid: np.ndarray, rooms: List[Room], passage_width: int):
        """
        Args:
            grid: Cave grid, modified in place
            rooms: Rooms of the current run, indexed by ``Room.index``
            passage_width: Carving radius of every passage
        """
        self.grid = grid
        self.rooms = rooms
        self.passage_width = passage_width
        self.passages: List[Passage] = []

    def connect(self) -> List[Passage]:
        """
        Run both connection phases.

        Returns:
            Passages carved, in carving order

        Raises:
            UnreachableRoomError: A room could not be linked to the main room
        """
        self.connect_nearest_rooms()
        self.force_main_room_accessibility()

        logger.info(
            "Rooms connected",
            rooms=len(self.rooms),
            passages=len(self.passages),
        )
        return self.passages

    def connect_nearest_rooms(self) -> None:
        """Phase 1: join every unconnected room to its nearest other room."""
        for room_a in self.rooms:
            if room_a.connected_rooms:
                continue

            best = None
            for room_b in self.rooms:
                if room_b.index == room_a.index or room_a.is_connected(room_b.index):
                    continue
                best = _closest_tiles(room_a, room_b, best)

            if best is not None:
                self._create_passage(best, phase=1)

        logger.debug("Nearest room pass complete", passages=len(self.passages))

    def force_main_room_accessibility(self) -> None:
        """Phase 2: link inaccessible rooms to the accessible set until none remain."""
        while True:
            inaccessible = [room for room in self.rooms if not room.is_accessible_from_main_room]
            if not inaccessible:
                return
            accessible = [room for room in self.rooms if room.is_accessible_from_main_room]

            best = self._closest_between(inaccessible, accessible)
            if best is None:
                indices = [room.index for room in inaccessible]
                logger.error("No passage candidate for inaccessible rooms", rooms=indices)
                raise UnreachableRoomError(indices)

            self._create_passage(best, phase=2)

    def _closest_between(
        self, rooms_a: Iterable[Room], rooms_b: List[Room]
    ) -> Optional[_Candidate]:
        best = None
        for room_a in rooms_a:
            for room_b in rooms_b:
                if room_a.is_connected(room_b.index):
                    continue
                best = _closest_tiles(room_a, room_b, best)
        return best

    def _create_passage(self, candidate: _Candidate, phase: int) -> Passage:
        connect_rooms(self.rooms, candidate.room_a, candidate.room_b)
        opened = carve_line(self.grid, candidate.tile_a, candidate.tile_b, self.passage_width)
        passage = Passage(
            room_a=candidate.room_a,
            room_b=candidate.room_b,
            tile_a=candidate.tile_a,
            tile_b=candidate.tile_b,
            radius=self.passage_width,
            phase=phase,
            cells_opened=opened,
        )
        self.passages.append(passage)
        logger.debug(
            "Passage carved",
            room_a=candidate.room_a,
            room_b=candidate.room_b,
            distance=candidate.distance,
            phase=phase,
            cells_opened=opened,
        )
        return passage
