"""Errors raised by the cave generation pipeline."""

from typing import List


class CaveGenerationError(Exception):
    """Base class for generation failures."""


class NoViableRoomsError(CaveGenerationError):
    """
    Every passable region was discarded by the room threshold.

    This is a configuration problem: the thresholds are too aggressive for the
    grid size or fill percentage. Retry with other options or another seed.
    """

    def __init__(self, room_threshold_size: int, regions_discarded: int):
        self.room_threshold_size = room_threshold_size
        self.regions_discarded = regions_discarded
        super().__init__(
            f"No viable rooms: {regions_discarded} passable region(s) "
            f"all smaller than room_threshold_size={room_threshold_size}"
        )


class UnreachableRoomError(CaveGenerationError):
    """Rooms remain disconnected from the main room with no candidate passage left."""

    def __init__(self, room_indices: List[int]):
        self.room_indices = list(room_indices)
        super().__init__(
            f"Rooms {self.room_indices} cannot be connected to the main room"
        )
