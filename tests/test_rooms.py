"""Tests for the room model and room extraction."""

import pytest

from py_cavegen.core.exceptions import NoViableRoomsError
from py_cavegen.core.grid import Cell, Coord
from py_cavegen.core.rooms import (
    Room,
    connect_rooms,
    extract_rooms,
    find_edge_tiles,
    room_graph,
    set_accessible_from_main_room,
)


def make_rooms(count, main=0):
    rooms = [Room(index=i, tiles=[Coord(i, 0)], edge_tiles=[Coord(i, 0)]) for i in range(count)]
    rooms[main].is_main_room = True
    rooms[main].is_accessible_from_main_room = True
    return rooms


class TestExtractRooms:
    """Test promotion of passable regions to rooms."""

    def test_two_rooms(self, two_room_grid):
        rooms = extract_rooms(two_room_grid, 4)

        assert [room.size for room in rooms] == [9, 4]
        assert [room.index for room in rooms] == [0, 1]
        assert rooms[0].is_main_room
        assert rooms[0].is_accessible_from_main_room
        assert not rooms[1].is_main_room
        assert not rooms[1].is_accessible_from_main_room
        assert all(not room.connected_rooms for room in rooms)

    def test_small_region_filled(self, two_room_grid):
        rooms = extract_rooms(two_room_grid, 5)

        assert len(rooms) == 1
        for x, y in [(5, 1), (6, 1), (5, 2), (6, 2)]:
            assert two_room_grid[x, y] == Cell.BLOCKED

    def test_edge_tiles(self, two_room_grid):
        rooms = extract_rooms(two_room_grid, 4)

        assert len(rooms[0].edge_tiles) == 8
        assert Coord(2, 2) not in rooms[0].edge_tiles
        assert set(rooms[1].edge_tiles) == set(rooms[1].tiles)

    def test_edge_tiles_are_unique_members(self, two_room_grid):
        for room in extract_rooms(two_room_grid, 1):
            assert len(set(room.edge_tiles)) == len(room.edge_tiles)
            assert set(room.edge_tiles) <= set(room.tiles)

    def test_largest_room_is_main(self, make_grid):
        grid = make_grid([
            "#########",
            "#..#....#",
            "#..#....#",
            "#########",
        ])
        rooms = extract_rooms(grid, 1)
        assert [room.is_main_room for room in rooms] == [False, True]

    def test_first_room_wins_size_tie(self, make_grid):
        grid = make_grid([
            "#######",
            "#..#..#",
            "#######",
        ])
        rooms = extract_rooms(grid, 1)
        assert [room.is_main_room for room in rooms] == [True, False]

    def test_no_viable_rooms(self, two_room_grid):
        with pytest.raises(NoViableRoomsError) as exc_info:
            extract_rooms(two_room_grid, 10)

        assert exc_info.value.room_threshold_size == 10
        assert exc_info.value.regions_discarded == 2

    def test_no_passable_cells(self, make_grid):
        with pytest.raises(NoViableRoomsError):
            extract_rooms(make_grid(["####", "####"]), 1)


class TestEdgeTiles:
    """Test edge tile detection."""

    def test_grid_edge_counts_as_blocked(self, make_grid):
        grid = make_grid([
            "...",
            "...",
            "...",
        ])
        tiles = [Coord(x, y) for x in range(3) for y in range(3)]
        edges = find_edge_tiles(grid, tiles)
        assert Coord(1, 1) not in edges
        assert len(edges) == 8


class TestConnectivity:
    """Test room connection bookkeeping."""

    def test_connection_is_symmetric(self):
        rooms = make_rooms(3)
        connect_rooms(rooms, 1, 2)
        assert rooms[1].is_connected(2)
        assert rooms[2].is_connected(1)
        assert not rooms[0].is_connected(1)

    def test_unrelated_rooms_stay_inaccessible(self):
        rooms = make_rooms(3)
        connect_rooms(rooms, 1, 2)
        assert not rooms[1].is_accessible_from_main_room
        assert not rooms[2].is_accessible_from_main_room

    def test_accessibility_spreads_through_cluster(self):
        rooms = make_rooms(4)
        connect_rooms(rooms, 1, 2)
        connect_rooms(rooms, 2, 3)
        connect_rooms(rooms, 3, 0)
        assert all(room.is_accessible_from_main_room for room in rooms)

    def test_accessibility_spreads_from_either_side(self):
        rooms = make_rooms(3)
        connect_rooms(rooms, 2, 1)
        connect_rooms(rooms, 1, 0)
        assert all(room.is_accessible_from_main_room for room in rooms)

    def test_set_accessible_handles_cycles(self):
        rooms = make_rooms(4)
        for a, b in [(1, 2), (2, 3), (3, 1)]:
            connect_rooms(rooms, a, b)
        set_accessible_from_main_room(rooms, 3)
        assert all(room.is_accessible_from_main_room for room in rooms)

    def test_room_graph(self):
        rooms = make_rooms(3)
        connect_rooms(rooms, 0, 2)
        connect_rooms(rooms, 1, 2)
        assert room_graph(rooms) == [(2,), (2,), (0, 1)]
