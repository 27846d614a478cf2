"""Builds a dungeon zone of rectangular rooms joined by corridors."""

from __future__ import annotations

import random

from viscera.components import Rect
from viscera.constants import (
    MAP_HEIGHT,
    MAP_WIDTH,
    MAX_ITEMS_ON_ROOM_START,
    MAX_MONSTERS_ON_ROOM_START,
    MAX_SPAWN_TENTANTIVES,
)
from viscera.zone import TileType, Zone, index_from_float_xy, index_from_xy

MAX_ROOMS = 30
MIN_SIZE = 3
MAX_SIZE = 8

_CELLS = MAP_WIDTH * MAP_HEIGHT


def _dice(rng: random.Random, number: int, size: int) -> int:
    return sum(rng.randint(1, size) for _ in range(number))


def _apply_room(zone: Zone, room: Rect) -> None:
    for y in range(int(room.y) + 1, int(room.y + room.h)):
        for x in range(int(room.x) + 1, int(room.x + room.w)):
            zone.tiles[index_from_xy(x, y)] = TileType.FLOOR


def _carve_cell(zone: Zone, x: int, y: int) -> None:
    index = index_from_xy(x, y)
    if 0 < index < _CELLS:
        zone.tiles[index] = TileType.FLOOR


def _horizontal_corridor(zone: Zone, x1: int, x2: int, y: int) -> None:
    for x in range(min(x1, x2), max(x1, x2) + 1):
        _carve_cell(zone, x, y)


def _vertical_corridor(zone: Zone, y1: int, y2: int, x: int) -> None:
    for y in range(min(y1, y2), max(y1, y2) + 1):
        _carve_cell(zone, x, y)


def _scatter(points: set[int], room: Rect, count: int, rng: random.Random) -> None:
    for _ in range(count):
        for _ in range(MAX_SPAWN_TENTANTIVES):
            x = room.x + _dice(rng, 1, int(room.w) - 1)
            y = room.y + _dice(rng, 1, int(room.h) - 1)
            index = index_from_float_xy(x, y)
            if index not in points:
                points.add(index)
                break


def build_dungeon_zone(depth: int, rng: random.Random) -> Zone:
    """Create a rooms-and-corridors zone at the given depth."""
    zone = Zone(depth)

    for _ in range(MAX_ROOMS):
        w = rng.randrange(MIN_SIZE, MAX_SIZE)
        h = rng.randrange(MIN_SIZE, MAX_SIZE)
        x = rng.randrange(1, MAP_WIDTH - w - 1) - 1
        y = rng.randrange(1, MAP_HEIGHT - h - 1) - 1
        new_room = Rect(float(x), float(y), float(w), float(h))
        if any(new_room.overlaps(other) for other in zone.rooms):
            continue

        _apply_room(zone, new_room)
        if zone.rooms:
            new_x, new_y = new_room.center_int()
            prev_x, prev_y = zone.rooms[-1].center_int()
            if rng.randrange(0, 2) == 1:
                _horizontal_corridor(zone, prev_x, new_x, prev_y)
                _vertical_corridor(zone, prev_y, new_y, new_x)
            else:
                _vertical_corridor(zone, prev_y, new_y, prev_x)
                _horizontal_corridor(zone, prev_x, new_x, new_y)
        zone.rooms.append(new_room)

    cx, cy = zone.rooms[0].center()
    zone.player_spawn_point = index_from_float_xy(cx, cy)

    for room in zone.rooms[1:]:
        monster_number = _dice(rng, 1, MAX_MONSTERS_ON_ROOM_START) - 1
        items_number = _dice(rng, 1, MAX_ITEMS_ON_ROOM_START) - 1
        _scatter(zone.monster_spawn_points, room, monster_number, rng)
        _scatter(zone.item_spawn_points, room, items_number, rng)

    return zone