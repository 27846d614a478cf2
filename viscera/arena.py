"""Builds an open arena zone: boundary walls, four braziers and several rivers."""

from __future__ import annotations

import random

from viscera.constants import (
    MAP_HEIGHT,
    MAP_HEIGHT_F32,
    MAP_WIDTH,
    MAP_WIDTH_F32,
    MAX_ITEMS_ON_ROOM_START,
    MAX_MONSTERS_ON_ROOM_START,
    MAX_SPAWN_TENTANTIVES,
)
from viscera.river import build_river
from viscera.zone import TileType, Zone, index_from_float_xy, index_from_xy

_RIVERS = 5


def _dice(rng: random.Random, number: int, size: int) -> int:
    return sum(rng.randint(1, size) for _ in range(number))


def build_arena_zone(depth: int, rng: random.Random) -> Zone:
    """Create an arena zone at the given depth."""
    zone = Zone(depth)

    for x in range(1, MAP_WIDTH - 1):
        for y in range(1, MAP_HEIGHT - 1):
            zone.tiles[index_from_xy(x, y)] = TileType.FLOOR

    zone.player_spawn_point = index_from_xy(MAP_WIDTH // 2, MAP_HEIGHT // 2)

    for fx in (0.25, 0.75):
        for fy in (0.25, 0.75):
            brazier = index_from_float_xy(MAP_WIDTH_F32 * fx, MAP_HEIGHT_F32 * fy)
            zone.tiles[brazier] = TileType.BRAZIER

    items_number = _dice(rng, 1, MAX_ITEMS_ON_ROOM_START) + 15
    for _ in range(items_number):
        for _ in range(MAX_SPAWN_TENTANTIVES):
            x = _dice(rng, 1, MAP_WIDTH - 3) + 1
            y = _dice(rng, 1, MAP_HEIGHT - 3) + 1
            index = index_from_float_xy(x, y)
            if zone.blocked_tiles[index]:
                continue
            if index not in zone.item_spawn_points:
                zone.item_spawn_points.add(index)
                break

    zone.tiles[index_from_xy(MAP_WIDTH // 2, MAP_HEIGHT // 2)] = TileType.DOWN_PASSAGE

    for _ in range(_RIVERS):
        build_river(zone, rng)
    zone.populate_water()

    monster_number = _dice(rng, 1, MAX_MONSTERS_ON_ROOM_START) + 20
    for _ in range(monster_number):
        for _ in range(MAX_SPAWN_TENTANTIVES):
            x = _dice(rng, 1, MAP_WIDTH - 2)
            y = _dice(rng, 1, MAP_HEIGHT - 2)
            index = index_from_float_xy(x, y)
            if (
                index != zone.player_spawn_point
                and zone.tiles[index] is not TileType.WALL
                and index not in zone.monster_spawn_points
            ):
                zone.monster_spawn_points.add(index)
                break

    return zone