"""Builds a cavern-like zone carved by repeated drunken walks."""

from __future__ import annotations

import random

from viscera.constants import (
    DRUNKEN_WALK_LIFE_MAX,
    DRUNKEN_WALK_MAX_ITERATIONS,
    MAP_HEIGHT,
    MAP_WIDTH,
    MAX_BRAZIER_IN_ZONE,
    MAX_ITEMS_ON_ROOM_START,
    MAX_MONSTERS_ON_ROOM_START,
    MAX_RIVERS_IN_ZONE,
    MAX_SPAWN_TENTANTIVES,
)
from viscera.river import build_river
from viscera.zone import TileType, Zone, index_from_float_xy, index_from_xy

_STEPS = {1: (1, 0), 2: (0, 1), 3: (-1, 0), 4: (0, -1)}


def _dice(rng: random.Random, number: int, size: int) -> int:
    return sum(rng.randint(1, size) for _ in range(number))


def _random_inner_index(rng: random.Random) -> int:
    return index_from_xy(_dice(rng, 1, MAP_WIDTH - 2), _dice(rng, 1, MAP_HEIGHT - 2))


def _carve(zone: Zone, rng: random.Random) -> None:
    x, y = MAP_WIDTH // 2, MAP_HEIGHT // 2
    for _ in range(DRUNKEN_WALK_MAX_ITERATIONS):
        zone.tiles[index_from_xy(x, y)] = TileType.FLOOR
        life = 0
        while life < DRUNKEN_WALK_LIFE_MAX:
            dx, dy = _STEPS[_dice(rng, 1, 4)]
            dest_x, dest_y = x + dx, y + dy
            if (
                dest_x <= 1
                or dest_x >= MAP_WIDTH - 1
                or dest_y <= 1
                or dest_y >= MAP_HEIGHT - 1
            ):
                continue
            index = index_from_xy(dest_x, dest_y)
            if zone.tiles[index] is TileType.WALL:
                zone.tiles[index] = TileType.FLOOR
            life += 1
            x, y = dest_x, dest_y
        x, y = _dice(rng, 1, MAP_WIDTH - 2), _dice(rng, 1, MAP_HEIGHT - 2)


def _random_floor_index(zone: Zone, rng: random.Random) -> int:
    index = len(zone.tiles) // 2
    while zone.tiles[index] is not TileType.FLOOR:
        index = _random_inner_index(rng)
    return index


def build_drunken_walk_zone(depth: int, rng: random.Random) -> Zone:
    """Create a cavern zone at the given depth."""
    zone = Zone(depth)
    _carve(zone, rng)

    zone.player_spawn_point = len(zone.tiles) // 2
    while zone.tiles[zone.player_spawn_point] is TileType.WALL:
        zone.player_spawn_point = _random_inner_index(rng)

    river_number = max(1, _dice(rng, 0, MAX_RIVERS_IN_ZONE + int(depth / 3)) - 3)
    for _ in range(river_number):
        build_river(zone, rng)
    zone.populate_water()

    monster_number = _dice(rng, 1, MAX_MONSTERS_ON_ROOM_START) + 2
    items_number = _dice(rng, 1, MAX_ITEMS_ON_ROOM_START) + 3
    braziers_number = _dice(rng, 1, MAX_BRAZIER_IN_ZONE)

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

    for _ in range(items_number):
        for _ in range(MAX_SPAWN_TENTANTIVES):
            x = _dice(rng, 1, MAP_WIDTH - 2)
            y = _dice(rng, 1, MAP_HEIGHT - 2)
            index = index_from_float_xy(x, y)
            if (
                index != zone.player_spawn_point
                and zone.tiles[index] is TileType.FLOOR
                and index not in zone.item_spawn_points
            ):
                zone.item_spawn_points.add(index)
                break

    for _ in range(braziers_number):
        zone.tiles[_random_floor_index(zone, rng)] = TileType.BRAZIER

    zone.tiles[_random_floor_index(zone, rng)] = TileType.DOWN_PASSAGE

    return zone