"""Carves a meandering river across a zone."""

from __future__ import annotations

import random

from viscera.constants import MAP_HEIGHT, MAP_WIDTH
from viscera.zone import TileType, Zone, index_from_xy


def _dice(rng: random.Random, number: int, size: int) -> int:
    return sum(rng.randint(1, size) for _ in range(number))


def build_river(zone: Zone, rng: random.Random) -> None:
    """Draw a river from the top or left edge until it reaches the far side.

    A river from the top never flows upward; one from the left never flows
    back to the left.
    """
    x, y = 1, 1
    from_left = rng.randint(1, 100) <= 50
    if from_left:
        y = _dice(rng, 1, MAP_HEIGHT - 1) + 1
    else:
        x = _dice(rng, 1, MAP_WIDTH - 1) + 1

    while x < MAP_WIDTH - 1 and y < MAP_HEIGHT - 1:
        zone.tiles[index_from_xy(x, y)] = TileType.WATER

        direction = _dice(rng, 1, 3)
        dest_x, dest_y = x, y
        if direction == 1:
            dest_x += 1
        elif direction == 2:
            dest_y += 1
        elif from_left:
            dest_y -= 1
        else:
            dest_x -= 1

        if dest_x <= 1 or dest_x >= MAP_WIDTH or dest_y <= 1 or dest_y >= MAP_HEIGHT:
            continue
        x, y = dest_x, dest_y