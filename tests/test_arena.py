import random

import pytest

from viscera.arena import build_arena_zone
from viscera.constants import MAP_HEIGHT, MAP_WIDTH
from viscera.zone import TileType, index_from_xy, xy_from_index

SEEDS = [0, 1, 7, 42, 1234]


def _build(seed, depth=1):
    return build_arena_zone(depth, random.Random(seed))


@pytest.mark.parametrize("seed", SEEDS)
def test_boundary_is_wall(seed):
    zone = _build(seed)
    for index, tile in enumerate(zone.tiles):
        x, y = xy_from_index(index)
        if x in (0, MAP_WIDTH - 1) or y in (0, MAP_HEIGHT - 1):
            assert tile is TileType.WALL


@pytest.mark.parametrize("seed", SEEDS)
def test_interior_has_no_walls(seed):
    zone = _build(seed)
    interior_walls = []
    for index, tile in enumerate(zone.tiles):
        x, y = xy_from_index(index)
        if 0 < x < MAP_WIDTH - 1 and 0 < y < MAP_HEIGHT - 1 and tile is TileType.WALL:
            interior_walls.append(index)
    assert interior_walls == []


@pytest.mark.parametrize("seed", SEEDS)
def test_braziers_only_at_quarter_points(seed):
    zone = _build(seed)
    allowed = {
        index_from_xy(MAP_WIDTH // 4, MAP_HEIGHT // 4),
        index_from_xy(MAP_WIDTH * 3 // 4, MAP_HEIGHT // 4),
        index_from_xy(MAP_WIDTH // 4, MAP_HEIGHT * 3 // 4),
        index_from_xy(MAP_WIDTH * 3 // 4, MAP_HEIGHT * 3 // 4),
    }
    braziers = {i for i, t in enumerate(zone.tiles) if t is TileType.BRAZIER}
    assert braziers <= allowed


@pytest.mark.parametrize("seed", SEEDS)
def test_player_spawns_in_center(seed):
    zone = _build(seed)
    assert zone.player_spawn_point == index_from_xy(MAP_WIDTH // 2, MAP_HEIGHT // 2)


@pytest.mark.parametrize("seed", SEEDS)
def test_rivers_and_water_map(seed):
    zone = _build(seed)
    assert TileType.WATER in zone.tiles
    assert zone.water_tiles == [t is TileType.WATER for t in zone.tiles]


@pytest.mark.parametrize("seed", SEEDS)
def test_monster_spawn_points(seed):
    zone = _build(seed)
    assert 0 < len(zone.monster_spawn_points) <= 25
    for index in zone.monster_spawn_points:
        assert index != zone.player_spawn_point
        assert zone.tiles[index] is not TileType.WALL


@pytest.mark.parametrize("seed", SEEDS)
def test_item_spawn_points_inside(seed):
    zone = _build(seed)
    assert 0 < len(zone.item_spawn_points) <= 20
    for index in zone.item_spawn_points:
        x, y = xy_from_index(index)
        assert 2 <= x <= MAP_WIDTH - 2
        assert 2 <= y <= MAP_HEIGHT - 2


def test_depth_kept():
    assert _build(3, depth=5).depth == 5


def test_same_seed_same_zone():
    a = _build(99)
    b = _build(99)
    assert a.tiles == b.tiles
    assert a.monster_spawn_points == b.monster_spawn_points
    assert a.item_spawn_points == b.item_spawn_points