"""The zone map: tiles, visibility, blocking, water and spawn points."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto

from viscera.components import Rect
from viscera.constants import MAP_HEIGHT, MAP_WIDTH

_CELLS = MAP_WIDTH * MAP_HEIGHT


class TileType(Enum):
    FLOOR = auto()
    WALL = auto()
    DOWN_PASSAGE = auto()
    UP_PASSAGE = auto()
    BRAZIER = auto()
    WATER = auto()


class ParticleType(Enum):
    BLOOD = auto()
    VOMIT = auto()


_PASSABLE = frozenset(
    {TileType.DOWN_PASSAGE, TileType.UP_PASSAGE, TileType.FLOOR, TileType.WATER}
)

_SPRITE_INDEX = {
    TileType.FLOOR: (0.0, 0.0),
    TileType.WALL: (1.0, 0.0),
    TileType.DOWN_PASSAGE: (2.0, 0.0),
    TileType.UP_PASSAGE: (3.0, 0.0),
    TileType.BRAZIER: (4.0, 0.0),
    TileType.WATER: (0.0, 1.0),
}


def index_from_xy(x: int, y: int) -> int:
    """Map a tile position to its index in the zone's flat vectors."""
    return y * MAP_WIDTH + x


def index_from_float_xy(x: float, y: float) -> int:
    """Like :func:`index_from_xy`, truncating float coordinates toward zero."""
    return int(y) * MAP_WIDTH + int(x)


def xy_from_index(index: int) -> tuple[int, int]:
    """Map a flat index back to its tile position."""
    return index % MAP_WIDTH, index // MAP_WIDTH


def tile_sprite_index(tile_type: TileType) -> tuple[float, float]:
    """Column and row of the tile's sprite in the tile sheet."""
    return _SPRITE_INDEX[tile_type]


def _filled(value):
    return field(default_factory=lambda: [value] * _CELLS)


@dataclass
class Zone:
    """One level of the world, initially solid wall."""

    depth: int
    tiles: list[TileType] = _filled(TileType.WALL)
    rooms: list[Rect] = field(default_factory=list)
    revealed_tiles: list[bool] = _filled(False)
    visible_tiles: list[bool] = _filled(False)
    lit_tiles: list[bool] = _filled(False)
    blocked_tiles: list[bool] = _filled(False)
    tile_content: list[list[int]] = field(
        default_factory=lambda: [[] for _ in range(_CELLS)]
    )
    decals_tiles: dict[int, ParticleType] = field(default_factory=dict)
    player_spawn_point: int = 0
    monster_spawn_points: set[int] = field(default_factory=set)
    item_spawn_points: set[int] = field(default_factory=set)
    water_tiles: list[bool] = _filled(False)

    def adjacent_passable_tiles(
        self,
        x: int,
        y: int,
        use_manhattan_distance: bool,
        only_water_tiles: bool,
    ) -> list[tuple[int, int]]:
        """Unblocked tiles around (x, y), the tile itself included.

        With ``use_manhattan_distance`` diagonals are left out; with
        ``only_water_tiles`` only water tiles are kept.
        """
        passable = []
        for tx in range(x - 1, x + 2):
            for ty in range(y - 1, y + 2):
                if use_manhattan_distance and tx != x and ty != y:
                    continue
                index = index_from_xy(tx, ty)
                if not 0 <= index < len(self.blocked_tiles) or self.blocked_tiles[index]:
                    continue
                if only_water_tiles and not self.water_tiles[index]:
                    continue
                passable.append((tx, ty))
        return passable

    def populate_blocked(self) -> None:
        """Mark every tile that cannot be walked on as blocked."""
        self.blocked_tiles = [tile not in _PASSABLE for tile in self.tiles]

    def populate_water(self) -> None:
        """Mark every water tile."""
        self.water_tiles = [tile is TileType.WATER for tile in self.tiles]

    def is_tile_opaque(self, x: int, y: int) -> bool:
        """Whether the tile at (x, y) blocks sight."""
        index = index_from_xy(x, y)
        if not 0 <= index < len(self.tiles):
            raise IndexError(f"tile ({x}, {y}) is outside the zone")
        return self.tiles[index] is TileType.WALL

    def clear_content_index(self) -> None:
        """Forget which entities stand on which tile."""
        for content in self.tile_content:
            content.clear()