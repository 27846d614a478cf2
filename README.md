# viscera

The game logic of a turn-based roguelike. It has no rendering or input layer.

## What is in it

- `viscera.ecs`: a small entity–component store. `World` has `spawn`, `despawn`, `insert`, `remove`, `get`, `has`, `contains`, `query` (with a `without=` filter), `single`, `entities` and `clear`. A missing entity raises `NoSuchEntity`, and a missing component raises `ComponentMissing`.
- `viscera.components`: component dataclasses. These include `Position`, `Viewshed`, `CombatStats`, `Hunger`, `Thirst`, `Item`, `InBackpack`, `GameLog` (with `add` and `latest`) and intents such as `WantsToEat`, `WantsToDrink` and `WantsToFuel`. The module also has a `Rect` with `overlaps`, `center` and `center_int`.
- `viscera.zone`: the `Zone` map, 56 × 34 tiles, which starts as solid wall. It has the `TileType` and `ParticleType` enums and the helpers `index_from_xy`, `index_from_float_xy`, `xy_from_index` and `tile_sprite_index`. `Zone` has `adjacent_passable_tiles`, `populate_blocked`, `populate_water`, `is_tile_opaque` and `clear_content_index`.
- Zone generators. Each takes a depth and a `random.Random`, so the same seed gives the same map:
  - `viscera.arena.build_arena_zone` builds an open arena with boundary walls, four braziers, a down passage in the centre and five rivers.
  - `viscera.drunken_walk.build_drunken_walk_zone` builds a cavern carved by drunken walks, with rivers, braziers and a down passage.
  - `viscera.dungeon.build_dungeon_zone` builds rectangular rooms joined by corridors.
  - `viscera.river.build_river` carves one river into an existing zone.
- `viscera.state`: the `RunState` of the game loop, a `RunMode` that may carry an `InventoryAction` or a `SpecialViewMode`. It also has `EngineState`, whose `entities_to_delete_on_zone_change` lists everything except the player, the backpack items and the game log.
- `viscera.timer.GameEngine`: accumulates frame time. `next_tick(frame_time)` returns `True` when a tick is due, and `set_delay` holds the next tick back.
- `viscera.player`: player actions.
  - `try_move` moves the player, or attacks a fighter that stands on the destination.
  - `take_from_map`, `pick_up`, `try_drink` and `try_next_level` handle items, drinking and passages.
  - `wait_after_action`, `reset_heal_counter` and `can_act` manage turns.
  - `handle_keyboard`, `handle_targeting` and `tile_from_mouse` turn input into run states.
- `viscera.inventory`: backpack listings.
  - `backpack_items` and `items_for_mode` return `InventoryEntry` values sorted by their assigned letter.
  - `header_text` gives the question shown for a mode.
  - `handle_input` turns a letter into an intent.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Using it

Generate a map:

```python
import random

from viscera.drunken_walk import build_drunken_walk_zone
from viscera.zone import TileType, xy_from_index

rng = random.Random(42)
zone = build_drunken_walk_zone(2, rng)
zone.populate_blocked()

print(zone.depth, xy_from_index(zone.player_spawn_point))
print(sum(tile is TileType.WATER for tile in zone.tiles), "water tiles")
```

Input handling never reads a device. You pass in the key name or character that was pressed, and you get back the next `RunState`:

```python
import random

from viscera.arena import build_arena_zone
from viscera.components import CombatStats, GameLog, MyTurn, Player, Position, Viewshed
from viscera.ecs import World
from viscera.player import handle_keyboard
from viscera.state import RunMode
from viscera.zone import xy_from_index

world = World()
world.spawn(GameLog())
zone = build_arena_zone(1, random.Random(7))
zone.populate_blocked()
x, y = xy_from_index(zone.player_spawn_point)
world.spawn(
    Player(),
    Position(x, y),
    Viewshed(range=6),
    CombatStats(10, 10, 10, 10, 10, 10, 0, 4, 2),
    MyTurn(),
)
world.spawn(zone)

state = handle_keyboard(world, "left")
print(state.mode is RunMode.DO_TICK)
```

## What it does not do

This package has no window, drawing, sound or game loop, and it has no command to start a game. It does not place monsters or items into the world from a zone's spawn points. It also does not run per-tick systems such as damage, hunger, thirst, field of view or monster behaviour. Components and intents such as `WantsToMelee` or `WantsToEat` are recorded on entities, and acting on them is left to the caller.