"""Player actions: movement, picking up, drinking, changing zone and input handling."""

from __future__ import annotations

import math
from collections.abc import Callable

from viscera.components import (
    CanAutomaticallyHeal,
    CombatStats,
    GameLog,
    Item,
    MyTurn,
    Player,
    Position,
    Viewshed,
    WaitingToAct,
    WantsItem,
    WantsToDrink,
    WantsToEat,
    WantsToMelee,
    WantsToSmell,
    WantsToZap,
)
from viscera.constants import (
    MAP_HEIGHT,
    MAP_WIDTH,
    MAX_ACTION_SPEED,
    MAX_STAMINA_HEAL_TICK_COUNTER,
    TILE_SIZE_F32,
    UI_BORDER_F32,
)
from viscera.ecs import ComponentMissing, World
from viscera.state import InventoryAction, RunMode, RunState, SpecialViewMode
from viscera.zone import TileType, Zone, index_from_xy

RiverWaterFactory = Callable[[World], int]

_WAITING = RunState(RunMode.WAITING_PLAYER_INPUT)
_DO_TICK = RunState(RunMode.DO_TICK)

# Key names understood by handle_keyboard, with the step they make.
_MOVES = {
    "kp4": (-1, 0),
    "left": (-1, 0),
    "kp6": (1, 0),
    "right": (1, 0),
    "kp8": (0, -1),
    "up": (0, -1),
    "kp2": (0, 1),
    "down": (0, 1),
    "kp9": (1, -1),
    "kp7": (-1, -1),
    "kp3": (1, 1),
    "kp1": (-1, 1),
}
_WAIT_KEY = "space"


def _tile_index(x: int, y: int) -> int:
    index = index_from_xy(x, y)
    if not 0 <= index < MAP_WIDTH * MAP_HEIGHT:
        raise IndexError(f"tile ({x}, {y}) is outside the zone")
    return index


def _zone(world: World) -> Zone:
    return world.single(Zone)[1]


def _game_log(world: World) -> GameLog:
    return world.single(GameLog)[1]


def _player_position(world: World) -> Position:
    found = None
    for _entity, (position, _player) in world.query(Position, Player):
        found = position
    if found is None:
        raise ComponentMissing("no player with a position")
    return found


def player_entity(world: World) -> int:
    """The player's entity."""
    return world.single(Player)[0]


def can_act(world: World) -> bool:
    """Whether it is the player's turn."""
    return any(True for _ in world.query(Player, MyTurn))


def reset_heal_counter(world: World) -> None:
    """Restart the stamina healing countdown of a wounded player."""
    for _entity, (stats, heal, _player) in world.query(
        CombatStats, CanAutomaticallyHeal, Player
    ):
        if stats.current_stamina < stats.max_stamina:
            heal.tick_counter = MAX_STAMINA_HEAL_TICK_COUNTER


def wait_after_action(world: World) -> None:
    """End the player's turn, waiting a number of ticks set by speed."""
    player = player_entity(world)
    speed = world.get(player, CombatStats).speed
    if not world.has(player, MyTurn):
        return
    world.remove(player, MyTurn)
    world.insert(player, WaitingToAct(tick_countdown=max(1, MAX_ACTION_SPEED - speed)))


def try_move(world: World, delta_x: int, delta_y: int) -> RunState:
    """Move the player, or attack whatever fighter stands at the destination."""
    zone = _zone(world)
    state = _WAITING
    attack: tuple[int, int] | None = None

    for entity, (position, viewshed, _player) in world.query(Position, Viewshed, Player):
        destination = _tile_index(position.x + delta_x, position.y + delta_y)
        for target in zone.tile_content[destination]:
            if world.has(target, CombatStats):
                attack = (entity, target)

        if attack is None and not zone.blocked_tiles[destination]:
            position.x = min(MAP_WIDTH - 1, max(0, position.x + delta_x))
            position.y = min(MAP_HEIGHT - 1, max(0, position.y + delta_y))
            viewshed.must_recalculate = True
            state = _DO_TICK

    if attack is not None:
        attacker, target = attack
        world.insert(attacker, WantsToMelee(target=target))
        state = _DO_TICK

    return state


def take_from_map(world: World) -> int | None:
    """The item lying where the player stands, if any (the newest wins)."""
    player_position = _player_position(world)
    found = None
    for entity, (_item, position) in world.query(Item, Position):
        if position.x == player_position.x and position.y == player_position.y:
            found = entity
    return found


def pick_up(world: World) -> None:
    """Try to pick up the item under the player."""
    player = player_entity(world)
    item = take_from_map(world)
    if item is None:
        _game_log(world).add("There is nothing here to pick up")
        return
    world.insert(player, WantsItem(item=item))
    reset_heal_counter(world)
    wait_after_action(world)


def try_drink(
    world: World, player: int, river_water_factory: RiverWaterFactory | None
) -> tuple[RunState, bool]:
    """Drink from a river or from a drink on the ground.

    Returns the next run state and whether the player spent the turn waiting.
    Falls back to the drinkable items in the backpack.
    """
    position = _player_position(world)
    if _zone(world).water_tiles[_tile_index(position.x, position.y)]:
        if river_water_factory is None:
            raise ValueError("drinking from a river needs a river water factory")
        water = river_water_factory(world)
        world.insert(player, WantsToDrink(item=water))
        return _DO_TICK, True

    drink = take_from_map(world)
    if drink is not None:
        world.insert(player, WantsToDrink(item=drink))
        return _DO_TICK, True

    return RunState.show_inventory(InventoryAction.QUAFF), False


def try_next_level(world: World, char_pressed: str) -> RunState:
    """Take the passage under the player if ``char_pressed`` matches its direction."""
    position = _player_position(world)
    tile = _zone(world).tiles[_tile_index(position.x, position.y)]
    log = _game_log(world)
    log.add("There is nothing here to pick up")

    if tile is TileType.DOWN_PASSAGE:
        if char_pressed == ">":
            log.add("You climb down...")
            return RunState(RunMode.GO_TO_NEXT_ZONE)
    elif tile is TileType.UP_PASSAGE:
        if char_pressed == "<":
            log.add("You climb up...")
            return RunState(RunMode.GO_TO_NEXT_ZONE)
    elif char_pressed == ">":
        log.add("You can't go down here")
    elif char_pressed == "<":
        log.add("You can't go up here")

    return _WAITING


def tile_from_mouse(mouse_x: float, mouse_y: float) -> tuple[int, int]:
    """The tile under a mouse position given in window pixels."""
    tile_x = int(math.ceil((mouse_x - UI_BORDER_F32) / TILE_SIZE_F32) - 1)
    tile_y = int(math.ceil((mouse_y - UI_BORDER_F32) / TILE_SIZE_F32) - 1)
    return tile_x, tile_y


def _handle_char(
    world: World, char: str, river_water_factory: RiverWaterFactory | None
) -> tuple[RunState, bool]:
    player = player_entity(world)
    if char == ".":
        return _DO_TICK, True
    if char == "p":
        pick_up(world)
        return _DO_TICK, False
    if char == "e":
        edible = take_from_map(world)
        if edible is not None:
            world.insert(player, WantsToEat(item=edible))
            return _DO_TICK, True
        return RunState.show_inventory(InventoryAction.EAT), False
    if char == "k":
        return RunState(RunMode.GAME_OVER), False
    if char in ("<", ">"):
        return try_next_level(world, char), False
    if char == "d":
        return RunState.show_inventory(InventoryAction.DROP), False
    if char == "i":
        return RunState.show_inventory(InventoryAction.INVOKE), False
    if char == "q":
        return try_drink(world, player, river_water_factory)
    if char == "r":
        return RunState.show_inventory(InventoryAction.REFILL_WHAT), False
    if char == "s":
        return RunState.mouse_targeting(SpecialViewMode.SMELL), False
    return _WAITING, False


def handle_keyboard(
    world: World,
    key: str | None,
    char: str | None = None,
    river_water_factory: RiverWaterFactory | None = None,
) -> RunState:
    """React to one frame of keyboard input.

    ``key`` is the name of the key pressed ("left", "right", "up", "down",
    "kp1" to "kp9", "space", or any other name), or None when none was.
    ``char`` is the character typed; it is looked at only when a key other
    than the movement and wait keys was pressed.
    """
    state = _WAITING
    actively_waiting = False

    if key is None:
        state = _WAITING
    elif key in _MOVES:
        state = try_move(world, *_MOVES[key])
    elif key == _WAIT_KEY:
        state = _DO_TICK
        actively_waiting = True
    elif char is not None:
        state, actively_waiting = _handle_char(world, char, river_water_factory)

    if state != _WAITING:
        if not actively_waiting:
            reset_heal_counter(world)
        wait_after_action(world)

    return state


def handle_targeting(
    world: World,
    mode: SpecialViewMode,
    escape_pressed: bool,
    click: tuple[float, float] | None,
) -> RunState:
    """React to input while the player picks a tile with the mouse.

    ``click`` is the mouse position while the left button is down, or None.
    """
    if escape_pressed:
        return _WAITING
    if click is not None:
        tile_x, tile_y = tile_from_mouse(*click)
        player = player_entity(world)

        if mode is SpecialViewMode.ZAP_TARGETING:
            visible = _zone(world).visible_tiles
            index = index_from_xy(tile_x, tile_y)
            if 0 <= index < len(visible) and visible[index]:
                world.insert(player, WantsToZap(target=(tile_x, tile_y)))
                reset_heal_counter(world)
                wait_after_action(world)
                return _DO_TICK
        elif mode is SpecialViewMode.SMELL:
            world.insert(player, WantsToSmell(target=(tile_x, tile_y)))
            return _WAITING

    return RunState.mouse_targeting(mode)