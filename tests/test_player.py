import pytest

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
    MAX_STAMINA_HEAL_TICK_COUNTER,
    NORMAL,
    TILE_SIZE,
    UI_BORDER,
)
from viscera.ecs import World
from viscera.player import (
    can_act,
    handle_keyboard,
    handle_targeting,
    pick_up,
    player_entity,
    reset_heal_counter,
    take_from_map,
    tile_from_mouse,
    try_drink,
    try_move,
    try_next_level,
    wait_after_action,
)
from viscera.state import InventoryAction, RunMode, RunState, SpecialViewMode
from viscera.zone import TileType, Zone, index_from_xy

WAITING = RunState(RunMode.WAITING_PLAYER_INPUT)
DO_TICK = RunState(RunMode.DO_TICK)


def _stats(stamina=10, speed=NORMAL):
    return CombatStats(
        current_stamina=stamina,
        max_stamina=10,
        current_toughness=10,
        max_toughness=10,
        current_dexterity=10,
        max_dexterity=10,
        base_armor=0,
        unarmed_attack_dice=4,
        speed=speed,
    )


def _make(stamina=10, speed=NORMAL):
    world = World()
    log = GameLog(["Welcome"])
    world.spawn(log)
    zone = Zone(1)
    for x in range(1, MAP_WIDTH - 1):
        for y in range(1, MAP_HEIGHT - 1):
            zone.tiles[index_from_xy(x, y)] = TileType.FLOOR
    zone.populate_blocked()
    zone.populate_water()
    player = world.spawn(
        Player(),
        Position(5, 5),
        Viewshed(range=6, must_recalculate=False),
        _stats(stamina, speed),
        CanAutomaticallyHeal(tick_counter=0),
        MyTurn(),
    )
    world.spawn(zone)
    return world, player, zone, log


@pytest.fixture
def setup():
    return _make()


def test_player_entity_and_can_act(setup):
    world, player, _zone, _log = setup
    assert player_entity(world) == player
    assert can_act(world) is True
    world.remove(player, MyTurn)
    assert can_act(world) is False


def test_wait_after_action_swaps_turn(setup):
    world, player, _zone, _log = setup
    wait_after_action(world)
    assert not world.has(player, MyTurn)
    assert world.get(player, WaitingToAct).tick_countdown == 2


def test_wait_after_action_fast_player_waits_at_least_one_tick():
    world, player, _zone, _log = _make(speed=9)
    wait_after_action(world)
    assert world.get(player, WaitingToAct).tick_countdown == 1


def test_wait_without_turn_changes_nothing(setup):
    world, player, _zone, _log = setup
    world.remove(player, MyTurn)
    wait_after_action(world)
    assert not world.has(player, WaitingToAct)


def test_reset_heal_counter_only_when_wounded():
    world, player, _zone, _log = _make(stamina=3)
    reset_heal_counter(world)
    assert world.get(player, CanAutomaticallyHeal).tick_counter == MAX_STAMINA_HEAL_TICK_COUNTER

    world, player, _zone, _log = _make(stamina=10)
    reset_heal_counter(world)
    assert world.get(player, CanAutomaticallyHeal).tick_counter == 0


def test_try_move_onto_floor(setup):
    world, player, _zone, _log = setup
    assert try_move(world, 1, -1) == DO_TICK
    position = world.get(player, Position)
    assert (position.x, position.y) == (6, 4)
    assert world.get(player, Viewshed).must_recalculate is True


def test_try_move_into_wall_stays(setup):
    world, player, zone, _log = setup
    zone.tiles[index_from_xy(4, 5)] = TileType.WALL
    zone.populate_blocked()
    assert try_move(world, -1, 0) == WAITING
    position = world.get(player, Position)
    assert (position.x, position.y) == (5, 5)


def test_try_move_attacks_fighter(setup):
    world, player, zone, _log = setup
    monster = world.spawn(Position(5, 6), _stats())
    zone.tile_content[index_from_xy(5, 6)].append(monster)
    assert try_move(world, 0, 1) == DO_TICK
    assert world.get(player, WantsToMelee).target == monster
    position = world.get(player, Position)
    assert (position.x, position.y) == (5, 5)


def test_take_from_map(setup):
    world, _player, _zone, _log = setup
    assert take_from_map(world) is None
    world.spawn(Item(1), Position(6, 6))
    assert take_from_map(world) is None
    item = world.spawn(Item(2), Position(5, 5))
    assert take_from_map(world) == item


def test_pick_up_nothing_logs(setup):
    world, player, _zone, log = setup
    pick_up(world)
    assert log.entries[-1] == "There is nothing here to pick up"
    assert world.has(player, MyTurn)


def test_pick_up_item(setup):
    world, player, _zone, _log = setup
    item = world.spawn(Item(1), Position(5, 5))
    pick_up(world)
    assert world.get(player, WantsItem).item == item
    assert not world.has(player, MyTurn)


def test_try_drink_from_river(setup):
    world, player, zone, _log = setup
    zone.tiles[index_from_xy(5, 5)] = TileType.WATER
    zone.populate_water()
    spawned = []

    def factory(w):
        entity = w.spawn(Item(0))
        spawned.append(entity)
        return entity

    assert try_drink(world, player, factory) == (DO_TICK, True)
    assert world.get(player, WantsToDrink).item == spawned[0]


def test_try_drink_river_needs_factory(setup):
    world, player, zone, _log = setup
    zone.tiles[index_from_xy(5, 5)] = TileType.WATER
    zone.populate_water()
    with pytest.raises(ValueError):
        try_drink(world, player, None)


def test_try_drink_from_ground_or_inventory(setup):
    world, player, _zone, _log = setup
    assert try_drink(world, player, None) == (
        RunState.show_inventory(InventoryAction.QUAFF),
        False,
    )
    bottle = world.spawn(Item(3), Position(5, 5))
    assert try_drink(world, player, None) == (DO_TICK, True)
    assert world.get(player, WantsToDrink).item == bottle


def test_try_next_level_down(setup):
    world, _player, zone, log = setup
    zone.tiles[index_from_xy(5, 5)] = TileType.DOWN_PASSAGE
    assert try_next_level(world, "<") == WAITING
    assert try_next_level(world, ">") == RunState(RunMode.GO_TO_NEXT_ZONE)
    assert log.entries[-1] == "You climb down..."


def test_try_next_level_on_floor(setup):
    world, _player, _zone, log = setup
    assert try_next_level(world, ">") == WAITING
    assert log.entries[-1] == "You can't go down here"
    assert try_next_level(world, "<") == WAITING
    assert log.entries[-1] == "You can't go up here"


@pytest.mark.parametrize("tx, ty", [(0, 0), (3, 7), (MAP_WIDTH - 1, MAP_HEIGHT - 1)])
def test_tile_from_mouse_centre_of_tile(tx, ty):
    half = TILE_SIZE / 2
    mouse = (UI_BORDER + tx * TILE_SIZE + half, UI_BORDER + ty * TILE_SIZE + half)
    assert tile_from_mouse(*mouse) == (tx, ty)


def test_handle_keyboard_no_key(setup):
    world, player, _zone, _log = setup
    assert handle_keyboard(world, None, "d") == WAITING
    assert world.has(player, MyTurn)


def test_handle_keyboard_move_ends_turn(setup):
    world, player, _zone, _log = setup
    assert handle_keyboard(world, "right") == DO_TICK
    assert world.get(player, Position).x == 6
    assert not world.has(player, MyTurn)


def test_handle_keyboard_space_keeps_heal_counter():
    world, player, _zone, _log = _make(stamina=3)
    assert handle_keyboard(world, "space") == DO_TICK
    assert world.get(player, CanAutomaticallyHeal).tick_counter == 0


def test_handle_keyboard_drop_resets_heal_counter():
    world, player, _zone, _log = _make(stamina=3)
    state = handle_keyboard(world, "d", "d")
    assert state == RunState.show_inventory(InventoryAction.DROP)
    assert world.get(player, CanAutomaticallyHeal).tick_counter == MAX_STAMINA_HEAL_TICK_COUNTER


def test_handle_keyboard_chars(setup):
    world, player, _zone, _log = setup
    assert handle_keyboard(world, "x", "x") == WAITING
    assert world.has(player, MyTurn)
    assert handle_keyboard(world, "e", "e") == RunState.show_inventory(InventoryAction.EAT)
    assert handle_keyboard(world, "k", "k") == RunState(RunMode.GAME_OVER)
    assert handle_keyboard(world, "s", "s") == RunState.mouse_targeting(SpecialViewMode.SMELL)


def test_handle_keyboard_eat_from_ground(setup):
    world, player, _zone, _log = setup
    food = world.spawn(Item(1), Position(5, 5))
    assert handle_keyboard(world, "e", "e") == DO_TICK
    assert world.get(player, WantsToEat).item == food


def test_handle_targeting_escape_and_idle(setup):
    world, _player, _zone, _log = setup
    mode = SpecialViewMode.ZAP_TARGETING
    assert handle_targeting(world, mode, True, (100.0, 100.0)) == WAITING
    assert handle_targeting(world, mode, False, None) == RunState.mouse_targeting(mode)


def test_handle_targeting_zap_visible_tile(setup):
    world, player, zone, _log = setup
    zone.visible_tiles[index_from_xy(2, 3)] = True
    mouse = (UI_BORDER + 2 * TILE_SIZE + 1, UI_BORDER + 3 * TILE_SIZE + 1)
    assert handle_targeting(world, SpecialViewMode.ZAP_TARGETING, False, mouse) == DO_TICK
    assert world.get(player, WantsToZap).target == (2, 3)
    assert not world.has(player, MyTurn)


def test_handle_targeting_zap_hidden_or_outside(setup):
    world, player, _zone, _log = setup
    mode = SpecialViewMode.ZAP_TARGETING
    mouse = (UI_BORDER + 2 * TILE_SIZE + 1, UI_BORDER + 3 * TILE_SIZE + 1)
    assert handle_targeting(world, mode, False, mouse) == RunState.mouse_targeting(mode)
    assert handle_targeting(world, mode, False, (-50.0, -50.0)) == RunState.mouse_targeting(mode)
    assert not world.has(player, WantsToZap)


def test_handle_targeting_smell(setup):
    world, player, _zone, _log = setup
    mouse = (UI_BORDER + 4 * TILE_SIZE + 1, UI_BORDER + 1 * TILE_SIZE + 1)
    assert handle_targeting(world, SpecialViewMode.SMELL, False, mouse) == WAITING
    assert world.get(player, WantsToSmell).target == (4, 1)
    assert world.has(player, MyTurn)