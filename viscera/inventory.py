"""Backpack listings and the input handling of the inventory screen."""

from __future__ import annotations

from dataclasses import dataclass

from viscera.components import (
    Edible,
    GameLog,
    InBackpack,
    Invokable,
    Item,
    Named,
    ProduceLight,
    Quaffable,
    Refiller,
    WantsToDrink,
    WantsToDrop,
    WantsToEat,
    WantsToFuel,
    WantsToInvoke,
)
from viscera.ecs import World
from viscera.player import player_entity, wait_after_action
from viscera.state import InventoryAction, RunMode, RunState, SpecialViewMode

_HEADERS = {
    InventoryAction.EAT: "Eat what?",
    InventoryAction.INVOKE: "Invoke what?",
    InventoryAction.QUAFF: "Drink what?",
    InventoryAction.REFILL_WHAT: "Refill what?",
    InventoryAction.REFILL_WITH: "With what?",
    InventoryAction.DROP: "Drop what?",
}

# Component an item must carry to be listed for each mode; None lists everything.
_FILTERS: dict[InventoryAction, type | None] = {
    InventoryAction.EAT: Edible,
    InventoryAction.INVOKE: Invokable,
    InventoryAction.QUAFF: Quaffable,
    InventoryAction.REFILL_WHAT: ProduceLight,
    InventoryAction.REFILL_WITH: Refiller,
    InventoryAction.DROP: None,
}


@dataclass(frozen=True)
class InventoryEntry:
    """One line of the inventory screen."""

    entity: int
    name: str
    assigned_char: str
    tile_index: int


def header_text(mode: InventoryAction) -> str:
    """The question shown on top of the inventory screen for ``mode``."""
    return _HEADERS[mode]


def backpack_items(world: World, component_type: type | None = None) -> list[InventoryEntry]:
    """Named items in the player's backpack, sorted by their assigned letter.

    With ``component_type`` only items holding that component are listed.
    """
    player = player_entity(world)
    wanted = (Named, Item, InBackpack) + ((component_type,) if component_type else ())
    entries = [
        InventoryEntry(entity, named.name, in_backpack.assigned_char, item.item_tile_index)
        for entity, (named, item, in_backpack, *_rest) in world.query(*wanted)
        if in_backpack.owner == player
    ]
    entries.sort(key=lambda entry: entry.assigned_char)
    return entries


def items_for_mode(world: World, mode: InventoryAction) -> list[InventoryEntry]:
    """The backpack items that can be chosen in ``mode``."""
    return backpack_items(world, _FILTERS[mode])


def handle_input(
    world: World,
    mode: InventoryAction,
    escape_pressed: bool = False,
    char: str | None = None,
) -> RunState:
    """React to one frame of input on the inventory screen.

    Escape closes the screen. A letter picks the backpack item assigned to it
    and records the player's intention; an unknown letter is reported in the
    game log and the screen stays open.
    """
    if escape_pressed:
        return RunState(RunMode.WAITING_PLAYER_INPUT)

    if char is None:
        return RunState.show_inventory(mode)

    player = player_entity(world)
    selected = next(
        (entry for entry in items_for_mode(world, mode) if entry.assigned_char == char),
        None,
    )
    if selected is None:
        world.single(GameLog)[1].add(f"No item available for letter {char}")
        return RunState.show_inventory(mode)

    item = selected.entity
    must_wait = False
    new_state = RunState(RunMode.DO_TICK)

    if mode is InventoryAction.EAT:
        world.insert(player, WantsToEat(item=item))
        must_wait = True
    elif mode is InventoryAction.DROP:
        world.insert(player, WantsToDrop(item=item))
        must_wait = True
    elif mode is InventoryAction.QUAFF:
        world.insert(player, WantsToDrink(item=item))
        must_wait = True
    elif mode is InventoryAction.INVOKE:
        world.insert(player, WantsToInvoke(item=item))
        new_state = RunState.mouse_targeting(SpecialViewMode.ZAP_TARGETING)
    elif mode is InventoryAction.REFILL_WHAT:
        world.insert(player, WantsToFuel(item=item, with_item=None))
        new_state = RunState.show_inventory(InventoryAction.REFILL_WITH)
    elif mode is InventoryAction.REFILL_WITH:
        world.get(player, WantsToFuel).with_item = item

    if must_wait:
        wait_after_action(world)
    return new_state