"""Run states of the game loop and the engine state holding the world."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from viscera.components import GameLog, InBackpack, Player
from viscera.ecs import World


class InventoryAction(Enum):
    EAT = auto()
    DROP = auto()
    INVOKE = auto()
    QUAFF = auto()
    REFILL_WHAT = auto()
    REFILL_WITH = auto()


class SpecialViewMode(Enum):
    ZAP_TARGETING = auto()
    SMELL = auto()


class RunMode(Enum):
    BEFORE_TICK = auto()
    WAITING_PLAYER_INPUT = auto()
    DO_TICK = auto()
    GAME_OVER = auto()
    SHOW_INVENTORY = auto()
    MOUSE_TARGETING = auto()
    DRAW_PARTICLES = auto()
    GO_TO_NEXT_ZONE = auto()


@dataclass(frozen=True)
class RunState:
    """What the game loop is doing; inventory and targeting carry their sub-mode."""

    mode: RunMode
    inventory_action: InventoryAction | None = None
    view_mode: SpecialViewMode | None = None

    def __post_init__(self) -> None:
        needs_action = self.mode is RunMode.SHOW_INVENTORY
        needs_view = self.mode is RunMode.MOUSE_TARGETING
        if needs_action != (self.inventory_action is not None):
            raise ValueError(f"{self.mode.name} and inventory action do not match")
        if needs_view != (self.view_mode is not None):
            raise ValueError(f"{self.mode.name} and view mode do not match")

    @classmethod
    def show_inventory(cls, action: InventoryAction) -> RunState:
        return cls(RunMode.SHOW_INVENTORY, inventory_action=action)

    @classmethod
    def mouse_targeting(cls, view_mode: SpecialViewMode) -> RunState:
        return cls(RunMode.MOUSE_TARGETING, view_mode=view_mode)


@dataclass
class EngineState:
    world: World
    run_state: RunState

    def entities_to_delete_on_zone_change(self) -> list[int]:
        """Everything except the player, backpack items and the game log."""
        player, _ = self.world.single(Player)
        return [
            entity
            for entity in self.world.entities()
            if entity != player
            and not self.world.has(entity, InBackpack)
            and not self.world.has(entity, GameLog)
        ]