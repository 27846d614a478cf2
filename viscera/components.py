"""Component types attached to entities in the world."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any


# --- Common -----------------------------------------------------------------


@dataclass
class Rect:
    """Axis-aligned rectangle; edges count as part of the rectangle."""

    x: float
    y: float
    w: float
    h: float

    @property
    def left(self) -> float:
        return self.x

    @property
    def right(self) -> float:
        return self.x + self.w

    @property
    def top(self) -> float:
        return self.y

    @property
    def bottom(self) -> float:
        return self.y + self.h

    def overlaps(self, other: Rect) -> bool:
        return (
            self.left <= other.right
            and self.right >= other.left
            and self.top <= other.bottom
            and self.bottom >= other.top
        )

    def center(self) -> tuple[float, float]:
        return (self.x + self.w * 0.5, self.y + self.h * 0.5)

    def center_int(self) -> tuple[int, int]:
        cx, cy = self.center()
        return (int(cx), int(cy))


@dataclass
class Position:
    x: int
    y: int


@dataclass
class Renderable:
    texture_name: Any
    texture_region: Rect
    z_index: int


@dataclass
class Viewshed:
    range: int
    visible_tiles: list[tuple[int, int]] = field(default_factory=list)
    must_recalculate: bool = True


@dataclass
class Named:
    name: str


@dataclass
class BlocksTile:
    pass


@dataclass
class ProduceCorpse:
    pass


@dataclass
class GameLog:
    entries: list[str] = field(default_factory=list)

    def add(self, message: str) -> None:
        self.entries.append(message)

    def latest(self, count: int) -> list[str]:
        """The last ``count`` messages, newest first."""
        if count < 0:
            raise ValueError("count must not be negative")
        return self.entries[::-1][:count]


@dataclass
class WaitingToAct:
    tick_countdown: int


@dataclass
class MyTurn:
    pass


class SmellIntensity(Enum):
    NONE = auto()
    FAINT = auto()
    STRONG = auto()


@dataclass
class Smellable:
    smell_log: str
    intensity: SmellIntensity


@dataclass
class CanSmell:
    intensity: SmellIntensity
    radius: float


@dataclass
class Wet:
    tick_countdown: int


# --- Combat -----------------------------------------------------------------


@dataclass
class CombatStats:
    current_stamina: int
    max_stamina: int
    current_toughness: int
    max_toughness: int
    current_dexterity: int
    max_dexterity: int
    base_armor: int
    unarmed_attack_dice: int
    speed: int


@dataclass
class SufferingDamage:
    damage_received: int


@dataclass
class WantsToMelee:
    target: int


@dataclass
class WantsToZap:
    target: tuple[int, int]


@dataclass
class InflictsDamage:
    number_of_dices: int
    dice_size: int


@dataclass
class CanHide:
    cooldown: int


@dataclass
class IsHidden:
    hidden_counter: int


# --- Health -----------------------------------------------------------------


@dataclass
class CanAutomaticallyHeal:
    tick_counter: int


@dataclass
class Hunger:
    tick_counter: int
    current_status: Any


@dataclass
class Thirst:
    tick_counter: int
    current_status: Any


# --- Items ------------------------------------------------------------------


@dataclass
class Item:
    item_tile_index: int


@dataclass
class Edible:
    nutrition_dice_number: int
    nutrition_dice_size: int


@dataclass
class Quaffable:
    thirst_dice_number: int
    thirst_dice_size: int


@dataclass
class InBackpack:
    owner: int
    assigned_char: str


class InvokablesEnum(Enum):
    LIGHTNING_WAND = auto()


@dataclass
class Invokable:
    invokable_type: InvokablesEnum


@dataclass
class Perishable:
    rot_counter: int


@dataclass
class Rotten:
    pass


@dataclass
class ProduceLight:
    radius: int


@dataclass
class MustBeFueled:
    fuel_counter: int


@dataclass
class Refiller:
    pass


# --- Actors -----------------------------------------------------------------


@dataclass
class Monster:
    pass


@dataclass
class Aquatic:
    pass


@dataclass
class Player:
    pass


# --- Intentions -------------------------------------------------------------


@dataclass
class WantsItem:
    item: int


@dataclass
class WantsToEat:
    item: int


@dataclass
class WantsToDrop:
    item: int


@dataclass
class WantsToDrink:
    item: int


@dataclass
class WantsToInvoke:
    item: int


@dataclass
class WantsToFuel:
    item: int
    with_item: int | None = None


@dataclass
class WantsToSmell:
    target: tuple[int, int]