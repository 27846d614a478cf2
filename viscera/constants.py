"""Game-wide constants: map geometry, HUD layout, timing and tuning values."""

import string

# Zone
MAP_WIDTH = 56
MAP_HEIGHT = 34
MAP_WIDTH_F32 = float(MAP_WIDTH)
MAP_HEIGHT_F32 = float(MAP_HEIGHT)
TILE_SIZE = 24
TILE_SIZE_F32 = float(TILE_SIZE)
BRAZIER_RADIUS = 10
MAX_BRAZIER_IN_ZONE = 3
MAX_RIVERS_IN_ZONE = 6

# UI
UI_BORDER = 8
UI_BORDER_F32 = float(UI_BORDER)

# HUD
HUD_WIDTH = MAP_WIDTH * TILE_SIZE
HUD_HEIGHT = 192 + UI_BORDER
HUD_BORDER = 4

HEADER_HEIGHT = 24
HEADER_LEFT_SPAN = 64

MAX_MESSAGES_IN_LOG = 4

# Inventory
INVENTORY_X = 64
INVENTORY_Y = 128
INVENTORY_SIZE = 512
INVENTORY_FOOTER_WIDTH = 186
INVENTORY_LEFT_SPAN = 20
INVENTORY_TOP_SPAN = 48
OPTION_TO_CHAR_MAP = string.ascii_lowercase + string.ascii_uppercase
ITEM_INVENTORY_LEFT_SPAN = 12
ITEM_INVENTORY_TOP_SPAN = 10
MAX_ITEMS_IN_BACKPACK = 10

WINDOW_WIDTH = (UI_BORDER * 2) + (MAP_WIDTH * TILE_SIZE)
WINDOW_HEIGHT = (UI_BORDER * 2) + (MAP_HEIGHT * TILE_SIZE) + HUD_HEIGHT
FONT_SIZE = 32.0
LETTER_SIZE = 15.0

# Timing
SECONDS_TO_WAIT = 0.1
SLOW = 1
NORMAL = 2
FAST = 3
MAX_ACTION_SPEED = 4

# Spawning
MAX_MONSTERS_ON_ROOM_START = 5
MAX_ITEMS_ON_ROOM_START = 5
MAX_SPAWN_TENTANTIVES = 10

# Player
BASE_VIEW_RADIUS = 6
MAX_STAMINA_HEAL_TICK_COUNTER = 4
MAX_HUNGER_TICK_COUNTER = 151
MAX_THIRST_TICK_COUNTER = 151
PLAYER_SMELL_RADIUS = 16.0

# Drunken walk
DRUNKEN_WALK_LIFE_MAX = 50
DRUNKEN_WALK_MAX_ITERATIONS = 50

# Items
STARTING_ROT_COUNTER = 100
LANTERN_RADIUS = 6
STARTING_FUEL = 400
STARTING_WET_COUNTER = 50

# Monsters
BASE_MONSTER_VIEW_RADIUS = 8
MAX_HIDDEN_TURNS = 9

# Saving throws
AUTOFAIL_SAVING_THROW = 999


def option_char(index: int) -> str:
    """Return the letter assigned to the inventory slot at ``index``."""
    if not 0 <= index < len(OPTION_TO_CHAR_MAP):
        raise IndexError(f"no option letter for slot {index}")
    return OPTION_TO_CHAR_MAP[index]