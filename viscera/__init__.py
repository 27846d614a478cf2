"""Turn-based roguelike game core: entity world, zone generators, player actions and inventory."""

__version__ = "0.1.0"