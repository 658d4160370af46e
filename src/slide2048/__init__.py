"""Rule engine for a 2048-style sliding tile puzzle with wild and doubler tiles."""
from __future__ import annotations

from slide2048.components.game_state import GameMode
from slide2048.components.power_inventory import PowerKind
from slide2048.components.tile import Tile, TileVariant
from slide2048.session import GameSession
from slide2048.systems.move_ops import Direction

__all__ = [
    "Direction",
    "GameMode",
    "GameSession",
    "PowerKind",
    "Tile",
    "TileVariant",
]
