from __future__ import annotations

import logging
from typing import List, Optional

from esper import World

from slide2048.components.game_state import GameMode
from slide2048.components.tile import Tile
from slide2048.events.bus import (
    EVENT_ACTION_REJECTED,
    EVENT_ACTION_RESOLVED,
    EVENT_BOARD_CHANGED,
    EVENT_MERGE_CELEBRATED,
    EVENT_MOVE_REQUEST,
    EVENT_TILE_SPAWNED,
    EVENT_TILES_MOVED,
    EventBus,
)
from slide2048.factories.tiles import spawn_tile
from slide2048.systems.move_ops import Direction, MoveResult, apply_move
from slide2048.utils.game_state import can_act, get_game_state, set_game_mode
from slide2048.utils.resources import get_board

logger = logging.getLogger(__name__)


def emit_tile_spawned(event_bus: EventBus, tile: Tile, reason: str) -> None:
    event_bus.emit(
        EVENT_TILE_SPAWNED,
        tile_id=tile.id,
        row=tile.row,
        col=tile.col,
        value=tile.value,
        variant=tile.variant,
        reason=reason,
    )


class MoveSystem:
    """Resolves slide requests: slide, score, spawn, then hand over to game flow."""

    def __init__(self, world: World, event_bus: EventBus) -> None:
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_MOVE_REQUEST, self._on_move_request)

    def _on_move_request(self, sender, **payload) -> None:
        direction = payload.get("direction")
        if not isinstance(direction, Direction):
            return
        self.move(direction)

    def move(self, direction: Direction) -> Optional[MoveResult]:
        """Slide the board; returns None when the current mode forbids acting."""
        if not can_act(self.world):
            logger.debug("Move %s rejected in mode %s", direction.name, get_game_state(self.world).mode.value)
            self.event_bus.emit(EVENT_ACTION_REJECTED, action="move", reason="busy")
            return None
        board = get_board(self.world)
        result = apply_move(self.world, board, direction)
        if not result.moved:
            logger.debug("Move %s changed nothing", direction.name)
            return result

        set_game_mode(self.world, self.event_bus, GameMode.ANIMATING)
        self.event_bus.emit(
            EVENT_TILES_MOVED,
            direction=direction,
            events=list(result.events),
            gained=result.gained,
        )
        for tile_id in result.celebrated:
            tile = self.world.component_for_entity(tile_id, Tile)
            self.event_bus.emit(
                EVENT_MERGE_CELEBRATED,
                tile_id=tile.id,
                value=tile.value,
                row=tile.row,
                col=tile.col,
            )
        self.event_bus.emit(EVENT_BOARD_CHANGED, reason="move")

        spawned: List[int] = []
        highest = board.highest_value_tile()
        tile = spawn_tile(self.world, board, highest.value if highest else 0)
        if tile is not None:
            spawned.append(tile.id)
            emit_tile_spawned(self.event_bus, tile, reason="move")
            self.event_bus.emit(EVENT_BOARD_CHANGED, reason="spawn")

        self.event_bus.emit(
            EVENT_ACTION_RESOLVED,
            action="move",
            events=list(result.events),
            spawned=spawned,
        )
        return result
