"""Starts and restarts games."""
from __future__ import annotations

import logging
from typing import List

from esper import World

from slide2048.components.board import Board
from slide2048.components.game_state import GameMode
from slide2048.components.tile import Tile
from slide2048.constants import STARTING_TILES
from slide2048.events.bus import (
    EVENT_BOARD_CHANGED,
    EVENT_GAME_STARTED,
    EVENT_NEW_GAME_REQUEST,
    EventBus,
)
from slide2048.factories.tiles import spawn_tile
from slide2048.systems.move_system import emit_tile_spawned
from slide2048.utils.game_state import get_game_state, set_game_mode
from slide2048.utils.resources import (
    get_board,
    get_power_inventory,
    get_score_state,
    replace_board,
)

logger = logging.getLogger(__name__)


class GameSetupSystem:
    """Builds a fresh board, resets per-game resources and deals the opening tiles."""

    def __init__(self, world: World, event_bus: EventBus, *, starting_tiles: int = STARTING_TILES) -> None:
        self.world = world
        self.event_bus = event_bus
        self.starting_tiles = starting_tiles
        self.event_bus.subscribe(EVENT_NEW_GAME_REQUEST, self._on_new_game_request)

    def _on_new_game_request(self, sender, **payload) -> None:
        self.start_new_game()

    def start_new_game(self) -> List[int]:
        old_board = get_board(self.world)
        for entity, _ in list(self.world.get_component(Tile)):
            self.world.delete_entity(entity, immediate=True)
        board = Board(size=old_board.size)
        replace_board(self.world, board)

        get_power_inventory(self.world).reset()
        get_score_state(self.world).score = 0
        state = get_game_state(self.world)
        state.has_won = False
        set_game_mode(self.world, self.event_bus, GameMode.IDLE)

        spawned: List[int] = []
        for _ in range(self.starting_tiles):
            highest = board.highest_value_tile()
            tile = spawn_tile(self.world, board, highest.value if highest else 0)
            if tile is None:
                break
            spawned.append(tile.id)
            emit_tile_spawned(self.event_bus, tile, reason="new_game")
        self.event_bus.emit(EVENT_BOARD_CHANGED, reason="new_game")
        logger.info("New %dx%d game with %d tiles", board.size, board.size, len(spawned))
        self.event_bus.emit(EVENT_GAME_STARTED, spawned=list(spawned))
        return spawned
