"""Post-action evaluation of win and game-over conditions."""
from __future__ import annotations

import logging

from esper import World

from slide2048.components.game_state import GameMode
from slide2048.constants import WIN_TILE
from slide2048.events.bus import (
    EVENT_ACTION_RESOLVED,
    EVENT_GAME_OVER,
    EVENT_GAME_WON,
    EVENT_TURN_COMPLETED,
    EventBus,
)
from slide2048.systems.move_ops import is_game_over
from slide2048.utils.game_state import get_game_state, set_game_mode
from slide2048.utils.resources import get_board, get_score_state

logger = logging.getLogger(__name__)

WIN_MESSAGE = "You win!"
GAME_OVER_MESSAGE = "Game over"


class GameFlowSystem:
    """Settles the game mode once a move or power-up has been applied."""

    def __init__(self, world: World, event_bus: EventBus, *, win_tile: int = WIN_TILE) -> None:
        self.world = world
        self.event_bus = event_bus
        self.win_tile = win_tile
        self.event_bus.subscribe(EVENT_ACTION_RESOLVED, self._on_action_resolved)

    def _on_action_resolved(self, sender, **payload) -> None:
        self.evaluate()
        self.event_bus.emit(
            EVENT_TURN_COMPLETED,
            action=payload.get("action"),
            events=list(payload.get("events") or []),
            spawned=list(payload.get("spawned") or []),
        )

    def evaluate(self) -> GameMode:
        """Apply the win / game-over / idle rules in priority order."""
        board = get_board(self.world)
        state = get_game_state(self.world)
        highest = board.highest_value_tile()
        top_tile = highest.value if highest is not None else 0

        if top_tile >= self.win_tile and not state.has_won:
            if set_game_mode(self.world, self.event_bus, GameMode.WON):
                state.has_won = True
                logger.info("Reached %d", top_tile)
                self._emit_outcome(EVENT_GAME_WON, WIN_MESSAGE)
        elif is_game_over(board):
            if set_game_mode(self.world, self.event_bus, GameMode.OVER):
                logger.info("No moves left")
                self._emit_outcome(EVENT_GAME_OVER, GAME_OVER_MESSAGE)
        else:
            set_game_mode(self.world, self.event_bus, GameMode.IDLE)
        return state.mode

    def _emit_outcome(self, name: str, message: str) -> None:
        score = get_score_state(self.world)
        self.event_bus.emit(name, message=message, score=score.score, top_tile=score.top_tile)
