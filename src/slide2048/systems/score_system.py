from __future__ import annotations

import logging
import math

from esper import World

from slide2048.constants import STORAGE_KEY_BEST
from slide2048.events.bus import (
    EVENT_BOARD_CHANGED,
    EVENT_GAME_STARTED,
    EVENT_SCORE_CHANGED,
    EVENT_TILES_MOVED,
    EventBus,
)
from slide2048.utils.key_value_store import KeyValueStore
from slide2048.utils.resources import get_board, get_score_state

logger = logging.getLogger(__name__)


def parse_stored_best(raw: str | None) -> int:
    """Read a persisted best score; anything unusable counts as no best yet."""
    if raw is None:
        return 0
    try:
        value = float(raw)
    except (TypeError, ValueError):
        logger.warning("Ignoring unreadable best score %r", raw)
        return 0
    if not math.isfinite(value) or value < 0:
        logger.warning("Ignoring out-of-range best score %r", raw)
        return 0
    return int(value)


class ScoreSystem:
    """Accumulates merge gains, tracks the top tile and persists the best score."""

    def __init__(self, world: World, event_bus: EventBus, store: KeyValueStore) -> None:
        self.world = world
        self.event_bus = event_bus
        self.store = store
        state = get_score_state(self.world)
        state.best = max(state.best, parse_stored_best(self.store.get(STORAGE_KEY_BEST)))
        self.event_bus.subscribe(EVENT_TILES_MOVED, self._on_tiles_moved)
        self.event_bus.subscribe(EVENT_BOARD_CHANGED, self._on_board_changed)
        self.event_bus.subscribe(EVENT_GAME_STARTED, self._on_game_started)

    # Event handlers -----------------------------------------------------

    def _on_tiles_moved(self, sender, **payload) -> None:
        gained = payload.get("gained") or 0
        if gained > 0:
            self.add_gain(int(gained))

    def _on_board_changed(self, sender, **payload) -> None:
        self.refresh_top_tile()

    def _on_game_started(self, sender, **payload) -> None:
        self.refresh_top_tile()
        self._emit_changed(delta=0)

    # Bookkeeping --------------------------------------------------------

    def add_gain(self, gained: int) -> None:
        state = get_score_state(self.world)
        state.score += gained
        self.update_best()
        self._emit_changed(delta=gained)

    def refresh_top_tile(self) -> int:
        state = get_score_state(self.world)
        highest = get_board(self.world).highest_value_tile()
        state.top_tile = highest.value if highest is not None else 0
        return state.top_tile

    def update_best(self) -> bool:
        state = get_score_state(self.world)
        if state.score <= state.best:
            return False
        state.best = state.score
        self.store.set(STORAGE_KEY_BEST, str(state.best))
        return True

    def _emit_changed(self, *, delta: int) -> None:
        state = get_score_state(self.world)
        self.event_bus.emit(
            EVENT_SCORE_CHANGED,
            score=state.score,
            best=state.best,
            top_tile=state.top_tile,
            delta=delta,
        )
