from __future__ import annotations

import json
import logging
import time
from typing import Callable, List

from esper import World

from slide2048.components.leaderboard import LeaderboardEntry
from slide2048.constants import LEADERBOARD_SIZE, STORAGE_KEY_LEADERBOARD
from slide2048.events.bus import (
    EVENT_GAME_OVER,
    EVENT_GAME_WON,
    EVENT_LEADERBOARD_UPDATED,
    EventBus,
)
from slide2048.utils.key_value_store import KeyValueStore
from slide2048.utils.resources import get_leaderboard, get_score_state

logger = logging.getLogger(__name__)


def rank_entries(entries: List[LeaderboardEntry], capacity: int = LEADERBOARD_SIZE) -> List[LeaderboardEntry]:
    """Highest (score, top_tile) first, trimmed to ``capacity``."""
    ranked = sorted(entries, key=lambda entry: entry.rank_key, reverse=True)
    return ranked[:capacity]


class LeaderboardSystem:
    """Records finished runs into a ranked, persisted top-N list."""

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        store: KeyValueStore,
        *,
        clock: Callable[[], float] | None = None,
        capacity: int = LEADERBOARD_SIZE,
    ) -> None:
        self.world = world
        self.event_bus = event_bus
        self.store = store
        self._clock = clock or time.time
        self._capacity = capacity
        get_leaderboard(self.world).entries = self.load_entries()
        self.event_bus.subscribe(EVENT_GAME_WON, self._on_game_won)
        self.event_bus.subscribe(EVENT_GAME_OVER, self._on_game_over)

    @property
    def entries(self) -> List[LeaderboardEntry]:
        return list(get_leaderboard(self.world).entries)

    def load_entries(self) -> List[LeaderboardEntry]:
        raw = self.store.get(STORAGE_KEY_LEADERBOARD)
        if raw is None:
            return []
        try:
            payload = json.loads(raw)
            if not isinstance(payload, list):
                raise ValueError("leaderboard payload is not a list")
            entries = [LeaderboardEntry.from_dict(item) for item in payload]
        except (json.JSONDecodeError, KeyError, TypeError, ValueError, OverflowError) as exc:
            logger.warning("Discarding corrupt leaderboard data: %s", exc)
            return []
        return rank_entries(entries, self._capacity)

    def save_entries(self, entries: List[LeaderboardEntry]) -> None:
        self.store.set(
            STORAGE_KEY_LEADERBOARD,
            json.dumps([entry.to_dict() for entry in entries]),
        )

    def record_run(self, label: str) -> LeaderboardEntry:
        state = get_score_state(self.world)
        entry = LeaderboardEntry(
            score=state.score,
            top_tile=state.top_tile,
            label=label,
            timestamp=self._clock(),
        )
        entries = rank_entries(self.load_entries() + [entry], self._capacity)
        self.save_entries(entries)
        get_leaderboard(self.world).entries = entries
        self.event_bus.emit(EVENT_LEADERBOARD_UPDATED, entries=list(entries))
        return entry

    def clear(self) -> None:
        self.store.remove(STORAGE_KEY_LEADERBOARD)
        get_leaderboard(self.world).entries = []
        self.event_bus.emit(EVENT_LEADERBOARD_UPDATED, entries=[])

    # Event handlers -----------------------------------------------------

    def _on_game_won(self, sender, **payload) -> None:
        self.record_run("win")

    def _on_game_over(self, sender, **payload) -> None:
        self.record_run("over")
