"""Builds the renderer-facing view of the session after every settled action."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from esper import World

from slide2048.components.game_state import GameMode
from slide2048.components.tile import TileVariant
from slide2048.events.bus import (
    EVENT_GAME_STARTED,
    EVENT_SNAPSHOT,
    EVENT_TURN_COMPLETED,
    EventBus,
)
from slide2048.systems.move_ops import TileEvent
from slide2048.utils.game_state import get_game_state
from slide2048.utils.resources import get_board, get_power_inventory, get_score_state


@dataclass(frozen=True, slots=True)
class TileView:
    id: int
    value: int
    variant: TileVariant
    row: int
    col: int


@dataclass(frozen=True, slots=True)
class GameSnapshot:
    tiles: List[TileView]
    events: List[TileEvent]
    spawned: List[int]
    score: int
    best: int
    top_tile: int
    mode: GameMode
    powers: Dict[str, int] = field(default_factory=dict)
    action: Optional[str] = None


def build_snapshot(
    world: World,
    *,
    action: Optional[str] = None,
    events: List[TileEvent] | None = None,
    spawned: List[int] | None = None,
) -> GameSnapshot:
    board = get_board(world)
    score = get_score_state(world)
    return GameSnapshot(
        tiles=[
            TileView(id=tile.id, value=tile.value, variant=tile.variant, row=tile.row, col=tile.col)
            for tile in board.tiles()
        ],
        events=list(events or []),
        spawned=list(spawned or []),
        score=score.score,
        best=score.best,
        top_tile=score.top_tile,
        mode=get_game_state(world).mode,
        powers=get_power_inventory(world).as_dict(),
        action=action,
    )


class SnapshotSystem:
    """Publishes a GameSnapshot once a game starts or a turn settles."""

    def __init__(self, world: World, event_bus: EventBus) -> None:
        self.world = world
        self.event_bus = event_bus
        self.last_snapshot: Optional[GameSnapshot] = None
        self.event_bus.subscribe(EVENT_GAME_STARTED, self._on_game_started)
        self.event_bus.subscribe(EVENT_TURN_COMPLETED, self._on_turn_completed)

    def _on_game_started(self, sender, **payload) -> None:
        self.publish(action="new_game", spawned=payload.get("spawned"))

    def _on_turn_completed(self, sender, **payload) -> None:
        self.publish(
            action=payload.get("action"),
            events=payload.get("events"),
            spawned=payload.get("spawned"),
        )

    def publish(self, **kwargs) -> GameSnapshot:
        snapshot = build_snapshot(self.world, **kwargs)
        self.last_snapshot = snapshot
        self.event_bus.emit(EVENT_SNAPSHOT, snapshot=snapshot)
        return snapshot
