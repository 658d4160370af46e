from __future__ import annotations

import logging
from typing import List, Tuple

from esper import World

from slide2048.components.game_state import GameMode
from slide2048.components.power_inventory import PowerKind
from slide2048.components.tile import Tile
from slide2048.events.bus import (
    EVENT_ACTION_REJECTED,
    EVENT_ACTION_RESOLVED,
    EVENT_BOARD_CHANGED,
    EVENT_POWER_REQUEST,
    EVENT_POWER_USED,
    EVENT_TILES_REMOVED,
    EVENT_TILES_SHUFFLED,
    EventBus,
)
from slide2048.systems.move_ops import TileEvent
from slide2048.systems.move_system import emit_tile_spawned
from slide2048.systems.power_ops import bomb_highest, shuffle_tiles, spawn_wild
from slide2048.utils.game_state import can_act, set_game_mode
from slide2048.utils.resources import get_board, get_power_inventory

logger = logging.getLogger(__name__)


class PowerSystem:
    """Applies power-ups (wild spawn, bomb, shuffle) while uses remain."""

    def __init__(self, world: World, event_bus: EventBus) -> None:
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_POWER_REQUEST, self._on_power_request)

    def _on_power_request(self, sender, **payload) -> None:
        kind = payload.get("kind")
        if not isinstance(kind, PowerKind):
            return
        self.use(kind)

    def use(self, kind: PowerKind) -> bool:
        """Trigger ``kind``; returns True only when the power took effect."""
        inventory = get_power_inventory(self.world)
        if not can_act(self.world):
            self.event_bus.emit(EVENT_ACTION_REJECTED, action=kind.value, reason="busy")
            return False
        if not inventory.can_use(kind):
            logger.debug("No %s uses left", kind.value)
            self.event_bus.emit(EVENT_ACTION_REJECTED, action=kind.value, reason="exhausted")
            return False

        if kind is PowerKind.WILD:
            applied, events, spawned = self._spawn_wild()
        elif kind is PowerKind.BOMB:
            applied, events, spawned = self._bomb()
        else:
            applied, events, spawned = self._shuffle()
        if not applied:
            logger.debug("Power %s had no effect", kind.value)
            return False

        set_game_mode(self.world, self.event_bus, GameMode.ANIMATING)
        inventory.consume(kind)
        if kind is PowerKind.WILD:
            for tile in spawned:
                emit_tile_spawned(self.event_bus, tile, reason="power:wild")
        elif kind is PowerKind.BOMB:
            self.event_bus.emit(
                EVENT_TILES_REMOVED,
                tile_ids=[event.tile_id for event in events],
                positions=[event.origin for event in events],
                reason="bomb",
            )
        elif kind is PowerKind.SHUFFLE:
            self.event_bus.emit(EVENT_TILES_SHUFFLED, events=list(events))
        self.event_bus.emit(EVENT_BOARD_CHANGED, reason=f"power:{kind.value}")
        self.event_bus.emit(
            EVENT_POWER_USED,
            kind=kind,
            remaining=inventory.remaining(kind),
            affected=[event.origin for event in events],
        )
        self.event_bus.emit(
            EVENT_ACTION_RESOLVED,
            action=kind.value,
            events=list(events),
            spawned=[tile.id for tile in spawned],
        )
        return True

    def _spawn_wild(self) -> Tuple[bool, List[TileEvent], List[Tile]]:
        board = get_board(self.world)
        highest = board.highest_value_tile()
        tile = spawn_wild(self.world, board, highest.value if highest else 0)
        if tile is None:
            return False, [], []
        return True, [], [tile]

    def _bomb(self) -> Tuple[bool, List[TileEvent], List[Tile]]:
        events = bomb_highest(self.world, get_board(self.world))
        return bool(events), events, []

    def _shuffle(self) -> Tuple[bool, List[TileEvent], List[Tile]]:
        events = shuffle_tiles(get_board(self.world), rng=self.world.random)
        return bool(events), events, []
