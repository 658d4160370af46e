from __future__ import annotations

import logging

from esper import World

from slide2048.components.game_state import GameMode, GameState
from slide2048.events.bus import EVENT_GAME_MODE_CHANGED, EventBus

logger = logging.getLogger(__name__)

ALLOWED_TRANSITIONS: dict[GameMode, frozenset[GameMode]] = {
    GameMode.IDLE: frozenset({GameMode.ANIMATING, GameMode.OVER, GameMode.WON}),
    GameMode.ANIMATING: frozenset({GameMode.IDLE, GameMode.OVER, GameMode.WON}),
    GameMode.OVER: frozenset({GameMode.IDLE}),
    GameMode.WON: frozenset({GameMode.IDLE, GameMode.ANIMATING}),
}

ACTIONABLE_MODES = frozenset({GameMode.IDLE, GameMode.WON})


def get_game_state(world: World) -> GameState:
    for _, state in world.get_component(GameState):
        return state
    # No existing GameState component; create a new one.
    state = GameState()
    world.create_entity(state)
    return state


def can_transition(current: GameMode, target: GameMode) -> bool:
    return target in ALLOWED_TRANSITIONS.get(current, frozenset())


def set_game_mode(world: World, event_bus: EventBus, mode: GameMode) -> bool:
    """Move the game to ``mode`` when the transition table allows it.

    Requests for the current mode or for a transition missing from the table
    leave the state untouched and return False; no event is emitted for them.
    """
    state = get_game_state(world)
    previous_mode = state.mode
    if previous_mode == mode:
        return False
    if not can_transition(previous_mode, mode):
        logger.debug("Ignoring transition %s -> %s", previous_mode.value, mode.value)
        return False
    state.mode = mode
    event_bus.emit(
        EVENT_GAME_MODE_CHANGED,
        previous_mode=previous_mode,
        new_mode=mode,
    )
    return True


def can_act(world: World) -> bool:
    return get_game_state(world).mode in ACTIONABLE_MODES
