from __future__ import annotations

from slide2048.components.power_inventory import PowerKind
from slide2048.events.bus import (
    EVENT_INPUT_TOKEN,
    EVENT_MOVE_REQUEST,
    EVENT_NEW_GAME_REQUEST,
    EVENT_POWER_REQUEST,
    EventBus,
)
from slide2048.systems.move_ops import Direction

DIRECTION_TOKENS = {
    "up": Direction.UP,
    "down": Direction.DOWN,
    "left": Direction.LEFT,
    "right": Direction.RIGHT,
    # Browser key names
    "arrowup": Direction.UP,
    "arrowdown": Direction.DOWN,
    "arrowleft": Direction.LEFT,
    "arrowright": Direction.RIGHT,
}

POWER_TOKENS = {kind.value: kind for kind in PowerKind}

RESTART_TOKENS = frozenset({"restart", "new_game"})


class InputSystem:
    """Turns logical input tokens into engine requests; unknown tokens are dropped."""

    def __init__(self, event_bus: EventBus):
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_INPUT_TOKEN, self.on_input_token)

    def on_input_token(self, sender, **kwargs):
        self.handle_token(kwargs.get('token'))

    def handle_token(self, token) -> bool:
        if not isinstance(token, str):
            return False
        key = token.strip().lower()
        direction = DIRECTION_TOKENS.get(key)
        if direction is not None:
            self.event_bus.emit(EVENT_MOVE_REQUEST, direction=direction)
            return True
        kind = POWER_TOKENS.get(key)
        if kind is not None:
            self.event_bus.emit(EVENT_POWER_REQUEST, kind=kind)
            return True
        if key in RESTART_TOKENS:
            self.event_bus.emit(EVENT_NEW_GAME_REQUEST)
            return True
        return False
