import pytest

from slide2048.components.power_inventory import PowerKind
from slide2048.events.bus import (
    EVENT_INPUT_TOKEN,
    EVENT_MOVE_REQUEST,
    EVENT_NEW_GAME_REQUEST,
    EVENT_POWER_REQUEST,
    EventBus,
)
from slide2048.systems.input_system import InputSystem
from slide2048.systems.move_ops import Direction


def _record_requests(bus):
    received = []
    for name in (EVENT_MOVE_REQUEST, EVENT_POWER_REQUEST, EVENT_NEW_GAME_REQUEST):
        bus.subscribe(name, lambda sender, _name=name, **kw: received.append((_name, kw)))
    return received


@pytest.mark.parametrize("token,direction", [
    ("up", Direction.UP),
    ("Left", Direction.LEFT),
    ("ArrowDown", Direction.DOWN),
    (" arrowright ", Direction.RIGHT),
])
def test_direction_tokens_become_move_requests(token, direction):
    bus = EventBus()
    InputSystem(bus)
    received = _record_requests(bus)
    bus.emit(EVENT_INPUT_TOKEN, token=token)
    assert received == [(EVENT_MOVE_REQUEST, {"direction": direction})]


def test_power_and_restart_tokens():
    bus = EventBus()
    system = InputSystem(bus)
    received = _record_requests(bus)
    assert system.handle_token("bomb") is True
    assert system.handle_token("SHUFFLE") is True
    assert system.handle_token("restart") is True
    assert received == [
        (EVENT_POWER_REQUEST, {"kind": PowerKind.BOMB}),
        (EVENT_POWER_REQUEST, {"kind": PowerKind.SHUFFLE}),
        (EVENT_NEW_GAME_REQUEST, {}),
    ]


def test_unknown_tokens_are_ignored():
    bus = EventBus()
    system = InputSystem(bus)
    received = _record_requests(bus)
    assert system.handle_token("bogus") is False
    assert system.handle_token(None) is False
    assert received == []
