import pytest

from slide2048.components.game_state import GameMode, GameState
from slide2048.events.bus import EVENT_GAME_MODE_CHANGED, EventBus
from slide2048.utils.game_state import can_act, get_game_state, set_game_mode
from slide2048.world import create_world

ALLOWED = {
    (GameMode.IDLE, GameMode.ANIMATING),
    (GameMode.IDLE, GameMode.OVER),
    (GameMode.IDLE, GameMode.WON),
    (GameMode.ANIMATING, GameMode.IDLE),
    (GameMode.ANIMATING, GameMode.OVER),
    (GameMode.ANIMATING, GameMode.WON),
    (GameMode.OVER, GameMode.IDLE),
    (GameMode.WON, GameMode.IDLE),
    (GameMode.WON, GameMode.ANIMATING),
}


@pytest.mark.parametrize("start", list(GameMode))
@pytest.mark.parametrize("target", list(GameMode))
def test_transition_table(start, target):
    bus = EventBus()
    world = create_world(initial_mode=start)
    changes = []
    bus.subscribe(EVENT_GAME_MODE_CHANGED, lambda sender, **kw: changes.append(kw))

    accepted = set_game_mode(world, bus, target)

    if (start, target) in ALLOWED:
        assert accepted is True
        assert get_game_state(world).mode is target
        assert changes == [{"previous_mode": start, "new_mode": target}]
    else:
        assert accepted is False
        assert get_game_state(world).mode is start
        assert changes == []


@pytest.mark.parametrize("mode,expected", [
    (GameMode.IDLE, True),
    (GameMode.WON, True),
    (GameMode.ANIMATING, False),
    (GameMode.OVER, False),
])
def test_can_act_only_when_idle_or_won(mode, expected):
    world = create_world(initial_mode=mode)
    assert can_act(world) is expected


def test_game_state_created_on_demand():
    from esper import World

    world = World()
    state = get_game_state(world)
    assert isinstance(state, GameState)
    assert state.mode is GameMode.IDLE
    assert get_game_state(world) is state
