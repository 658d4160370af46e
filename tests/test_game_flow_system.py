from slide2048.components.game_state import GameMode
from slide2048.events.bus import (
    EVENT_ACTION_RESOLVED,
    EVENT_GAME_OVER,
    EVENT_GAME_WON,
    EVENT_TURN_COMPLETED,
    EventBus,
)
from slide2048.systems.game_flow_system import GAME_OVER_MESSAGE, WIN_MESSAGE, GameFlowSystem
from slide2048.utils.game_state import get_game_state, set_game_mode
from slide2048.utils.resources import get_board
from slide2048.world import create_world
from tests.helpers import place_rows

NO_MERGE_ROWS = [
    [2, 4, 2, 4],
    [4, 2, 4, 2],
    [2, 4, 2, 4],
    [4, 2, 4, 2],
]


def _setup(rows, win_tile=2048):
    bus = EventBus()
    world = create_world()
    place_rows(world, get_board(world), rows)
    system = GameFlowSystem(world, bus, win_tile=win_tile)
    set_game_mode(world, bus, GameMode.ANIMATING)
    return bus, world, system


def _capture(bus, name):
    captured = []
    bus.subscribe(name, lambda sender, **kw: captured.append(kw))
    return captured


def test_playable_board_settles_to_idle():
    bus, world, system = _setup([[2, 4]])
    assert system.evaluate() == GameMode.IDLE


def test_reaching_win_tile_wins_once():
    bus, world, system = _setup([[16, 2]], win_tile=16)
    won = _capture(bus, EVENT_GAME_WON)

    assert system.evaluate() == GameMode.WON
    assert get_game_state(world).has_won is True
    assert won and won[0]["message"] == WIN_MESSAGE

    set_game_mode(world, bus, GameMode.ANIMATING)
    assert system.evaluate() == GameMode.IDLE
    assert len(won) == 1


def test_stuck_board_ends_the_game():
    bus, world, system = _setup(NO_MERGE_ROWS)
    over = _capture(bus, EVENT_GAME_OVER)
    assert system.evaluate() == GameMode.OVER
    assert over == [{"message": GAME_OVER_MESSAGE, "score": 0, "top_tile": 0}]


def test_win_takes_priority_over_game_over():
    rows = [list(row) for row in NO_MERGE_ROWS]
    rows[0][0] = 32
    bus, world, system = _setup(rows, win_tile=32)
    over = _capture(bus, EVENT_GAME_OVER)
    assert system.evaluate() == GameMode.WON
    assert over == []


def test_action_resolved_evaluates_then_completes_turn():
    bus, world, _ = _setup([[2, 4]])
    completed = _capture(bus, EVENT_TURN_COMPLETED)
    bus.emit(EVENT_ACTION_RESOLVED, action="move", events=[], spawned=[5])
    assert get_game_state(world).mode == GameMode.IDLE
    assert completed == [{"action": "move", "events": [], "spawned": [5]}]
