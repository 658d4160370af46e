import random
from typing import Mapping

from esper import World

from slide2048.components.board import Board
from slide2048.components.game_state import GameMode, GameState
from slide2048.components.leaderboard import Leaderboard
from slide2048.components.power_inventory import PowerInventory
from slide2048.components.score import ScoreState
from slide2048.constants import DEFAULT_POWER_USES, GRID_SIZE


def create_world(
    *,
    size: int = GRID_SIZE,
    initial_mode: GameMode = GameMode.IDLE,
    power_uses: Mapping[str, int] | None = None,
    rng: random.Random | None = None,
) -> World:
    world = World()
    setattr(world, "random", rng or random.Random())

    # Session-wide singleton resources.
    world.create_entity(
        GameState(mode=initial_mode),
        ScoreState(),
        PowerInventory.from_mapping(power_uses if power_uses is not None else DEFAULT_POWER_USES),
        Leaderboard(),
    )
    world.create_entity(Board(size=size))
    return world
