"""Host-facing game session.

A ``GameSession`` owns one world, one event bus and the systems wired onto
it. Hosts feed it input tokens (or call the typed methods directly) and
either read ``snapshot()`` or subscribe to ``EVENT_SNAPSHOT`` on ``bus``.
"""
from __future__ import annotations

import random
from typing import Callable, List, Mapping, Optional

from slide2048.components.board import Board
from slide2048.components.game_state import GameMode
from slide2048.components.leaderboard import LeaderboardEntry
from slide2048.components.power_inventory import PowerKind
from slide2048.constants import GRID_SIZE, STARTING_TILES, WIN_TILE
from slide2048.events.bus import EVENT_INPUT_TOKEN, EventBus
from slide2048.systems.game_flow_system import GameFlowSystem
from slide2048.systems.game_setup_system import GameSetupSystem
from slide2048.systems.input_system import DIRECTION_TOKENS, POWER_TOKENS, InputSystem
from slide2048.systems.leaderboard_system import LeaderboardSystem
from slide2048.systems.move_ops import Direction, MoveResult
from slide2048.systems.move_system import MoveSystem
from slide2048.systems.power_system import PowerSystem
from slide2048.systems.score_system import ScoreSystem
from slide2048.systems.snapshot_system import GameSnapshot, SnapshotSystem, build_snapshot
from slide2048.utils.game_state import can_act, get_game_state
from slide2048.utils.key_value_store import KeyValueStore, MemoryStore
from slide2048.utils.resources import get_board, get_power_inventory, get_score_state
from slide2048.world import create_world


class GameSession:
    def __init__(
        self,
        *,
        store: KeyValueStore | None = None,
        rng: random.Random | None = None,
        clock: Callable[[], float] | None = None,
        size: int = GRID_SIZE,
        power_uses: Mapping[str, int] | None = None,
        win_tile: int = WIN_TILE,
        starting_tiles: int = STARTING_TILES,
        event_bus: EventBus | None = None,
        auto_start: bool = True,
    ) -> None:
        self.bus = event_bus or EventBus()
        self.store = store if store is not None else MemoryStore()
        self.world = create_world(size=size, power_uses=power_uses, rng=rng)

        # Bookkeeping systems
        self.score_system = ScoreSystem(self.world, self.bus, self.store)
        self.leaderboard_system = LeaderboardSystem(self.world, self.bus, self.store, clock=clock)
        self.snapshot_system = SnapshotSystem(self.world, self.bus)

        # Game flow systems
        self.game_flow_system = GameFlowSystem(self.world, self.bus, win_tile=win_tile)
        self.setup_system = GameSetupSystem(self.world, self.bus, starting_tiles=starting_tiles)

        # Action systems
        self.move_system = MoveSystem(self.world, self.bus)
        self.power_system = PowerSystem(self.world, self.bus)
        self.input_system = InputSystem(self.bus)

        if auto_start:
            self.restart()

    # Actions ------------------------------------------------------------

    def restart(self) -> GameSnapshot:
        self.setup_system.start_new_game()
        return self.snapshot()

    def slide(self, direction: Direction | str) -> Optional[MoveResult]:
        if isinstance(direction, str):
            direction = DIRECTION_TOKENS.get(direction.strip().lower())
        if not isinstance(direction, Direction):
            return None
        return self.move_system.move(direction)

    def use_power(self, kind: PowerKind | str) -> bool:
        if isinstance(kind, str):
            kind = POWER_TOKENS.get(kind.strip().lower())
        if not isinstance(kind, PowerKind):
            return False
        return self.power_system.use(kind)

    def clear_leaderboard(self) -> None:
        self.leaderboard_system.clear()

    def handle_input(self, token: str) -> None:
        self.bus.emit(EVENT_INPUT_TOKEN, token=token)

    # Views --------------------------------------------------------------

    def snapshot(self) -> GameSnapshot:
        return self.snapshot_system.last_snapshot or build_snapshot(self.world)

    @property
    def board(self) -> Board:
        return get_board(self.world)

    @property
    def mode(self) -> GameMode:
        return get_game_state(self.world).mode

    @property
    def can_act(self) -> bool:
        return can_act(self.world)

    @property
    def score(self) -> int:
        return get_score_state(self.world).score

    @property
    def best(self) -> int:
        return get_score_state(self.world).best

    @property
    def top_tile(self) -> int:
        return get_score_state(self.world).top_tile

    @property
    def powers(self) -> dict[str, int]:
        return get_power_inventory(self.world).as_dict()

    @property
    def leaderboard(self) -> List[LeaderboardEntry]:
        return self.leaderboard_system.entries
