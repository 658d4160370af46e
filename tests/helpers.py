from __future__ import annotations

import random
from typing import Iterable, Sequence

from esper import World

from slide2048.components.board import Board
from slide2048.components.tile import Tile, TileVariant
from slide2048.factories.tiles import create_tile
from slide2048.session import GameSession
from slide2048.utils.key_value_store import MemoryStore

Cell = int | tuple[int, TileVariant] | None


class ScriptedRandom(random.Random):
    """Random whose ``random()`` replays a fixed script; other draws stay seeded."""

    def __init__(self, values: Iterable[float], seed: int = 0) -> None:
        super().__init__(seed)
        self._script = list(values)

    def random(self) -> float:
        if not self._script:
            return super().random()
        return self._script.pop(0)

    def getrandbits(self, k: int) -> int:
        return super().getrandbits(k)


def make_session(**kwargs) -> GameSession:
    """Session with an empty board and deterministic randomness, clock and storage."""
    kwargs.setdefault("rng", random.Random(7))
    kwargs.setdefault("store", MemoryStore())
    kwargs.setdefault("clock", lambda: 1_700_000_000.0)
    kwargs.setdefault("auto_start", False)
    return GameSession(**kwargs)


def place_rows(world: World, board: Board, rows: Sequence[Sequence[Cell]]) -> dict[tuple[int, int], Tile]:
    """Lay out tiles row by row; cells are a value, a (value, variant) pair or None/0."""
    placed: dict[tuple[int, int], Tile] = {}
    for r, row in enumerate(rows):
        for c, cell in enumerate(row):
            if not cell:
                continue
            if isinstance(cell, tuple):
                value, variant = cell
            else:
                value, variant = cell, TileVariant.NORMAL
            placed[(r, c)] = create_tile(world, board, r, c, value, variant)
    return placed
