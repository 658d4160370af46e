from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from esper import World

from slide2048.components.board import Board
from slide2048.components.tile import Tile
from slide2048.factories.tiles import destroy_tile
from slide2048.systems.merge_rules import can_merge, can_merge_into, resolve_merge

Position = Tuple[int, int]


class Direction(Enum):
    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)

    @property
    def row_step(self) -> int:
        return self.value[0]

    @property
    def col_step(self) -> int:
        return self.value[1]


class TileEventKind(Enum):
    MOVE = "move"
    MERGE = "merge"
    REMOVE = "remove"


@dataclass(frozen=True, slots=True)
class TileEvent:
    """Per-tile outcome of an action, consumed by renderers.

    MOVE: the tile now sits at ``target`` (which may equal ``origin``).
    MERGE: the tile slid to ``target`` and was absorbed by tile ``into``.
    REMOVE: the tile was taken off the board at ``origin``.
    """
    tile_id: int
    kind: TileEventKind
    origin: Position
    target: Optional[Position] = None
    into: Optional[int] = None


@dataclass(slots=True)
class MoveResult:
    moved: bool = False
    gained: int = 0
    events: List[TileEvent] = field(default_factory=list)
    celebrated: List[int] = field(default_factory=list)


def build_traversals(size: int, direction: Direction) -> Tuple[List[int], List[int]]:
    """Row and column visiting order starting from the side tiles slide toward."""
    rows = list(range(size))
    cols = list(range(size))
    if direction.row_step == 1:
        rows.reverse()
    if direction.col_step == 1:
        cols.reverse()
    return rows, cols


def find_farthest_position(board: Board, start: Position, direction: Direction) -> Tuple[Position, Position]:
    """Walk from ``start`` over empty cells; return (farthest empty, next blocking cell)."""
    previous = start
    cell = (start[0] + direction.row_step, start[1] + direction.col_step)
    while board.in_bounds(*cell) and board.tile_at(*cell) is None:
        previous = cell
        cell = (cell[0] + direction.row_step, cell[1] + direction.col_step)
    return previous, cell


def clear_merged_flags(board: Board) -> None:
    for tile in board.tiles():
        tile.merged = False


def apply_move(world: World, board: Board, direction: Direction) -> MoveResult:
    """Slide every tile on the board one step of the game in ``direction``."""
    clear_merged_flags(board)
    result = MoveResult()
    rows, cols = build_traversals(board.size, direction)
    for row in rows:
        for col in cols:
            tile = board.tile_at(row, col)
            if tile is None:
                continue
            farthest, next_cell = find_farthest_position(board, (row, col), direction)
            target: Optional[Tile] = None
            if board.in_bounds(*next_cell):
                target = board.tile_at(*next_cell)
            if target is not None and can_merge_into(tile, target):
                board.remove(row, col)
                outcome = resolve_merge(tile, target)
                target.value = outcome.value
                target.variant = outcome.variant
                target.merged = True
                tile.row, tile.col = next_cell
                destroy_tile(world, tile)
                result.events.append(
                    TileEvent(tile.id, TileEventKind.MERGE, (row, col), next_cell, into=target.id)
                )
                if outcome.celebratory:
                    result.celebrated.append(target.id)
                result.gained += outcome.gain
                result.moved = True
            else:
                board.relocate(tile, *farthest)
                result.events.append(TileEvent(tile.id, TileEventKind.MOVE, (row, col), farthest))
                if farthest != (row, col):
                    result.moved = True
    return result


def has_available_merge(board: Board) -> bool:
    for tile in board.tiles():
        for dr, dc in ((0, 1), (1, 0)):
            r, c = tile.row + dr, tile.col + dc
            if not board.in_bounds(r, c):
                continue
            neighbour = board.tile_at(r, c)
            if neighbour is not None and can_merge(tile, neighbour):
                return True
    return False


def is_game_over(board: Board) -> bool:
    if not board.is_full():
        return False
    return not has_available_merge(board)
