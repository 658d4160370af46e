from __future__ import annotations

import random
from typing import List, Optional

from esper import World

from slide2048.components.board import Board, Position
from slide2048.components.tile import Tile, TileVariant
from slide2048.factories.tiles import destroy_tile, spawn_tile
from slide2048.systems.move_ops import TileEvent, TileEventKind


def spawn_wild(world: World, board: Board, top_tile: int, *, rng: random.Random | None = None) -> Optional[Tile]:
    return spawn_tile(world, board, top_tile, TileVariant.WILD, rng=rng)


def bomb_positions(board: Board) -> List[Position]:
    """Cells cleared by a bomb: the highest tile and its occupied neighbours."""
    highest = board.highest_value_tile()
    if highest is None:
        return []
    positions = [highest.position]
    for row, col in board.neighbors8(highest.row, highest.col):
        if board.tile_at(row, col) is not None:
            positions.append((row, col))
    return positions


def bomb_highest(world: World, board: Board) -> List[TileEvent]:
    """Remove the highest tile and everything around it; empty when the board is empty."""
    events: List[TileEvent] = []
    for row, col in bomb_positions(board):
        tile = board.remove(row, col)
        if tile is None:
            continue
        destroy_tile(world, tile)
        events.append(TileEvent(tile.id, TileEventKind.REMOVE, (row, col)))
    return events


def shuffle_tiles(board: Board, *, rng: random.Random) -> List[TileEvent]:
    """Scatter every tile over a random permutation of the board's cells."""
    tiles = list(board.tiles())
    if not tiles:
        return []
    cells = [(r, c) for r in range(board.size) for c in range(board.size)]
    rng.shuffle(cells)
    board.clear()
    events: List[TileEvent] = []
    for tile, (row, col) in zip(tiles, cells):
        origin = tile.position
        board.place(tile, row, col)
        events.append(TileEvent(tile.id, TileEventKind.MOVE, origin, (row, col)))
    return events
