"""Tile creation and the random spawn policy."""
from __future__ import annotations

import random
from typing import Optional

from esper import World

from slide2048.components.board import Board
from slide2048.components.tile import Tile, TileVariant
from slide2048.constants import (
    DOUBLER_SPAWN_PROBABILITY,
    DOUBLER_SPAWN_THRESHOLD,
    SPAWN_FOUR_PROBABILITY,
    WILD_SPAWN_PROBABILITY,
    WILD_SPAWN_THRESHOLD,
)


def _resolve_rng(world: World, rng: random.Random | None) -> random.Random:
    candidate = rng or getattr(world, "random", None)
    if isinstance(candidate, random.Random):
        return candidate
    return random.Random()


def create_tile(
    world: World,
    board: Board,
    row: int,
    col: int,
    value: int,
    variant: TileVariant = TileVariant.NORMAL,
) -> Tile:
    """Create a tile entity and place it on the board at (row, col)."""
    if value <= 0:
        raise ValueError(f"Tile value must be positive, got {value}")
    entity = world.create_entity()
    tile = Tile(id=entity, value=value, row=row, col=col, variant=variant)
    board.place(tile, row, col)
    world.add_component(entity, tile)
    return tile


def destroy_tile(world: World, tile: Tile) -> None:
    if world.entity_exists(tile.id):
        world.delete_entity(tile.id, immediate=True)


def roll_spawn_value(rng: random.Random) -> int:
    return 4 if rng.random() < SPAWN_FOUR_PROBABILITY else 2


def roll_spawn_variant(top_tile: int, rng: random.Random) -> TileVariant:
    if top_tile >= WILD_SPAWN_THRESHOLD:
        return TileVariant.WILD if rng.random() < WILD_SPAWN_PROBABILITY else TileVariant.NORMAL
    if top_tile >= DOUBLER_SPAWN_THRESHOLD:
        return TileVariant.DOUBLER if rng.random() < DOUBLER_SPAWN_PROBABILITY else TileVariant.NORMAL
    return TileVariant.NORMAL


def spawn_tile(
    world: World,
    board: Board,
    top_tile: int,
    forced_variant: TileVariant | None = None,
    *,
    rng: random.Random | None = None,
) -> Optional[Tile]:
    """Drop a new tile on a random empty cell; returns None when the board is full."""
    empties = board.empty_cells()
    if not empties:
        return None
    rng = _resolve_rng(world, rng)
    row, col = rng.choice(empties)
    value = roll_spawn_value(rng)
    variant = forced_variant if forced_variant is not None else roll_spawn_variant(top_tile, rng)
    return create_tile(world, board, row, col, value, variant)
