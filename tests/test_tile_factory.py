import random

from esper import World

from slide2048.components.board import Board
from slide2048.components.tile import Tile, TileVariant
from slide2048.factories.tiles import (
    create_tile,
    destroy_tile,
    roll_spawn_value,
    roll_spawn_variant,
    spawn_tile,
)
from tests.helpers import ScriptedRandom, place_rows


def test_spawn_returns_none_on_full_board():
    world = World()
    board = Board(size=2)
    place_rows(world, board, [[2, 4], [8, 16]])
    assert spawn_tile(world, board, 16, rng=random.Random(1)) is None
    assert board.tile_count() == 4


def test_spawn_places_tile_on_an_empty_cell():
    world = World()
    board = Board(size=4)
    place_rows(world, board, [[2, 4, 8, 16]])
    empties = set(board.empty_cells())
    tile = spawn_tile(world, board, 16, rng=random.Random(3))
    assert tile is not None
    assert (tile.row, tile.col) in empties
    assert board.tile_at(tile.row, tile.col) is tile
    assert tile.value in (2, 4)
    assert world.component_for_entity(tile.id, Tile) is tile


def test_spawned_ids_are_unique_and_increasing():
    world = World()
    board = Board(size=4)
    rng = random.Random(5)
    ids = [spawn_tile(world, board, 0, rng=rng).id for _ in range(16)]
    assert ids == sorted(ids)
    assert len(set(ids)) == 16


def test_ids_are_not_reused_after_a_tile_is_destroyed():
    world = World()
    board = Board(size=4)
    first = create_tile(world, board, 0, 0, 2)
    board.remove(0, 0)
    destroy_tile(world, first)
    second = create_tile(world, board, 0, 0, 2)
    assert second.id > first.id


def test_forced_variant_overrides_policy():
    world = World()
    board = Board(size=4)
    tile = spawn_tile(world, board, 0, TileVariant.WILD, rng=random.Random(0))
    assert tile.variant is TileVariant.WILD


def test_spawn_value_distribution_roll():
    assert roll_spawn_value(ScriptedRandom([0.05])) == 4
    assert roll_spawn_value(ScriptedRandom([0.1])) == 2
    assert roll_spawn_value(ScriptedRandom([0.95])) == 2


def test_variant_policy_thresholds():
    # top tile >= 64 rolls only for wild (12%)
    assert roll_spawn_variant(64, ScriptedRandom([0.11])) is TileVariant.WILD
    assert roll_spawn_variant(128, ScriptedRandom([0.12])) is TileVariant.NORMAL
    assert roll_spawn_variant(64, ScriptedRandom([0.01])) is not TileVariant.DOUBLER
    # 32 <= top tile < 64 rolls only for doubler (10%)
    assert roll_spawn_variant(32, ScriptedRandom([0.09])) is TileVariant.DOUBLER
    assert roll_spawn_variant(32, ScriptedRandom([0.10])) is TileVariant.NORMAL
    # below 32 no roll at all
    assert roll_spawn_variant(16, ScriptedRandom([0.0])) is TileVariant.NORMAL


def test_variant_policy_only_rolls_once():
    rng = ScriptedRandom([0.5, 0.0])
    assert roll_spawn_variant(64, rng) is TileVariant.NORMAL
    assert rng.random() == 0.0
