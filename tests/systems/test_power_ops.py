import random

from esper import World

from slide2048.components.board import Board
from slide2048.components.tile import TileVariant
from slide2048.systems.move_ops import TileEventKind
from slide2048.systems.power_ops import bomb_highest, bomb_positions, shuffle_tiles, spawn_wild
from tests.helpers import place_rows

FULL_ROWS = [
    [256, 2, 4, 8],
    [16, 32, 2, 4],
    [8, 16, 32, 2],
    [4, 8, 16, 32],
]


def _setup(rows, size=4):
    world = World()
    board = Board(size=size)
    tiles = place_rows(world, board, rows)
    return world, board, tiles


def test_bomb_in_corner_clears_only_in_bounds_neighbours():
    world, board, tiles = _setup(FULL_ROWS)
    events = bomb_highest(world, board)

    cleared = sorted(event.origin for event in events)
    assert cleared == [(0, 0), (0, 1), (1, 0), (1, 1)]
    assert all(event.kind is TileEventKind.REMOVE for event in events)
    assert board.tile_count() == 12
    for position in cleared:
        assert board.tile_at(*position) is None
        assert not world.entity_exists(tiles[position].id)


def test_bomb_in_center_clears_nine_cells():
    rows = [list(row) for row in FULL_ROWS]
    rows[0][0] = 2
    rows[1][1] = 512
    world, board, _ = _setup(rows)
    events = bomb_highest(world, board)
    assert len(events) == 9
    assert board.tile_count() == 7


def test_bomb_skips_empty_neighbours():
    world, board, _ = _setup([[0, 0, 0, 0], [0, 64, 2, 0], [0, 0, 0, 0], [0, 0, 0, 4]])
    assert sorted(bomb_positions(board)) == [(1, 1), (1, 2)]
    bomb_highest(world, board)
    assert board.values()[3][3] == 4
    assert board.tile_count() == 1


def test_bomb_on_empty_board_fails():
    world, board, _ = _setup([])
    assert bomb_highest(world, board) == []


def test_shuffle_keeps_every_tile_and_syncs_positions():
    world, board, tiles = _setup([[2, 4, 0, 0], [0, 8, 0, 0], [0, 0, 0, 16]])
    before = sorted((tile.id, tile.value) for tile in tiles.values())
    events = shuffle_tiles(board, rng=random.Random(11))

    assert len(events) == 4
    after = sorted((tile.id, tile.value) for tile in board.tiles())
    assert after == before
    for tile in board.tiles():
        assert board.tile_at(tile.row, tile.col) is tile
    for event in events:
        assert board.tile_at(*event.target).id == event.tile_id


def test_shuffle_of_empty_board_fails():
    _, board, _ = _setup([])
    assert shuffle_tiles(board, rng=random.Random(0)) == []


def test_spawn_wild_fails_on_full_board():
    world, board, _ = _setup(FULL_ROWS)
    assert spawn_wild(world, board, 256, rng=random.Random(0)) is None


def test_spawn_wild_places_wild_tile():
    world, board, _ = _setup([[2]])
    tile = spawn_wild(world, board, 2, rng=random.Random(0))
    assert tile is not None
    assert tile.variant is TileVariant.WILD
    assert board.tile_count() == 2
