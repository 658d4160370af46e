from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

from slide2048.components.tile import Tile

Position = Tuple[int, int]


@dataclass(slots=True)
class Board:
    """Square grid of optional tile references.

    The board is a positional container only; slide, merge and spawn rules
    live in the systems that mutate it.
    """
    size: int
    cells: List[List[Optional[Tile]]] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.size <= 0:
            raise ValueError(f"Board size must be positive, got {self.size}")
        self.cells = [[None] * self.size for _ in range(self.size)]

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def tile_at(self, row: int, col: int) -> Optional[Tile]:
        if not self.in_bounds(row, col):
            raise IndexError(f"Cell {(row, col)} outside {self.size}x{self.size} board")
        return self.cells[row][col]

    def place(self, tile: Tile, row: int, col: int) -> None:
        if self.tile_at(row, col) is not None:
            raise ValueError(f"Cell {(row, col)} already holds a tile")
        self.cells[row][col] = tile
        tile.row = row
        tile.col = col

    def remove(self, row: int, col: int) -> Optional[Tile]:
        tile = self.tile_at(row, col)
        self.cells[row][col] = None
        return tile

    def relocate(self, tile: Tile, row: int, col: int) -> None:
        """Move ``tile`` from its stored cell to (row, col)."""
        if (tile.row, tile.col) == (row, col):
            return
        if self.cells[tile.row][tile.col] is tile:
            self.cells[tile.row][tile.col] = None
        self.place(tile, row, col)

    def clear(self) -> None:
        for row in self.cells:
            for col in range(self.size):
                row[col] = None

    def tiles(self) -> Iterator[Tile]:
        """Yield tiles in row-major order."""
        for row in self.cells:
            for tile in row:
                if tile is not None:
                    yield tile

    def tile_count(self) -> int:
        return sum(1 for _ in self.tiles())

    def empty_cells(self) -> List[Position]:
        return [
            (r, c)
            for r in range(self.size)
            for c in range(self.size)
            if self.cells[r][c] is None
        ]

    def is_full(self) -> bool:
        return not self.empty_cells()

    def neighbors8(self, row: int, col: int) -> List[Position]:
        result: List[Position] = []
        for dr in (-1, 0, 1):
            for dc in (-1, 0, 1):
                if dr == 0 and dc == 0:
                    continue
                r, c = row + dr, col + dc
                if self.in_bounds(r, c):
                    result.append((r, c))
        return result

    def highest_value_tile(self) -> Optional[Tile]:
        best: Optional[Tile] = None
        for tile in self.tiles():
            # Strict comparison keeps the first tile of the row-major scan on ties.
            if best is None or tile.value > best.value:
                best = tile
        return best

    def values(self) -> List[List[int]]:
        """Grid of tile values with 0 for empty cells."""
        return [[tile.value if tile else 0 for tile in row] for row in self.cells]
