from dataclasses import dataclass
from enum import Enum


class TileVariant(Enum):
    """Special behaviour tag carried by a tile."""
    NORMAL = "normal"
    WILD = "wild"
    DOUBLER = "doubler"


@dataclass(slots=True)
class Tile:
    """A numbered tile living on the board.

    id: entity id assigned by the world when the tile is created; never reused.
    row/col: current cell, updated in place while sliding.
    merged: set once the tile has absorbed another tile during the current move.
    """
    id: int
    value: int
    row: int
    col: int
    variant: TileVariant = TileVariant.NORMAL
    merged: bool = False

    @property
    def position(self) -> tuple[int, int]:
        return self.row, self.col
