from dataclasses import dataclass


@dataclass(slots=True)
class ScoreState:
    """Score bookkeeping derived from the board and merge gains.

    score: sum of merge gains since the game started.
    best: highest score ever reached; persisted and never decreasing.
    top_tile: highest tile value currently on the board.
    """
    score: int = 0
    best: int = 0
    top_tile: int = 0
