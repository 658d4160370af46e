"""Game state resource describing the current lifecycle mode."""
from dataclasses import dataclass
from enum import Enum


class GameMode(Enum):
    """Lifecycle modes gating which actions the engine accepts."""
    IDLE = "idle"
    ANIMATING = "animating"
    OVER = "over"
    WON = "won"


@dataclass
class GameState:
    """Singleton component storing the active game mode.

    has_won latches once the win notice has been surfaced so that play can
    continue past the winning tile without announcing it again.
    """
    mode: GameMode = GameMode.IDLE
    has_won: bool = False
