from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # weak=False keeps bound methods alive for systems nobody holds a reference to.
        sig.connect(fn, weak=False)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# INPUT
# ============================================================================
EVENT_INPUT_TOKEN = "input_token"                  # payload: token=str


# ============================================================================
# ACTION REQUESTS
# ============================================================================
EVENT_MOVE_REQUEST = "move_request"                # payload: direction=Direction
EVENT_POWER_REQUEST = "power_request"              # payload: kind=PowerKind
EVENT_NEW_GAME_REQUEST = "new_game_request"        # payload: None
EVENT_ACTION_REJECTED = "action_rejected"          # payload: action=str, reason=str


# ============================================================================
# TILE & BOARD MECHANICS
# ============================================================================
EVENT_TILE_SPAWNED = "tile_spawned"                # payload: tile_id=int, row=int, col=int, value=int, variant=TileVariant, reason=str
EVENT_TILES_MOVED = "tiles_moved"                  # payload: direction=Direction, events=list[TileEvent], gained=int
EVENT_TILES_REMOVED = "tiles_removed"              # payload: tile_ids=list[int], positions=list[(r,c)], reason=str
EVENT_TILES_SHUFFLED = "tiles_shuffled"            # payload: events=list[TileEvent]
EVENT_MERGE_CELEBRATED = "merge_celebrated"        # payload: tile_id=int, value=int, row=int, col=int
EVENT_BOARD_CHANGED = "board_changed"              # payload: reason=str


# ============================================================================
# POWERS
# ============================================================================
EVENT_POWER_USED = "power_used"                    # payload: kind=PowerKind, remaining=int, affected=list[(r,c)]


# ============================================================================
# SCORE & LEADERBOARD
# ============================================================================
EVENT_SCORE_CHANGED = "score_changed"              # payload: score=int, best=int, top_tile=int, delta=int
EVENT_LEADERBOARD_UPDATED = "leaderboard_updated"  # payload: entries=list[LeaderboardEntry]


# ============================================================================
# GAME FLOW & STATE
# ============================================================================
EVENT_GAME_MODE_CHANGED = "game_mode_changed"      # payload: previous_mode=GameMode, new_mode=GameMode
EVENT_GAME_STARTED = "game_started"                # payload: spawned=list[int]
EVENT_ACTION_RESOLVED = "action_resolved"          # payload: action=str, events=list[TileEvent], spawned=list[int]
EVENT_GAME_WON = "game_won"                        # payload: message=str, score=int, top_tile=int
EVENT_GAME_OVER = "game_over"                      # payload: message=str, score=int, top_tile=int
EVENT_TURN_COMPLETED = "turn_completed"            # payload: action=str, events=list[TileEvent], spawned=list[int]


# ============================================================================
# RENDERING
# ============================================================================
EVENT_SNAPSHOT = "snapshot"                        # payload: snapshot=GameSnapshot
