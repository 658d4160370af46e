from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass(slots=True)
class LeaderboardEntry:
    """One finished (or won) run."""
    score: int
    top_tile: int
    label: str
    timestamp: float

    @property
    def rank_key(self) -> tuple[int, int]:
        return self.score, self.top_tile

    def to_dict(self) -> Dict[str, Any]:
        return {
            "score": self.score,
            "topTile": self.top_tile,
            "label": self.label,
            "timestamp": self.timestamp,
        }

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "LeaderboardEntry":
        label = payload["label"]
        if label not in ("win", "over"):
            raise ValueError(f"Unknown leaderboard label {label!r}")
        return cls(
            score=int(payload["score"]),
            top_tile=int(payload["topTile"]),
            label=label,
            timestamp=float(payload["timestamp"]),
        )


@dataclass(slots=True)
class Leaderboard:
    """Ranked run history, highest (score, top_tile) first."""
    entries: List[LeaderboardEntry] = field(default_factory=list)
