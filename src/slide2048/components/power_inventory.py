from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Mapping


class PowerKind(Enum):
    WILD = "wild"
    BOMB = "bomb"
    SHUFFLE = "shuffle"


@dataclass(slots=True)
class PowerInventory:
    """Remaining power-up uses for the current game.

    counts: mapping of power kind -> uses left. Counts only go down during a
    game; ``reset`` restores the defaults at game start.
    """
    defaults: Dict[PowerKind, int] = field(default_factory=dict)
    counts: Dict[PowerKind, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.counts:
            self.counts = dict(self.defaults)

    @classmethod
    def from_mapping(cls, uses: Mapping[str, int]) -> "PowerInventory":
        defaults = {PowerKind(name): max(0, int(count)) for name, count in uses.items()}
        return cls(defaults=defaults)

    def remaining(self, kind: PowerKind) -> int:
        return self.counts.get(kind, 0)

    def can_use(self, kind: PowerKind) -> bool:
        return self.remaining(kind) > 0

    def consume(self, kind: PowerKind) -> bool:
        if not self.can_use(kind):
            return False
        self.counts[kind] -= 1
        return True

    def reset(self) -> None:
        self.counts = dict(self.defaults)

    def as_dict(self) -> Dict[str, int]:
        return {kind.value: self.remaining(kind) for kind in PowerKind}
