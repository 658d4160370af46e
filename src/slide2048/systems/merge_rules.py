"""Merge eligibility and merge outcome for a pair of tiles.

Every merge outcome goes through ``resolve_merge`` so the wild/doubler
combinations are decided in one place:

* wild on either side: the result is double the larger value;
* doubler on either side (and no wild): the result is four times the target;
* otherwise: the classic doubling of the target.

The result is always a normal tile and the score gain equals its value.
"""
from __future__ import annotations

from dataclasses import dataclass

from slide2048.components.tile import Tile, TileVariant


@dataclass(frozen=True, slots=True)
class MergeOutcome:
    value: int
    variant: TileVariant
    gain: int
    celebratory: bool


def _has_variant(a: Tile, b: Tile, variant: TileVariant) -> bool:
    return a.variant is variant or b.variant is variant


def can_merge(a: Tile, b: Tile) -> bool:
    """Whether two tiles are value-compatible, ignoring per-move merge guards."""
    if _has_variant(a, b, TileVariant.WILD):
        return True
    return a.value == b.value


def can_merge_into(moving: Tile, target: Tile) -> bool:
    """Whether ``moving`` may merge into ``target`` during the current move."""
    if target.merged:
        return False
    return can_merge(moving, target)


def resolve_merge(moving: Tile, target: Tile) -> MergeOutcome:
    if _has_variant(moving, target, TileVariant.WILD):
        value = 2 * max(moving.value, target.value)
        celebratory = True
    elif _has_variant(moving, target, TileVariant.DOUBLER):
        value = 4 * target.value
        celebratory = True
    else:
        value = 2 * target.value
        celebratory = False
    return MergeOutcome(value=value, variant=TileVariant.NORMAL, gain=value, celebratory=celebratory)
