"""Lookup helpers for the singleton components registered by ``create_world``."""
from __future__ import annotations

from typing import Type, TypeVar

from esper import World

from slide2048.components.board import Board
from slide2048.components.leaderboard import Leaderboard
from slide2048.components.power_inventory import PowerInventory
from slide2048.components.score import ScoreState

C = TypeVar("C")


def _singleton(world: World, component_type: Type[C]) -> C:
    for _, component in world.get_component(component_type):
        return component
    raise RuntimeError(f"{component_type.__name__} resource not found")


def get_board(world: World) -> Board:
    return _singleton(world, Board)


def replace_board(world: World, board: Board) -> None:
    for entity, _ in list(world.get_component(Board)):
        # Adding a component of the same type replaces the old one in place.
        world.add_component(entity, board)
        return
    world.create_entity(board)


def get_score_state(world: World) -> ScoreState:
    return _singleton(world, ScoreState)


def get_power_inventory(world: World) -> PowerInventory:
    return _singleton(world, PowerInventory)


def get_leaderboard(world: World) -> Leaderboard:
    return _singleton(world, Leaderboard)
