from __future__ import annotations

from typing import Type, TypeVar

from esper import World

from tilemerge.components.game_state import GameState

T = TypeVar("T")


def get_singleton(world: World, component_type: Type[T]) -> T | None:
    """Return the first instance of ``component_type`` in the world, if any."""
    for _, component in world.get_component(component_type):
        return component
    return None


def get_game_state(world: World) -> GameState | None:
    return get_singleton(world, GameState)


def state_entity(world: World) -> int | None:
    """Entity carrying the board, which also hosts the other singletons."""
    for ent, _ in world.get_component(GameState):
        return ent
    return None
