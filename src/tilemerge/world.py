import random
from typing import Callable

from esper import World

from tilemerge.components.animation_queue import AnimationQueue
from tilemerge.components.game_state import GameState
from tilemerge.components.overlay import OverlayTint
from tilemerge.components.score import ScoreBoard
from tilemerge.constants import GRID_COLS, GRID_ROWS, TARGET_TILE_LEVEL
from tilemerge.utils.input_throttle import MoveQueue


def create_world(
    *,
    rows: int = GRID_ROWS,
    columns: int = GRID_COLS,
    target_tile_level: int = TARGET_TILE_LEVEL,
    rng: random.Random | None = None,
    state: GameState | None = None,
    clock: Callable[[], float] | None = None,
) -> World:
    """Build the world with a single state entity carrying every singleton.

    ``state`` lets callers start from a prepared board instead of a fresh
    game with two opening spawns. ``clock`` drives the input block timer.
    """
    world = World()
    setattr(world, "random", rng or random.Random())
    if state is None:
        state = GameState.new_game(rows, columns, target_tile_level, rng=world.random)
    world.create_entity(
        state,
        ScoreBoard(score=state.score, best_score=state.score),
        AnimationQueue(),
        OverlayTint.for_status(state.status),
        MoveQueue(clock=clock),
    )
    return world
