import random

import pytest

from tilemerge.components.direction import Direction
from tilemerge.components.game_state import GameStatus
from tests.helpers import board_from_levels

_ = None

CHECKERBOARD = [
    [1, 2, 1, 2],
    [2, 1, 2, 1],
    [1, 2, 1, 2],
    [2, 1, 2, 1],
]


def test_full_board_without_equal_neighbours_is_game_over():
    state = board_from_levels(CHECKERBOARD)
    assert state.is_full
    assert state.is_game_over
    for direction in Direction:
        assert not state.move(direction)
    assert state.status == GameStatus.IN_PROGRESS
    state.update_status()
    assert state.status == GameStatus.LOST


def test_game_over_probe_does_not_mutate_live_board():
    state = board_from_levels(CHECKERBOARD)
    before = state.clone()
    assert state.is_game_over
    assert state.equals(before)


def test_full_board_with_a_merge_available_is_not_over():
    grid = [row[:] for row in CHECKERBOARD]
    grid[3][3] = 2
    state = board_from_levels(grid)
    assert state.is_full
    assert not state.is_game_over


@pytest.mark.parametrize("grid", [
    [[1, 2], [1, 3]],
    [
        [3, 2, 1, 2],
        [3, 1, 2, 1],
        [1, 2, 1, 2],
        [2, 1, 2, 1],
    ],
])
def test_full_board_with_only_a_vertical_merge_is_not_over(grid):
    state = board_from_levels(grid)
    assert state.is_full
    assert not state.move(Direction.LEFT)
    assert not state.move(Direction.RIGHT)
    assert not state.is_game_over
    assert state.move(Direction.UP)


def test_non_full_board_is_never_game_over():
    grid = [row[:] for row in CHECKERBOARD]
    grid[0][0] = None
    state = board_from_levels(grid)
    assert not state.is_game_over


def test_move_filling_the_board_without_merges_left_is_lost():
    # Sliding row 0 right makes room for exactly one spawn; every spawn level
    # then leaves a board with no equal neighbours.
    state = board_from_levels([
        [3, 4, 5, _],
        [5, 6, 7, 8],
        [9, 10, 3, 4],
        [5, 6, 7, 8],
    ], rng=random.Random(0))
    assert state.move(Direction.RIGHT)
    assert state.is_full
    assert state.status == GameStatus.LOST


def test_reaching_target_wins_then_continues_on_next_move():
    state = board_from_levels([
        [10, 10, _, _],
        [_, _, _, _],
        [_, _, _, _],
        [_, _, _, _],
    ], rng=random.Random(5))
    assert state.move(Direction.LEFT)
    assert state.tiles[0].level == 11
    assert state.score == 2048
    assert state.status == GameStatus.WON

    assert state.move(Direction.RIGHT)
    assert state.status == GameStatus.CONTINUED
    for direction in (Direction.DOWN, Direction.UP, Direction.LEFT):
        state.move(direction)
        assert state.status == GameStatus.CONTINUED


def test_goal_uses_configured_target_level():
    state = board_from_levels([[2, 2, _]], target_tile_level=3, rng=random.Random(1))
    assert state.move(Direction.LEFT)
    assert state.status == GameStatus.WON


def test_lost_overrides_win():
    # The merge reaches the target but the spawn fills the row with no pair left.
    state = board_from_levels([[1, 1, 3]], target_tile_level=2, rng=random.Random(0))
    assert state.move(Direction.LEFT)
    assert state.tiles[0].level == 2
    assert state.tiles[1].level == 3
    assert state.is_full
    assert state.status == GameStatus.LOST
