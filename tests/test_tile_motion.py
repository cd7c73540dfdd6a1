import pytest

from tilemerge.components.tile import Tile, TileStatus
from tilemerge.utils.tile_motion import (
    TileFrame,
    appearing_phase,
    board_frames,
    bump,
    moving_phase,
    smoothstep,
    tile_frames,
)
from tests.helpers import board_from_levels


def test_easing_curves():
    assert smoothstep(0) == 0
    assert smoothstep(0.5) == pytest.approx(0.5)
    assert smoothstep(1) == 1
    assert bump(0) == 1
    assert bump(0.5) == pytest.approx(1.25)
    assert bump(1) == 1


def test_phase_boundaries():
    assert moving_phase(0.25) == pytest.approx(0.5)
    assert moving_phase(0.5) == 1.0
    assert moving_phase(0.9) == 1.0
    assert appearing_phase(0.5) is None
    assert appearing_phase(0.75) == pytest.approx(0.5)
    assert appearing_phase(1.0) == 1.0


def test_moved_tile_slides_during_first_half():
    tile = Tile(3, level=2, status=TileStatus.MOVED, prev_index=[0], prev_level=[2])
    assert tile_frames(tile, 4, 0.0) == [TileFrame(0, 0, 2)]
    assert tile_frames(tile, 4, 0.25) == [TileFrame(0, 1.5, 2)]
    assert tile_frames(tile, 4, 0.5) == [TileFrame(0, 3, 2)]
    assert tile_frames(tile, 4, 1.0) == [TileFrame(0, 3, 2)]


def test_vertical_move_interpolates_rows():
    tile = Tile(12, level=1, status=TileStatus.MOVED, prev_index=[0], prev_level=[1])
    frame = tile_frames(tile, 4, 0.25)[0]
    assert frame.col == 0
    assert frame.row == pytest.approx(1.5)


def test_spawned_tile_grows_in_second_half():
    tile = Tile(5, level=1, status=TileStatus.SPAWNED, prev_index=[], prev_level=[])
    assert tile_frames(tile, 4, 0.5) == []
    assert tile_frames(tile, 4, 0.75) == [TileFrame(1, 1, 1, 0.5)]
    assert tile_frames(tile, 4, 1.0) == [TileFrame(1, 1, 1, 1.0)]


def test_merged_tile_draws_both_sources_then_pops():
    tile = Tile(0, level=3, status=TileStatus.MERGED, prev_index=[0, 2], prev_level=[2, 2])
    start = tile_frames(tile, 4, 0.0)
    assert start == [TileFrame(0, 0, 2), TileFrame(0, 2, 2)]
    mid = tile_frames(tile, 4, 0.75)
    assert mid[:2] == [TileFrame(0, 0, 2), TileFrame(0, 0, 2)]
    assert mid[2].level == 3
    assert mid[2].scale == pytest.approx(1.25)


def test_empty_tile_draws_nothing():
    assert tile_frames(Tile(0), 4, 1.0) == []


def test_board_frames_cover_each_occupied_tile():
    state = board_from_levels([[1, None], [None, 2]])
    frames = board_frames(state, 1.0)
    assert sorted((f.row, f.col, f.level) for f in frames) == [(0, 0, 1), (1, 1, 2)]
