"""Per-tile interpolation for snapshot playback.

A transition is split in two halves. During the moving phase every source a
tile came from slides (smoothstep eased) to the tile's cell. During the
appearing phase spawned tiles grow from nothing and merged tiles pop past
full size before settling.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from tilemerge.components.game_state import GameState
from tilemerge.components.tile import Tile, TileStatus
from tilemerge.constants import MOVING_PHASE_END


@dataclass(frozen=True, slots=True)
class TileFrame:
    """A tile image to draw at a fractional board position."""
    row: float
    col: float
    level: int
    scale: float = 1.0


def smoothstep(p: float) -> float:
    return 3 * p ** 2 - 2 * p ** 3


def bump(p: float) -> float:
    return -p ** 2 + p + 1


def moving_phase(progress: float) -> float:
    return min(progress / MOVING_PHASE_END, 1.0)


def appearing_phase(progress: float) -> Optional[float]:
    """Progress through the appearing half, or ``None`` before it starts."""
    if progress <= MOVING_PHASE_END:
        return None
    return (progress - MOVING_PHASE_END) / (1 - MOVING_PHASE_END)


def tile_frames(tile: Tile, columns: int, progress: float = 1.0) -> List[TileFrame]:
    if tile.is_empty:
        return []
    row, col = divmod(tile.index, columns)
    frames: List[TileFrame] = []
    if tile.status != TileStatus.SPAWNED:
        eased = smoothstep(moving_phase(progress))
        for prev_index, prev_level in zip(tile.prev_index or (), tile.prev_level or ()):
            prev_row, prev_col = divmod(prev_index, columns)
            frames.append(TileFrame(
                row=prev_row + (row - prev_row) * eased,
                col=prev_col + (col - prev_col) * eased,
                level=prev_level,
            ))
    phase = appearing_phase(progress)
    if phase is not None:
        if tile.status == TileStatus.SPAWNED:
            frames.append(TileFrame(row, col, tile.level, phase))
        elif tile.status == TileStatus.MERGED:
            frames.append(TileFrame(row, col, tile.level, bump(phase)))
    return frames


def board_frames(state: GameState, progress: float = 1.0) -> List[TileFrame]:
    frames: List[TileFrame] = []
    for tile in state.tiles:
        frames.extend(tile_frames(tile, state.columns, progress))
    return frames
