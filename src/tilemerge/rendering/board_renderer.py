from __future__ import annotations

from typing import TYPE_CHECKING, List

from tilemerge.rendering.palette import (
    BOARD_COLOR,
    EMPTY_CELL_COLOR,
    tile_color,
    tile_text,
    tile_text_color,
)
from tilemerge.utils.tile_motion import TileFrame, board_frames

if TYPE_CHECKING:
    from tilemerge.components.game_state import GameState
    from tilemerge.ui.layout import BoardGeometry


class BoardRenderer:
    """Draws the board background and the interpolated tiles of one snapshot."""

    def __init__(self):
        self.last_frames: List[TileFrame] = []

    def render(self, arcade, geometry: BoardGeometry, state: GameState, progress: float, headless: bool) -> None:
        self.last_frames = board_frames(state, progress)
        if headless:
            return
        board = geometry.board
        arcade.draw_lbwh_rectangle_filled(board.left, board.bottom, board.width, board.height, BOARD_COLOR)
        half = geometry.tile_size / 2
        for row in range(state.rows):
            for col in range(state.columns):
                x, y = geometry.cell_center(row, col)
                arcade.draw_lrbt_rectangle_filled(x - half, x + half, y - half, y + half, EMPTY_CELL_COLOR)
        for frame in self.last_frames:
            self._draw_tile(arcade, geometry, frame)

    def _draw_tile(self, arcade, geometry: BoardGeometry, frame: TileFrame) -> None:
        size = geometry.tile_size * frame.scale
        if size <= 0:
            return
        x, y = geometry.cell_center(frame.row, frame.col)
        half = size / 2
        arcade.draw_lrbt_rectangle_filled(x - half, x + half, y - half, y + half, tile_color(frame.level))
        label = tile_text(frame.level)
        arcade.draw_text(
            label,
            x,
            y,
            tile_text_color(frame.level),
            min(size * 0.45, size * 1.2 / len(label)),
            anchor_x="center",
            anchor_y="center",
            bold=True,
        )
