from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tilemerge.components.overlay import Color, OverlaySetting
    from tilemerge.ui.layout import BoardGeometry


class OverlayRenderer:
    """Tints the board with the eased overlay colour and shows win/loss text."""

    def render(self, arcade, geometry: BoardGeometry, color: Color, setting: OverlaySetting) -> None:
        board = geometry.board
        rgba = color.to_rgba()
        if rgba[3] > 0:
            arcade.draw_lbwh_rectangle_filled(board.left, board.bottom, board.width, board.height, rgba)
        if setting.text_hidden:
            return
        cx, cy = board.center
        arcade.draw_text(
            setting.text,
            cx,
            cy,
            setting.text_color,
            board.height / 10,
            anchor_x="center",
            anchor_y="center",
            bold=True,
        )
