from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from tilemerge.constants import (
    BOARD_MAX_HEIGHT_PCT,
    BOARD_MAX_WIDTH_PCT,
    HEADER_GAP,
    MARGIN_TO_TILE_RATIO,
    RESTART_BUTTON_HEIGHT,
    RESTART_BUTTON_WIDTH,
    SCORE_PANEL_HEIGHT,
    SCORE_PANEL_WIDTH,
)


@dataclass(frozen=True, slots=True)
class Rect:
    left: float
    bottom: float
    width: float
    height: float

    @property
    def center(self) -> Tuple[float, float]:
        return self.left + self.width / 2, self.bottom + self.height / 2

    def contains(self, x: float, y: float) -> bool:
        return self.left <= x <= self.left + self.width and self.bottom <= y <= self.bottom + self.height


@dataclass(frozen=True, slots=True)
class BoardGeometry:
    board: Rect
    margin: float
    tile_size: float
    score_panel: Rect
    best_panel: Rect
    restart_button: Rect

    def cell_center(self, row: float, col: float) -> Tuple[float, float]:
        """Pixel centre of a (possibly fractional) cell; row 0 is the top row."""
        step = self.tile_size + self.margin
        x = self.board.left + self.margin + col * step + self.tile_size / 2
        top = self.board.bottom + self.board.height
        y = top - self.margin - row * step - self.tile_size / 2
        return x, y


def compute_board_geometry(window_width: int, window_height: int, rows: int, cols: int) -> BoardGeometry:
    """Size the board to fit 70% of the window while keeping the tile/margin ratio.

    Shared by rendering and input so hit-testing matches what is drawn.
    """
    ratio = 1 / MARGIN_TO_TILE_RATIO
    aspect = (1 + cols * (1 + ratio)) / (1 + rows * (1 + ratio))
    max_w = window_width * BOARD_MAX_WIDTH_PCT
    max_h = window_height * BOARD_MAX_HEIGHT_PCT
    width = min(max_w, aspect * max_h)
    height = width / aspect
    margin = width / (1 + cols * (1 + ratio))
    tile_size = margin * ratio

    header = HEADER_GAP + max(SCORE_PANEL_HEIGHT, RESTART_BUTTON_HEIGHT)
    left = (window_width - width) / 2
    bottom = max(0.0, (window_height - height - header) / 2)
    board = Rect(left, bottom, width, height)

    header_bottom = bottom + height + HEADER_GAP
    right = left + width
    score_panel = Rect(left, header_bottom, SCORE_PANEL_WIDTH, SCORE_PANEL_HEIGHT)
    best_panel = Rect(left + SCORE_PANEL_WIDTH + HEADER_GAP, header_bottom, SCORE_PANEL_WIDTH, SCORE_PANEL_HEIGHT)
    restart_button = Rect(right - RESTART_BUTTON_WIDTH, header_bottom, RESTART_BUTTON_WIDTH, RESTART_BUTTON_HEIGHT)
    return BoardGeometry(
        board=board,
        margin=margin,
        tile_size=tile_size,
        score_panel=score_panel,
        best_panel=best_panel,
        restart_button=restart_button,
    )
