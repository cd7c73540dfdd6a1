from typing import Tuple

RGB = Tuple[int, int, int]

BOARD_COLOR: RGB = (187, 173, 160)       # #BBADA0
EMPTY_CELL_COLOR: RGB = (205, 193, 180)  # #CDC1B4
DARK_TEXT: RGB = (119, 110, 101)         # #776E65
LIGHT_TEXT: RGB = (249, 246, 242)        # #F9F6F2
PANEL_TEXT: RGB = (238, 228, 218)

# Index 0 is level 1 (value 2); the last entry covers 2048 and beyond.
TILE_COLORS: Tuple[RGB, ...] = (
    (238, 228, 218),  # 2
    (237, 224, 200),  # 4
    (242, 177, 121),  # 8
    (245, 149, 99),   # 16
    (246, 124, 95),   # 32
    (247, 110, 79),   # 64
    (237, 207, 114),  # 128
    (237, 204, 97),   # 256
    (237, 200, 80),   # 512
    (237, 197, 63),   # 1024
    (237, 194, 46),   # 2048
)

_MULTIPLIERS = ("", "K", "M", "G")


def tile_color(level: int) -> RGB:
    return TILE_COLORS[min(level, len(TILE_COLORS)) - 1]


def tile_text(level: int) -> str:
    """Compact label: 1024 -> "1K", 2 ** 21 -> "2M"."""
    return f"{2 ** (level % 10)}{_MULTIPLIERS[min(level // 10, len(_MULTIPLIERS) - 1)]}"


def tile_text_color(level: int) -> RGB:
    return DARK_TEXT if level <= 2 else LIGHT_TEXT
