from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from tilemerge.components.game_state import GameStatus
from tilemerge.constants import OVERLAY_SMOOTHING_WEIGHT


@dataclass(slots=True)
class Color:
    """RGBA colour with float channels; alpha is 0..1."""
    r: float
    g: float
    b: float
    a: float

    def approach(self, target: Color, weight: float = OVERLAY_SMOOTHING_WEIGHT) -> None:
        """Exponential moving average step towards ``target``."""
        self.r = (weight * self.r + target.r) / (weight + 1)
        self.g = (weight * self.g + target.g) / (weight + 1)
        self.b = (weight * self.b + target.b) / (weight + 1)
        self.a = (weight * self.a + target.a) / (weight + 1)

    def to_rgba(self) -> Tuple[int, int, int, int]:
        return (round(self.r), round(self.g), round(self.b), round(self.a * 255))

    def clone(self) -> Color:
        return Color(self.r, self.g, self.b, self.a)


@dataclass(frozen=True, slots=True)
class OverlaySetting:
    color: Color
    text: Optional[str] = None
    text_color: Optional[Tuple[int, int, int]] = None

    @property
    def text_hidden(self) -> bool:
        return self.text is None


OVERLAY_SETTINGS: Dict[GameStatus, OverlaySetting] = {
    GameStatus.IN_PROGRESS: OverlaySetting(color=Color(255, 255, 255, 0)),
    GameStatus.CONTINUED: OverlaySetting(color=Color(255, 255, 255, 0)),
    GameStatus.WON: OverlaySetting(
        color=Color(237, 194, 46, 0.5),
        text="You win!",
        text_color=(248, 245, 241),
    ),
    GameStatus.LOST: OverlaySetting(
        color=Color(237, 227, 217, 0.5),
        text="Game over!",
        text_color=(119, 110, 101),
    ),
}


@dataclass(slots=True)
class OverlayTint:
    """Current overlay colour, eased every frame towards ``setting.color``."""
    setting: OverlaySetting
    color: Color

    @classmethod
    def for_status(cls, status: GameStatus) -> OverlayTint:
        setting = OVERLAY_SETTINGS[status]
        return cls(setting=setting, color=setting.color.clone())
