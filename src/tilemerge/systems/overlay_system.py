from esper import World

from tilemerge.components.game_state import GameStatus
from tilemerge.components.overlay import OVERLAY_SETTINGS, Color, OverlayTint
from tilemerge.constants import OVERLAY_SMOOTHING_WEIGHT
from tilemerge.events.bus import (
    EVENT_GAME_RESTARTED,
    EVENT_GAME_STATUS_CHANGED,
    EventBus,
)
from tilemerge.utils.game_state import get_singleton


class OverlaySystem:
    """Tracks the status-dependent overlay and eases its colour once per draw."""

    def __init__(self, world: World, event_bus: EventBus, *, weight: float = OVERLAY_SMOOTHING_WEIGHT):
        self.world = world
        self.event_bus = event_bus
        self.weight = weight
        self.event_bus.subscribe(EVENT_GAME_STATUS_CHANGED, self.on_status_changed)
        self.event_bus.subscribe(EVENT_GAME_RESTARTED, self.on_game_restarted)

    def on_status_changed(self, sender, **kwargs):
        status = kwargs.get("new_status")
        if isinstance(status, GameStatus):
            self.update(status)

    def on_game_restarted(self, sender, **kwargs):
        state = kwargs.get("state")
        self.update(state.status if state is not None else GameStatus.IN_PROGRESS)

    def update(self, status: GameStatus) -> None:
        tint = get_singleton(self.world, OverlayTint)
        if tint is not None:
            tint.setting = OVERLAY_SETTINGS[status]

    def step(self) -> Color | None:
        tint = get_singleton(self.world, OverlayTint)
        if tint is None:
            return None
        tint.color.approach(tint.setting.color, self.weight)
        return tint.color
