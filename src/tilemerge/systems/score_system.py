from esper import World

from tilemerge.components.score import ScoreBoard
from tilemerge.events.bus import (
    EVENT_GAME_RESTARTED,
    EVENT_MOVE_APPLIED,
    EVENT_SCORE_CHANGED,
    EventBus,
)
from tilemerge.utils.game_state import get_singleton


class ScoreSystem:
    """Mirrors the board score into the ScoreBoard and keeps the best score."""

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_MOVE_APPLIED, self.on_board_update)
        self.event_bus.subscribe(EVENT_GAME_RESTARTED, self.on_board_update)

    def on_board_update(self, sender, **kwargs):
        state = kwargs.get("state")
        if state is None:
            return
        board = get_singleton(self.world, ScoreBoard)
        if board is None:
            return
        delta = board.sync(state.score)
        if delta:
            self.event_bus.emit(
                EVENT_SCORE_CHANGED,
                score=board.score,
                best_score=board.best_score,
                delta=delta,
            )
