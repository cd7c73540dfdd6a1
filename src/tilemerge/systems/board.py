import logging

from esper import World

from tilemerge.components.direction import Direction
from tilemerge.components.game_state import GameState, GameStatus
from tilemerge.events.bus import (
    EVENT_GAME_LOST,
    EVENT_GAME_RESTARTED,
    EVENT_GAME_STATUS_CHANGED,
    EVENT_GAME_WON,
    EVENT_MOVE_APPLIED,
    EVENT_RESTART_REQUEST,
    EVENT_TICK,
    EventBus,
)
from tilemerge.utils.game_state import get_game_state, get_singleton, state_entity
from tilemerge.utils.input_throttle import MoveQueue

logger = logging.getLogger(__name__)


class BoardSystem:
    """Applies queued directions to the live board, one fully resolved move at a time."""

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_TICK, self.on_tick)
        self.event_bus.subscribe(EVENT_RESTART_REQUEST, self.on_restart_request)

    @property
    def state(self) -> GameState:
        state = get_game_state(self.world)
        if state is None:
            raise LookupError("world has no GameState component")
        return state

    def on_tick(self, sender, **kwargs):
        self.do_moves()

    def on_restart_request(self, sender, **kwargs):
        self.restart()

    def do_moves(self) -> int:
        """Drain the move queue; returns how many moves changed the board."""
        queue = get_singleton(self.world, MoveQueue)
        if queue is None:
            return 0
        applied = 0
        while True:
            direction = queue.pop()
            if direction is None:
                break
            if self.apply_move(direction):
                applied += 1
        return applied

    def apply_move(self, direction: Direction) -> bool:
        state = self.state
        previous_status = state.status
        previous_score = state.score
        if not state.move(direction):
            logger.debug("move %s left the board unchanged", direction.value)
            return False
        merges = len(state.merged_tiles())
        score_delta = state.score - previous_score
        logger.debug("move %s: %d merge(s), +%d points", direction.value, merges, score_delta)
        self.event_bus.emit(
            EVENT_MOVE_APPLIED,
            direction=direction,
            state=state,
            score_delta=score_delta,
            merges=merges,
        )
        if state.status != previous_status:
            self._announce_status(previous_status, state)
        return True

    def restart(self) -> GameState:
        ent = state_entity(self.world)
        old = self.state
        state = GameState.new_game(
            old.rows,
            old.columns,
            old.target_tile_level,
            rng=getattr(self.world, "random", None),
        )
        # add_component replaces the existing GameState on the entity.
        self.world.add_component(ent, state)
        queue = get_singleton(self.world, MoveQueue)
        if queue is not None:
            queue.reset()
        logger.info("game restarted on a %dx%d board", state.rows, state.columns)
        self.event_bus.emit(EVENT_GAME_RESTARTED, state=state)
        return state

    def _announce_status(self, previous: GameStatus, state: GameState) -> None:
        logger.info("status %s -> %s (score %d)", previous.name, state.status.name, state.score)
        self.event_bus.emit(
            EVENT_GAME_STATUS_CHANGED,
            previous_status=previous,
            new_status=state.status,
        )
        if state.status == GameStatus.WON:
            self.event_bus.emit(EVENT_GAME_WON, score=state.score)
        elif state.status == GameStatus.LOST:
            self.event_bus.emit(EVENT_GAME_LOST, score=state.score)
