import logging
from time import monotonic
from typing import Callable, Optional, Tuple

from esper import World

from tilemerge.components.animation_queue import AnimationQueue
from tilemerge.components.game_state import GameState
from tilemerge.constants import BASE_ANIMATION_DURATION
from tilemerge.events.bus import (
    EVENT_GAME_RESTARTED,
    EVENT_MOVE_APPLIED,
    EventBus,
)
from tilemerge.utils.game_state import get_game_state, get_singleton

logger = logging.getLogger(__name__)

Frame = Tuple[GameState, float]


class AnimationSystem:
    """Plays queued board snapshots back as continuous motion.

    Every applied move enqueues a deep copy of the board. Each draw samples
    ``clock`` and moves ``progress`` forward by ``elapsed / base_duration``
    times the queue depth, so a backlog of moves plays faster until it has
    caught up with the live board.
    """

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        *,
        clock: Callable[[], float] | None = None,
        base_duration: float = BASE_ANIMATION_DURATION,
    ):
        if base_duration <= 0:
            raise ValueError("base_duration must be positive")
        self.world = world
        self.event_bus = event_bus
        self._clock = clock or monotonic
        self.base_duration = base_duration
        self.event_bus.subscribe(EVENT_MOVE_APPLIED, self.on_move_applied)
        self.event_bus.subscribe(EVENT_GAME_RESTARTED, self.on_game_restarted)
        queue = self.queue
        if not queue.snapshots:
            state = get_game_state(self.world)
            if state is not None:
                self.add_state(state)

    @property
    def queue(self) -> AnimationQueue:
        queue = get_singleton(self.world, AnimationQueue)
        if queue is None:
            raise LookupError("world has no AnimationQueue component")
        return queue

    def on_move_applied(self, sender, **kwargs):
        state = kwargs.get("state")
        if state is not None:
            self.add_state(state)

    def on_game_restarted(self, sender, **kwargs):
        state = kwargs.get("state")
        if state is None:
            return
        queue = self.queue
        queue.snapshots.clear()
        queue.progress = 0.0
        self.add_state(state)

    def add_state(self, state: GameState) -> None:
        self.queue.snapshots.append(state.clone())

    def animation_step(self, queue: AnimationQueue, now: float) -> float:
        if queue.last_sample_time is None:
            return 0.0
        elapsed = max(0.0, now - queue.last_sample_time)
        return queue.depth * elapsed / self.base_duration

    def advance(self) -> float:
        queue = self.queue
        now = self._clock()
        if queue.snapshots and not queue.settled:
            if queue.progress >= 1.0:
                queue.snapshots.pop(0)
                queue.progress = 0.0
                logger.debug("snapshot retired, %d queued", queue.depth)
            queue.progress = min(1.0, queue.progress + self.animation_step(queue, now))
        queue.last_sample_time = now
        return queue.progress

    def draw(self, renderer: Optional[Callable[[GameState, float], None]] = None) -> Optional[Frame]:
        """Advance, then hand the head snapshot and progress to ``renderer``."""
        progress = self.advance()
        head = self.queue.head
        if head is None:
            return None
        if renderer is not None:
            renderer(head, progress)
        return head, progress
