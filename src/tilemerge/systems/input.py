import logging

from esper import World

from tilemerge.components.direction import Direction
from tilemerge.constants import (
    KEY_A, KEY_D, KEY_DOWN, KEY_LEFT, KEY_R, KEY_RIGHT, KEY_S, KEY_UP, KEY_W,
    MOUSE_BUTTON_LEFT, WIN_INPUT_BLOCK_SECONDS,
)
from tilemerge.events.bus import (
    EVENT_GAME_LOST,
    EVENT_GAME_WON,
    EVENT_KEY_PRESS,
    EVENT_MOUSE_PRESS,
    EVENT_RESTART_REQUEST,
    EventBus,
)
from tilemerge.ui.layout import compute_board_geometry
from tilemerge.utils.game_state import get_game_state, get_singleton
from tilemerge.utils.input_throttle import MoveQueue

logger = logging.getLogger(__name__)

KEY_DIRECTIONS = {
    KEY_W: Direction.UP,
    KEY_UP: Direction.UP,
    KEY_A: Direction.LEFT,
    KEY_LEFT: Direction.LEFT,
    KEY_S: Direction.DOWN,
    KEY_DOWN: Direction.DOWN,
    KEY_D: Direction.RIGHT,
    KEY_RIGHT: Direction.RIGHT,
}


class InputSystem:
    """Turns key presses into queued directions and restart requests."""

    def __init__(self, event_bus: EventBus, window, world: World, *, win_block_seconds: float = WIN_INPUT_BLOCK_SECONDS):
        self.event_bus = event_bus
        self.window = window
        self.world = world
        self.win_block_seconds = win_block_seconds
        self.event_bus.subscribe(EVENT_KEY_PRESS, self.on_key_press)
        self.event_bus.subscribe(EVENT_MOUSE_PRESS, self.on_mouse_press)
        self.event_bus.subscribe(EVENT_GAME_WON, self.on_game_won)
        self.event_bus.subscribe(EVENT_GAME_LOST, self.on_game_lost)

    def on_key_press(self, sender, **kwargs):
        symbol = kwargs.get('symbol')
        if symbol is None:
            return
        if symbol == KEY_R:
            self.event_bus.emit(EVENT_RESTART_REQUEST, source='key')
            return
        direction = KEY_DIRECTIONS.get(symbol)
        if direction is None:
            return
        queue = get_singleton(self.world, MoveQueue)
        if queue is not None:
            queue.push(direction)

    def on_mouse_press(self, sender, **kwargs):
        x = kwargs.get('x')
        y = kwargs.get('y')
        if x is None or y is None or kwargs.get('button') != MOUSE_BUTTON_LEFT:
            return
        try:
            xf = float(x)
            yf = float(y)
        except (TypeError, ValueError):
            return
        state = get_game_state(self.world)
        if state is None:
            return
        geometry = compute_board_geometry(self.window.width, self.window.height, state.rows, state.columns)
        if geometry.restart_button.contains(xf, yf):
            self.event_bus.emit(EVENT_RESTART_REQUEST, source='button')

    def on_game_won(self, sender, **kwargs):
        queue = get_singleton(self.world, MoveQueue)
        if queue is None:
            return
        logger.info("win reached, ignoring input for %.1fs", self.win_block_seconds)
        queue.block(self.win_block_seconds)

    def on_game_lost(self, sender, **kwargs):
        queue = get_singleton(self.world, MoveQueue)
        if queue is None:
            return
        logger.info("game over, dropping %d pending move(s)", len(queue))
        queue.reset()
