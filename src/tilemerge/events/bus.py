from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Strong references so systems not kept in a variable still receive events.
        sig.connect(fn, weak=False)

    def unsubscribe(self, name: str, fn):
        sig = self._signals.get(name)
        if sig:
            sig.disconnect(fn)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# SYSTEM & TIMING
# ============================================================================
EVENT_TICK = "tick"                        # payload: dt=float
EVENT_WINDOW_RESIZE = "window_resize"      # payload: width=int, height=int


# ============================================================================
# INPUT & INTERACTION
# ============================================================================
EVENT_KEY_PRESS = "key_press"              # payload: symbol=int, modifiers=int
EVENT_MOUSE_PRESS = "mouse_press"          # payload: x, y, button
EVENT_RESTART_REQUEST = "restart_request"  # payload: source=str


# ============================================================================
# BOARD
# ============================================================================
EVENT_MOVE_APPLIED = "move_applied"        # payload: direction=Direction, state=GameState, score_delta=int, merges=int
EVENT_GAME_RESTARTED = "game_restarted"    # payload: state=GameState


# ============================================================================
# GAME FLOW & STATUS
# ============================================================================
EVENT_GAME_STATUS_CHANGED = "game_status_changed"  # payload: previous_status=GameStatus, new_status=GameStatus
EVENT_GAME_WON = "game_won"                        # payload: score=int
EVENT_GAME_LOST = "game_lost"                      # payload: score=int
EVENT_SCORE_CHANGED = "score_changed"              # payload: score=int, best_score=int, delta=int
