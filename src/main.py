"""Entry point for the 2048 sliding-tile puzzle.

Sets up ECS world, event bus, systems, and Arcade window.
"""
import argparse
import logging
import random

from arcade import Window, run, set_background_color

from tilemerge.constants import (
    GRID_COLS, GRID_ROWS, TARGET_TILE_LEVEL, WINDOW_HEIGHT, WINDOW_TITLE, WINDOW_WIDTH,
)
from tilemerge.events.bus import (
    EVENT_KEY_PRESS, EVENT_MOUSE_PRESS, EVENT_TICK, EVENT_WINDOW_RESIZE, EventBus,
)
from tilemerge.systems.animation import AnimationSystem
from tilemerge.systems.board import BoardSystem
from tilemerge.systems.input import InputSystem
from tilemerge.systems.overlay_system import OverlaySystem
from tilemerge.systems.render import RenderSystem
from tilemerge.systems.score_system import ScoreSystem
from tilemerge.world import create_world


class TileMergeWindow(Window):
    def __init__(
        self,
        rows: int = GRID_ROWS,
        columns: int = GRID_COLS,
        target_tile_level: int = TARGET_TILE_LEVEL,
        rng: random.Random | None = None,
    ):
        super().__init__(WINDOW_WIDTH, WINDOW_HEIGHT, WINDOW_TITLE, resizable=True)
        self.set_update_rate(1/60)
        self.event_bus = EventBus()
        self.world = create_world(rows=rows, columns=columns, target_tile_level=target_tile_level, rng=rng)

        # Input first so queued directions exist before the board drains them.
        self.input_system = InputSystem(self.event_bus, self, self.world)
        self.board_system = BoardSystem(self.world, self.event_bus)
        self.score_system = ScoreSystem(self.world, self.event_bus)

        # Playback and drawing
        self.animation_system = AnimationSystem(self.world, self.event_bus)
        self.overlay_system = OverlaySystem(self.world, self.event_bus)
        self.render_system = RenderSystem(
            self.world,
            self.event_bus,
            self,
            self.animation_system,
            self.overlay_system,
        )
        set_background_color((250, 248, 239))

    def on_resize(self, width: int, height: int):
        self.event_bus.emit(EVENT_WINDOW_RESIZE, width=width, height=height)
        return super().on_resize(width, height)

    def on_update(self, delta_time: float):
        self.event_bus.emit(EVENT_TICK, dt=delta_time)

    def on_draw(self):
        self.clear()
        self.render_system.process()

    def on_key_press(self, symbol: int, modifiers: int):
        self.event_bus.emit(EVENT_KEY_PRESS, symbol=symbol, modifiers=modifiers)

    def on_mouse_press(self, x: float, y: float, button: int, modifiers: int):
        self.event_bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=button)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Slide and merge tiles until you reach the target.")
    parser.add_argument("--rows", type=int, default=GRID_ROWS)
    parser.add_argument("--columns", type=int, default=GRID_COLS)
    parser.add_argument("--target-level", type=int, default=TARGET_TILE_LEVEL,
                        help="tile level that wins the game (2 ** level)")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--log-level", default="WARNING")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(name)s %(levelname)s %(message)s")
    rng = random.Random(args.seed) if args.seed is not None else None
    TileMergeWindow(args.rows, args.columns, args.target_level, rng=rng)
    run()

if __name__ == "__main__":
    main()
