from esper import World

from tilemerge.components.overlay import OverlayTint
from tilemerge.components.score import ScoreBoard
from tilemerge.events.bus import EVENT_SCORE_CHANGED, EVENT_WINDOW_RESIZE, EventBus
from tilemerge.rendering.board_renderer import BoardRenderer
from tilemerge.rendering.overlay_renderer import OverlayRenderer
from tilemerge.rendering.palette import BOARD_COLOR, PANEL_TEXT
from tilemerge.systems.animation import AnimationSystem
from tilemerge.systems.overlay_system import OverlaySystem
from tilemerge.ui.layout import BoardGeometry, Rect, compute_board_geometry
from tilemerge.utils.game_state import get_singleton


class RenderSystem:
    """Per-frame drawing: animated board, overlay, score panels and restart button."""

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        window,
        animation_system: AnimationSystem,
        overlay_system: OverlaySystem,
    ):
        self.world = world
        self.event_bus = event_bus
        self.window = window
        self.animation_system = animation_system
        self.overlay_system = overlay_system
        self._board_renderer = BoardRenderer()
        self._overlay_renderer = OverlayRenderer()
        self._geometry: BoardGeometry | None = None
        self._geometry_key: tuple[int, int, int, int] | None = None
        board = get_singleton(world, ScoreBoard)
        self.score_labels: tuple[str, str] = (
            (str(board.score), str(board.best_score)) if board is not None else ("0", "0")
        )
        self.event_bus.subscribe(EVENT_WINDOW_RESIZE, self.on_resize)
        self.event_bus.subscribe(EVENT_SCORE_CHANGED, self.on_score_changed)

    @property
    def board_renderer(self) -> BoardRenderer:
        return self._board_renderer

    def on_resize(self, sender, **kwargs):
        self._geometry = None

    def on_score_changed(self, sender, **kwargs):
        score = kwargs.get('score')
        best = kwargs.get('best_score')
        if score is None or best is None:
            return
        self.score_labels = (str(score), str(best))

    def geometry_for(self, rows: int, cols: int) -> BoardGeometry:
        key = (self.window.width, self.window.height, rows, cols)
        if self._geometry is None or key != self._geometry_key:
            self._geometry = compute_board_geometry(self.window.width, self.window.height, rows, cols)
            self._geometry_key = key
        return self._geometry

    def process(self):
        # Local import keeps tests headless without creating a window.
        import arcade
        headless = False
        try:
            arcade.get_window()
        except Exception:
            headless = True

        frame = self.animation_system.draw()
        overlay_color = self.overlay_system.step()
        if frame is None:
            return
        snapshot, progress = frame
        geometry = self.geometry_for(snapshot.rows, snapshot.columns)
        self._board_renderer.render(arcade, geometry, snapshot, progress, headless)
        if headless:
            return
        tint = get_singleton(self.world, OverlayTint)
        if tint is not None and overlay_color is not None:
            self._overlay_renderer.render(arcade, geometry, overlay_color, tint.setting)
        self._draw_header(arcade, geometry)

    def _draw_header(self, arcade, geometry: BoardGeometry) -> None:
        score, best = self.score_labels
        self._draw_panel(arcade, geometry.score_panel, "SCORE", score)
        self._draw_panel(arcade, geometry.best_panel, "BEST", best)
        button = geometry.restart_button
        arcade.draw_lbwh_rectangle_filled(button.left, button.bottom, button.width, button.height, (143, 122, 102))
        cx, cy = button.center
        arcade.draw_text("New Game", cx, cy, arcade.color.WHITE, 16, anchor_x="center", anchor_y="center", bold=True)

    def _draw_panel(self, arcade, rect: Rect, title: str, value: str) -> None:
        arcade.draw_lbwh_rectangle_filled(rect.left, rect.bottom, rect.width, rect.height, BOARD_COLOR)
        cx, _ = rect.center
        arcade.draw_text(title, cx, rect.bottom + rect.height * 0.72, PANEL_TEXT, 11, anchor_x="center", anchor_y="center")
        arcade.draw_text(value, cx, rect.bottom + rect.height * 0.32, arcade.color.WHITE, 18, anchor_x="center", anchor_y="center", bold=True)
