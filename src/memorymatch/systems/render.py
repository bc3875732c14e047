from __future__ import annotations

from esper import World

from memorymatch.components.board import Board
from memorymatch.components.status_message import StatusLevel
from memorymatch.constants import HIDDEN_FACE, TOP_BAR_HEIGHT
from memorymatch.events.bus import (
    EVENT_CARD_FLIPPED,
    EVENT_CARDS_UNFLIPPED,
    EVENT_LEADERBOARD_UPDATED,
    EVENT_MOVES_CHANGED,
    EVENT_PAIR_MATCHED,
    EVENT_SESSION_STARTED,
    EVENT_STATUS_MESSAGE,
    EVENT_TIMER_CHANGED,
    EventBus,
)
from memorymatch.rendering.board_renderer import BoardRenderer
from memorymatch.rendering.leaderboard_renderer import LeaderboardRenderer, format_leaderboard_lines
from memorymatch.ui.layout import compute_board_geometry, side_panel_left

STATUS_COLORS = {
    StatusLevel.INFO: (220, 220, 220),
    StatusLevel.SUCCESS: (46, 204, 113),
    StatusLevel.ERROR: (231, 76, 60),
}


class RenderSystem:
    """Display adapter: mirrors core events into text/face caches and draws them."""

    def __init__(self, world: World, event_bus: EventBus, window):
        self.world = world
        self.event_bus = event_bus
        self.window = window
        self.event_bus.subscribe(EVENT_SESSION_STARTED, self.on_session_started)
        self.event_bus.subscribe(EVENT_CARD_FLIPPED, self.on_card_flipped)
        self.event_bus.subscribe(EVENT_CARDS_UNFLIPPED, self.on_cards_unflipped)
        self.event_bus.subscribe(EVENT_PAIR_MATCHED, self.on_pair_matched)
        self.event_bus.subscribe(EVENT_MOVES_CHANGED, self.on_moves_changed)
        self.event_bus.subscribe(EVENT_TIMER_CHANGED, self.on_timer_changed)
        self.event_bus.subscribe(EVENT_LEADERBOARD_UPDATED, self.on_leaderboard_updated)
        self.event_bus.subscribe(EVENT_STATUS_MESSAGE, self.on_status_message)
        self.card_faces: dict[int, str] = {}
        self.matched_indices: set[int] = set()
        self.moves_text = "Moves: 0"
        self.timer_text = "Time: 0s"
        self.status_text = ""
        self.status_level = StatusLevel.INFO
        self.leaderboard_lines: list[str] = []
        self._board_renderer = BoardRenderer(self)
        self._leaderboard_renderer = LeaderboardRenderer()

    # Event handlers -----------------------------------------------------

    def on_session_started(self, sender, **kwargs):
        cards = kwargs.get('cards') or []
        self.card_faces = {index: HIDDEN_FACE for index in range(len(cards))}
        self.matched_indices = set()

    def on_card_flipped(self, sender, **kwargs):
        index = kwargs.get('index')
        if index is not None:
            self.card_faces[index] = kwargs.get('symbol', HIDDEN_FACE)

    def on_cards_unflipped(self, sender, **kwargs):
        for index in kwargs.get('indices', ()):
            if index not in self.matched_indices:
                self.card_faces[index] = HIDDEN_FACE

    def on_pair_matched(self, sender, **kwargs):
        self.matched_indices.update(kwargs.get('indices', ()))

    def on_moves_changed(self, sender, **kwargs):
        self.moves_text = f"Moves: {kwargs.get('moves', 0)}"

    def on_timer_changed(self, sender, **kwargs):
        self.timer_text = f"Time: {kwargs.get('seconds', 0)}s"

    def on_leaderboard_updated(self, sender, **kwargs):
        self.leaderboard_lines = format_leaderboard_lines(kwargs.get('entries', []))

    def on_status_message(self, sender, **kwargs):
        self.status_text = kwargs.get('text') or ""
        level = kwargs.get('level', StatusLevel.INFO)
        self.status_level = level if isinstance(level, StatusLevel) else StatusLevel.INFO

    # Drawing ------------------------------------------------------------

    def process(self):
        # Local import keeps tests headless without creating a window.
        import arcade
        headless = False
        try:
            arcade.get_window()
        except Exception:
            headless = True
        grid_size = self._grid_size()
        if grid_size is None:
            return
        geometry = compute_board_geometry(self.window.width, self.window.height, grid_size)
        self._board_renderer.render(arcade, geometry, grid_size, headless=headless)
        if headless:
            return
        self._render_hud(arcade, grid_size)

    def _render_hud(self, arcade, grid_size: int) -> None:
        panel_left = side_panel_left(self.window.width, self.window.height, grid_size)
        top = self.window.height - TOP_BAR_HEIGHT
        arcade.draw_text(self.moves_text, panel_left, top - 10, arcade.color.WHITE, 16, bold=True)
        arcade.draw_text(self.timer_text, panel_left, top - 36, arcade.color.WHITE, 16, bold=True)
        if self.status_text:
            arcade.draw_text(
                self.status_text,
                panel_left,
                top - 66,
                STATUS_COLORS.get(self.status_level, arcade.color.WHITE),
                13,
                width=int(max(self.window.width - panel_left - 20, 100)),
                multiline=True,
            )
        self._leaderboard_renderer.render(arcade, self.leaderboard_lines, panel_left, top - 130)

    def _grid_size(self):
        for _, board in self.world.get_component(Board):
            return board.grid_size
        return None
