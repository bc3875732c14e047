"""Rendering system responsible for drawing the control bar."""
import arcade
from esper import World

from memorymatch.components.game_state import GameState
from memorymatch.menu.components import MenuAction, MenuButton


class MenuRenderSystem:
    """Draws control buttons; the active difficulty is highlighted."""

    def __init__(self, world: World, window) -> None:
        self.world = world
        self.window = window

    def process(self) -> None:
        active = self._active_difficulty()
        for _, button in self.world.get_component(MenuButton):
            left = button.x - button.width / 2
            bottom = button.y - button.height / 2
            selected = button.action == MenuAction.SELECT_DIFFICULTY and button.difficulty == active
            if not button.enabled:
                fill_color = arcade.color.GRAY_BLUE
            elif selected:
                fill_color = arcade.color.ROYAL_BLUE
            else:
                fill_color = arcade.color.DARK_SLATE_BLUE
            outline_color = arcade.color.WHITE if button.enabled else arcade.color.SILVER
            arcade.draw_lbwh_rectangle_filled(left, bottom, button.width, button.height, fill_color)
            arcade.draw_lbwh_rectangle_outline(
                left,
                bottom,
                button.width,
                button.height,
                outline_color,
                border_width=3 if selected else 2,
            )
            arcade.draw_text(
                button.label,
                button.x,
                button.y,
                outline_color,
                16,
                anchor_x="center",
                anchor_y="center",
                bold=True,
            )

    def _active_difficulty(self) -> str | None:
        for _, state in self.world.get_component(GameState):
            return state.difficulty
        return None
