"""Input handling for the control bar."""
from esper import World

from memorymatch.events.bus import (
    EVENT_DIFFICULTY_SELECTED,
    EVENT_MOUSE_PRESS,
    EVENT_NEW_GAME_REQUEST,
    EventBus,
)
from memorymatch.menu.components import MenuAction, MenuButton
from memorymatch.menu.factory import button_at_point

# arcade.key values; kept numeric so this module does not need arcade.
KEY_N = 110
KEY_1 = 49


class MenuInputSystem:
    """Turns control bar clicks and shortcut keys into game requests."""

    def __init__(self, world: World, event_bus: EventBus) -> None:
        self.world = world
        self.event_bus = event_bus
        event_bus.subscribe(EVENT_MOUSE_PRESS, self.on_mouse_press)

    def on_mouse_press(self, sender, **payload) -> None:
        x = payload.get("x")
        y = payload.get("y")
        button = payload.get("button")
        if x is None or y is None or button != 1:
            return
        try:
            self.handle_mouse_press(float(x), float(y))
        except (TypeError, ValueError):
            return

    def handle_mouse_press(self, x: float, y: float) -> bool:
        """Activate the button under (x, y); returns True when one was hit."""
        menu_button = button_at_point(self.world, x, y)
        if menu_button is None:
            return False
        self._activate(menu_button)
        return True

    def handle_key_press(self, symbol: int, modifiers: int) -> None:
        """N starts a new game; 1, 2, 3 pick a difficulty in button order."""
        if symbol == KEY_N:
            self.event_bus.emit(EVENT_NEW_GAME_REQUEST)
            return
        slugs = [
            button.difficulty
            for _, button in self.world.get_component(MenuButton)
            if button.action == MenuAction.SELECT_DIFFICULTY
        ]
        position = symbol - KEY_1
        if 0 <= position < len(slugs):
            self.event_bus.emit(EVENT_DIFFICULTY_SELECTED, difficulty=slugs[position])

    def _activate(self, menu_button: MenuButton) -> None:
        if menu_button.action == MenuAction.NEW_GAME:
            self.event_bus.emit(EVENT_NEW_GAME_REQUEST)
        elif menu_button.action == MenuAction.SELECT_DIFFICULTY:
            self.event_bus.emit(EVENT_DIFFICULTY_SELECTED, difficulty=menu_button.difficulty)
