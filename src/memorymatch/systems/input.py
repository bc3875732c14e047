from esper import World

from memorymatch.components.board import Board
from memorymatch.events.bus import EVENT_CARD_CLICK, EVENT_MOUSE_PRESS, EventBus
from memorymatch.menu.factory import button_at_point
from memorymatch.ui.layout import card_index_at


class InputSystem:
    """Maps left clicks on the board to ``card_click`` events."""

    def __init__(self, event_bus: EventBus, window, world: World):
        self.event_bus = event_bus
        self.window = window
        self.world = world
        self.event_bus.subscribe(EVENT_MOUSE_PRESS, self.on_mouse_press)

    def on_mouse_press(self, sender, **kwargs):
        x = kwargs.get('x')
        y = kwargs.get('y')
        button = kwargs.get('button')
        if x is None or y is None:
            return
        # Left button (1) only.
        if button != 1:
            return
        # Control bar clicks belong to MenuInputSystem.
        if button_at_point(self.world, x, y) is not None:
            return
        grid_size = self._grid_size()
        if grid_size is None:
            return
        index = card_index_at(x, y, self.window.width, self.window.height, grid_size)
        if index is not None:
            self.event_bus.emit(EVENT_CARD_CLICK, index=index)

    def _grid_size(self):
        for _, board in self.world.get_component(Board):
            return board.grid_size
        return None
