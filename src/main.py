"""Entry point for the Memory Match card game.

Sets up ECS world, event bus, systems, and Arcade window.
"""
import logging

from arcade import Window, run, set_background_color, color
from memorymatch.constants import WINDOW_HEIGHT, WINDOW_WIDTH
from memorymatch.world import create_world
from memorymatch.events.bus import EVENT_MOUSE_PRESS, EVENT_TICK, EventBus
from memorymatch.menu.factory import clear_controls, spawn_controls
from memorymatch.menu.input_system import MenuInputSystem
from memorymatch.menu.render_system import MenuRenderSystem
from memorymatch.systems.input import InputSystem
from memorymatch.systems.leaderboard_system import LeaderboardSystem
from memorymatch.systems.render import RenderSystem
from memorymatch.systems.session_system import GameSessionSystem
from memorymatch.systems.status_system import StatusSystem
from memorymatch.systems.timer_system import TimerSystem
from memorymatch.systems.turn_system import TurnSystem
from memorymatch.utils.status import report_error

logger = logging.getLogger(__name__)


class MemoryMatchWindow(Window):
    def __init__(self):
        super().__init__(WINDOW_WIDTH, WINDOW_HEIGHT, "Memory Match", resizable=True)
        self.set_update_rate(1/60)
        self.event_bus = EventBus()
        self.world = create_world()

        # Interface systems
        self.status_system = StatusSystem(self.world, self.event_bus)
        self.render_system = RenderSystem(self.world, self.event_bus, self)
        spawn_controls(self.world, self.width, self.height)
        self.menu_input_system = MenuInputSystem(self.world, self.event_bus)
        self.menu_render_system = MenuRenderSystem(self.world, self)
        self.input_system = InputSystem(self.event_bus, self, self.world)

        # Game systems
        self.timer_system = TimerSystem(self.world, self.event_bus)
        self.turn_system = TurnSystem(self.world, self.event_bus)
        # Win status is shown before the leaderboard saves; a save error replaces it.
        self.session_system = GameSessionSystem(self.world, self.event_bus, start_immediately=False)
        self.leaderboard_system = LeaderboardSystem(self.world, self.event_bus)
        self.session_system.new_game()

        self._last_draw_error: str | None = None
        set_background_color(color.BLACK)

    def on_resize(self, width: int, height: int):
        # Control bar is anchored to the top edge; rebuild it for the new size.
        if hasattr(self, "world"):
            clear_controls(self.world)
            spawn_controls(self.world, width, height)
        return super().on_resize(width, height)

    def on_draw(self):
        self.clear()
        try:
            self.render_system.process()
            self.menu_render_system.process()
        except Exception as exc:
            message = repr(exc)
            if message != self._last_draw_error:
                self._last_draw_error = message
                report_error(self.event_bus, "Failed to draw the game", exc)
        else:
            self._last_draw_error = None

    def on_update(self, delta_time: float):
        self.event_bus.emit(EVENT_TICK, dt=delta_time)

    def on_mouse_press(self, x: float, y: float, button: int, modifiers: int):
        self.event_bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=button)

    def on_key_press(self, symbol: int, modifiers: int):
        self.menu_input_system.handle_key_press(symbol, modifiers)


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logger.info("Starting Memory Match")
    window = MemoryMatchWindow()
    run()

if __name__ == "__main__":
    main()
