from __future__ import annotations

from esper import World

from memorymatch.components.game_timer import GameTimer
from memorymatch.constants import TIMER_STEP
from memorymatch.events.bus import (
    EVENT_TICK,
    EVENT_TIMER_CHANGED,
    EVENT_TIMER_RESET,
    EVENT_TIMER_START,
    EVENT_TIMER_STOP,
    EventBus,
)


class TimerSystem:
    """Counts whole seconds of tick time while a session is running."""

    def __init__(self, world: World, event_bus: EventBus, *, step: float = TIMER_STEP) -> None:
        self.world = world
        self.event_bus = event_bus
        self.step = step
        self.event_bus.subscribe(EVENT_TIMER_START, self.on_timer_start)
        self.event_bus.subscribe(EVENT_TIMER_STOP, self.on_timer_stop)
        self.event_bus.subscribe(EVENT_TIMER_RESET, self.on_timer_reset)
        self.event_bus.subscribe(EVENT_TICK, self.on_tick)

    def _timer(self) -> GameTimer:
        for _, timer in self.world.get_component(GameTimer):
            return timer
        timer = GameTimer()
        self.world.create_entity(timer)
        return timer

    @property
    def elapsed_seconds(self) -> int:
        return self._timer().elapsed_seconds

    def on_timer_start(self, sender, **payload) -> None:
        timer = self._timer()
        # A second start replaces the running one; drop its partial second.
        timer.carry = 0.0
        timer.running = True

    def on_timer_stop(self, sender, **payload) -> None:
        timer = self._timer()
        timer.running = False
        timer.carry = 0.0

    def on_timer_reset(self, sender, **payload) -> None:
        timer = self._timer()
        timer.running = False
        timer.carry = 0.0
        timer.elapsed_seconds = 0
        self.event_bus.emit(EVENT_TIMER_CHANGED, seconds=0)

    def on_tick(self, sender, **payload) -> None:
        timer = self._timer()
        if not timer.running:
            return
        try:
            dt = float(payload.get("dt", 1 / 60))
        except (TypeError, ValueError):
            return
        if not dt > 0:
            return
        timer.carry += dt
        while timer.carry >= self.step:
            timer.carry -= self.step
            timer.elapsed_seconds += 1
            self.event_bus.emit(EVENT_TIMER_CHANGED, seconds=timer.elapsed_seconds)
