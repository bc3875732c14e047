from __future__ import annotations

from esper import World

from memorymatch.components.status_message import StatusLevel, StatusMessage
from memorymatch.events.bus import EVENT_STATUS_MESSAGE, EventBus


class StatusSystem:
    """Keeps the single StatusMessage component in sync with status events."""

    def __init__(self, world: World, event_bus: EventBus) -> None:
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_STATUS_MESSAGE, self.on_status_message)

    def current(self) -> StatusMessage:
        for _, message in self.world.get_component(StatusMessage):
            return message
        message = StatusMessage()
        self.world.create_entity(message)
        return message

    def on_status_message(self, sender, **payload) -> None:
        level = payload.get("level", StatusLevel.INFO)
        if not isinstance(level, StatusLevel):
            try:
                level = StatusLevel(level)
            except ValueError:
                level = StatusLevel.INFO
        message = self.current()
        message.text = str(payload.get("text") or "")
        message.level = level
