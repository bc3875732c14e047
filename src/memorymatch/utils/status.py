from __future__ import annotations

import logging

from memorymatch.components.status_message import StatusLevel
from memorymatch.events.bus import EVENT_STATUS_MESSAGE, EventBus

logger = logging.getLogger(__name__)


def show_status(event_bus: EventBus, text: str, level: StatusLevel = StatusLevel.INFO) -> None:
    event_bus.emit(EVENT_STATUS_MESSAGE, text=text, level=level)


def report_error(event_bus: EventBus, message: str, error: BaseException | None = None) -> None:
    """Log ``message`` and surface it on the status line as an error."""
    if error is not None:
        logger.error("Memory Match error: %s: %s", message, error)
    else:
        logger.error("Memory Match error: %s", message)
    show_status(event_bus, f"⚠️ {message}", StatusLevel.ERROR)
