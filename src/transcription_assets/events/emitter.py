"""Synchronous in-process event emitter."""

import typing as t
from collections import defaultdict

from ..infrastructure.logging import get_logger
from .base import BaseEmitter, EventHandler

if t.TYPE_CHECKING:
    import loguru

    from .models import AssetDownloadEvent


class EventEmitter(BaseEmitter):
    """Dispatches events to subscribed handlers in subscription order.

    A failing handler is logged and skipped so it cannot break the download
    that emitted the event.
    """

    def __init__(self, logger: t.Optional["loguru.Logger"] = None) -> None:
        self._logger = logger or get_logger(__name__)
        self._handlers: dict[str, list[EventHandler]] = defaultdict(list)

    def on(self, event_type: str, handler: EventHandler) -> None:
        self._handlers[event_type].append(handler)

    def off(self, event_type: str, handler: EventHandler) -> None:
        try:
            self._handlers[event_type].remove(handler)
        except ValueError:
            self._logger.warning(f"Handler {handler} not found for event {event_type}")

    def emit(self, event_type: str, event: "AssetDownloadEvent") -> None:
        # Copy so handlers may unsubscribe while being dispatched
        for handler in list(self._handlers.get(event_type, [])):
            try:
                handler(event)
            except Exception as exc:
                self._logger.error(
                    f"Error in event handler for {event_type}: {exc}"
                )
