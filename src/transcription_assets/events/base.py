"""Emitter interface for asset download events."""

import typing as t
from abc import ABC, abstractmethod

if t.TYPE_CHECKING:
    from .models import AssetDownloadEvent

EventHandler = t.Callable[["AssetDownloadEvent"], t.Any]


class BaseEmitter(ABC):
    """Publishes ``download.*`` events to subscribers.

    Event types: ``download.started``, ``download.skipped``,
    ``download.completed`` and ``download.failed``. Emission is synchronous;
    it returns once every handler has run.
    """

    @abstractmethod
    def on(self, event_type: str, handler: EventHandler) -> None:
        """Subscribe ``handler`` to ``event_type``."""

    @abstractmethod
    def off(self, event_type: str, handler: EventHandler) -> None:
        """Remove a previously subscribed handler."""

    @abstractmethod
    def emit(self, event_type: str, event: "AssetDownloadEvent") -> None:
        """Deliver ``event`` to every handler of ``event_type``."""
