"""Emitter used when nobody listens for download events."""

import typing as t

from .base import BaseEmitter, EventHandler

if t.TYPE_CHECKING:
    from .models import AssetDownloadEvent


class NullEmitter(BaseEmitter):
    """Accepts subscriptions and drops every event."""

    def on(self, event_type: str, handler: EventHandler) -> None:
        pass

    def off(self, event_type: str, handler: EventHandler) -> None:
        pass

    def emit(self, event_type: str, event: "AssetDownloadEvent") -> None:
        pass
