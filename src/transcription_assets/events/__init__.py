"""Event infrastructure - event emitter and event types."""

from .base import BaseEmitter
from .emitter import EventEmitter
from .models import (
    AssetDownloadCompletedEvent,
    AssetDownloadEvent,
    AssetDownloadFailedEvent,
    AssetDownloadSkippedEvent,
    AssetDownloadStartedEvent,
    BaseEvent,
    ErrorInfo,
)
from .null import NullEmitter

__all__ = [
    # Base and implementations
    "BaseEmitter",
    "EventEmitter",
    "NullEmitter",
    # Models
    "BaseEvent",
    "ErrorInfo",
    "AssetDownloadEvent",
    "AssetDownloadStartedEvent",
    "AssetDownloadSkippedEvent",
    "AssetDownloadCompletedEvent",
    "AssetDownloadFailedEvent",
]
