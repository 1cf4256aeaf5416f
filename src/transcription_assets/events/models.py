"""Events emitted while downloading transcription assets."""

import traceback as tb
from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field


class BaseEvent(BaseModel):
    """Immutable base for all events."""

    model_config = ConfigDict(frozen=True)

    occurred_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="When the event occurred (UTC)",
    )


class ErrorInfo(BaseModel):
    """Serializable description of an exception."""

    model_config = ConfigDict(frozen=True)

    exc_type: str = Field(description="Fully qualified exception class name")
    message: str = Field(description="Exception message")
    traceback: str | None = Field(default=None, description="Formatted traceback")

    @classmethod
    def from_exception(
        cls, exc: BaseException, include_traceback: bool = False
    ) -> "ErrorInfo":
        exc_class = type(exc)
        return cls(
            exc_type=f"{exc_class.__module__}.{exc_class.__qualname__}",
            message=str(exc),
            traceback="".join(tb.format_exception(exc)) if include_traceback else None,
        )


class AssetDownloadEvent(BaseEvent):
    """Base class for asset download lifecycle events."""

    event_type: str = Field(default="download.base", description="Event type")
    exercise_id: str = Field(description="Exercise the asset belongs to")
    url: str = Field(description="Canonical link of the asset")
    destination_path: str = Field(description="Final path of the cached asset")


class AssetDownloadStartedEvent(AssetDownloadEvent):
    """Emitted after prerequisites pass, right before the tool runs."""

    event_type: str = Field(default="download.started")
    force: bool = Field(default=False, description="Whether this is a redownload")


class AssetDownloadSkippedEvent(AssetDownloadEvent):
    """Emitted when the asset is already cached and no redownload was asked."""

    event_type: str = Field(default="download.skipped")


class AssetDownloadCompletedEvent(AssetDownloadEvent):
    """Emitted once the asset has been copied to its final path."""

    event_type: str = Field(default="download.completed")
    total_bytes: int = Field(default=0, ge=0, description="Size of the stored file")


class AssetDownloadFailedEvent(AssetDownloadEvent):
    """Emitted when the tool or the final copy fails."""

    event_type: str = Field(default="download.failed")
    error: ErrorInfo
