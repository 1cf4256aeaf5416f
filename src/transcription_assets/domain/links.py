"""External asset link models."""

import enum
from abc import abstractmethod
import typing as t

from pydantic import BaseModel, ConfigDict, Field


class LinkProvider(enum.StrEnum):
    """Hosts an asset link can point to."""

    YOUTUBE = "youtube"


class BaseAssetLink(BaseModel):
    """Reference to an externally hosted asset.

    Subclasses pin ``provider`` to a single LinkProvider value so links
    deserialize as a union discriminated on that field.
    """

    model_config = ConfigDict(frozen=True)

    provider: LinkProvider

    @property
    @abstractmethod
    def canonical(self) -> str:
        """String payload that identifies the asset. Hashed to build paths."""


class YouTubeLink(BaseAssetLink):
    """Link to a video, downloaded with yt-dlp.

    Any URL yt-dlp accepts works here, including ``file://`` URLs.
    """

    provider: t.Literal["youtube"] = LinkProvider.YOUTUBE.value
    url: str = Field(min_length=1, description="Video URL")

    @property
    def canonical(self) -> str:
        return self.url


# New providers join this alias as a union discriminated on ``provider``.
AssetLink: t.TypeAlias = YouTubeLink
