"""Domain models and exceptions."""

from .downloads import DownloadStatus
from .exceptions import (
    DownloadFailedError,
    FilesystemError,
    ManifestError,
    PrerequisiteError,
    RootMissingError,
    RootNotConfiguredError,
    ToolUnavailableError,
    TranscriptionDownloaderError,
    UnsupportedProviderError,
)
from .links import AssetLink, BaseAssetLink, LinkProvider, YouTubeLink
from .manifest import (
    ExerciseAsset,
    ExerciseManifest,
    ExerciseType,
    FlashcardAsset,
    InlineAsset,
    MarkdownAsset,
    TranscriptionAsset,
)
from .preferences import DownloadPreferences, Instrument, UserPreferences

__all__ = [
    # Links
    "AssetLink",
    "BaseAssetLink",
    "LinkProvider",
    "YouTubeLink",
    # Manifests
    "ExerciseAsset",
    "ExerciseManifest",
    "ExerciseType",
    "FlashcardAsset",
    "InlineAsset",
    "MarkdownAsset",
    "TranscriptionAsset",
    # Preferences
    "DownloadPreferences",
    "Instrument",
    "UserPreferences",
    # Status
    "DownloadStatus",
    # Exceptions
    "TranscriptionDownloaderError",
    "PrerequisiteError",
    "ToolUnavailableError",
    "RootNotConfiguredError",
    "RootMissingError",
    "DownloadFailedError",
    "FilesystemError",
    "ManifestError",
    "UnsupportedProviderError",
]
