"""Content-addressed download cache for transcription exercise assets."""

from .downloads import LocalTranscriptionDownloader
from .domain import DownloadPreferences, DownloadStatus, YouTubeLink
from .manifests import DirectoryManifestLookup, InMemoryManifestLookup

__all__ = [
    "LocalTranscriptionDownloader",
    "DownloadPreferences",
    "DownloadStatus",
    "YouTubeLink",
    "DirectoryManifestLookup",
    "InMemoryManifestLookup",
]
