"""Download operations - downloader, executor, handlers and process runners."""

from ..domain.exceptions import (
    DownloadFailedError,
    FilesystemError,
    RootMissingError,
    RootNotConfiguredError,
    ToolUnavailableError,
    TranscriptionDownloaderError,
    UnsupportedProviderError,
)
from .downloader import LocalTranscriptionDownloader
from .executor import DownloadExecutor
from .handlers import (
    BaseLinkHandler,
    LinkHandlerRegistry,
    YouTubeLinkHandler,
    create_default_registry,
)
from .links import extract_transcription_link, get_transcription_link
from .locks import PathLockRegistry
from .paths import AssetPathResolver, download_dir_name
from .prerequisites import PrerequisiteChecker
from .process import BaseProcessRunner, ProcessResult, SubprocessRunner

__all__ = [
    # Core downloads
    "LocalTranscriptionDownloader",
    "DownloadExecutor",
    "PrerequisiteChecker",
    "PathLockRegistry",
    # Links and paths
    "extract_transcription_link",
    "get_transcription_link",
    "AssetPathResolver",
    "download_dir_name",
    # Handlers
    "BaseLinkHandler",
    "LinkHandlerRegistry",
    "YouTubeLinkHandler",
    "create_default_registry",
    # Processes
    "BaseProcessRunner",
    "ProcessResult",
    "SubprocessRunner",
    # Errors
    "TranscriptionDownloaderError",
    "ToolUnavailableError",
    "RootNotConfiguredError",
    "RootMissingError",
    "DownloadFailedError",
    "FilesystemError",
    "UnsupportedProviderError",
]
