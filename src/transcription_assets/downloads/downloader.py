"""Local cache of transcription assets."""

import typing as t
from pathlib import Path

from ..domain.downloads import DownloadStatus
from ..domain.preferences import DownloadPreferences
from ..events import BaseEmitter
from ..infrastructure.logging import get_logger
from ..manifests.base import BaseManifestLookup
from .executor import DownloadExecutor
from .handlers.registry import LinkHandlerRegistry, create_default_registry
from .links import get_transcription_link
from .locks import PathLockRegistry
from .paths import AssetPathResolver
from .process.base import BaseProcessRunner
from .process.runner import SubprocessRunner

if t.TYPE_CHECKING:
    import loguru


class LocalTranscriptionDownloader:
    """Downloads the external assets of transcription exercises to disk.

    Every operation looks the exercise up again through the injected
    manifest lookup; nothing about exercises or downloads is remembered
    between calls. Whether an asset is cached is decided by recomputing its
    path and checking the filesystem.

    Example:
        ```python
        downloader = LocalTranscriptionDownloader(
            DownloadPreferences(download_root=Path("~/Music/trane").expanduser()),
            DirectoryManifestLookup(Path("courses")),
        )
        if not downloader.is_downloaded("guitar::lesson_1::exercise_3"):
            downloader.download("guitar::lesson_1::exercise_3")
        ```
    """

    def __init__(
        self,
        preferences: DownloadPreferences,
        manifests: BaseManifestLookup,
        *,
        runner: BaseProcessRunner | None = None,
        registry: LinkHandlerRegistry | None = None,
        locks: PathLockRegistry | None = None,
        emitter: BaseEmitter | None = None,
        logger: t.Optional["loguru.Logger"] = None,
    ) -> None:
        """Initialize the downloader.

        Args:
            preferences: Download and alias roots
            manifests: Lookup used to find each exercise's link
            runner: Process runner for the external tool. If None, a
                    SubprocessRunner is used.
            registry: Handlers for each link provider. If None, the default
                      registry (yt-dlp for YouTube links) is used.
            locks: Per-path lock registry. Share one between downloaders that
                   write to the same root.
            emitter: Receives download.* events. If None, events are dropped.
            logger: Logger instance. If None, a module logger is used.
        """
        self.preferences = preferences
        self._manifests = manifests
        self._logger = logger or get_logger(__name__)
        if registry is None:
            registry = create_default_registry()
        self._resolver = AssetPathResolver(registry)
        self._executor = DownloadExecutor(
            runner or SubprocessRunner(),
            registry,
            locks=locks,
            emitter=emitter,
            logger=self._logger,
        )

    @property
    def emitter(self) -> BaseEmitter:
        """Event emitter for broadcasting download events."""
        return self._executor.emitter

    def is_downloaded(self, exercise_id: str) -> bool:
        """Whether the exercise's asset is present in the download root.

        False when no root is set or the exercise has no external link. Never
        runs the external tool.
        """
        download_path = self.resolved_path(exercise_id)
        if download_path is None:
            return False
        return download_path.exists()

    def download(self, exercise_id: str, force: bool = False) -> DownloadStatus:
        """Download the exercise's asset unless it is already cached.

        Args:
            exercise_id: Exercise whose asset to fetch
            force: Fetch again and overwrite an existing copy

        Returns:
            NOT_REQUESTED if the exercise has no external link, SKIPPED if the
            asset was already cached, SUCCEEDED after a fresh download.

        Raises:
            TranscriptionDownloaderError: Any subclass describing the failure.
        """
        link = get_transcription_link(exercise_id, self._manifests)
        if link is None:
            self._logger.debug(f"Exercise {exercise_id} has no asset to download")
            return DownloadStatus.NOT_REQUESTED

        return self._executor.execute(
            exercise_id, link, self.preferences.download_root, force=force
        )

    def resolved_path(self, exercise_id: str) -> Path | None:
        """Path of the exercise's asset under the download root.

        Returned whether or not the asset has been downloaded. None when no
        root is set or the exercise has no external link.
        """
        link = get_transcription_link(exercise_id, self._manifests)
        if link is None:
            return None
        return self._resolver.resolve(self.preferences.download_root, link)

    def resolved_alias_path(self, exercise_id: str) -> Path | None:
        """Path of the exercise's asset under the alias root, for display."""
        link = get_transcription_link(exercise_id, self._manifests)
        if link is None:
            return None
        return self._resolver.resolve(self.preferences.download_root_alias, link)
