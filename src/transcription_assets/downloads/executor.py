"""Download pipeline for a single transcription asset.

Fetches run in a private staging directory; the final path is written only
after the external tool has succeeded, and only by an atomic rename, so a
failed download never leaves a partial file where the cache expects a good
one.
"""

import shutil
import tempfile
import typing as t
from pathlib import Path

from ..domain.downloads import DownloadStatus
from ..domain.exceptions import (
    DownloadFailedError,
    FilesystemError,
    RootNotConfiguredError,
    ToolUnavailableError,
    TranscriptionDownloaderError,
)
from ..domain.links import BaseAssetLink
from ..events import (
    AssetDownloadCompletedEvent,
    AssetDownloadFailedEvent,
    AssetDownloadSkippedEvent,
    AssetDownloadStartedEvent,
    BaseEmitter,
    ErrorInfo,
    NullEmitter,
)
from ..infrastructure.logging import get_logger
from .handlers.base import BaseLinkHandler
from .handlers.registry import LinkHandlerRegistry
from .locks import PathLockRegistry
from .paths import AssetPathResolver
from .prerequisites import PrerequisiteChecker
from .process.base import BaseProcessRunner

if t.TYPE_CHECKING:
    import loguru

STAGING_PREFIX = "transcription-assets-"


class DownloadExecutor:
    """Runs the skip, fetch, stage and commit steps for one asset.

    Transitions:
        exists and not forced -> SKIPPED, the tool is never run
        otherwise             -> prerequisites -> DOWNLOADING
        DOWNLOADING           -> SUCCEEDED, or FAILED with the error raised

    Implementation decisions:
    - Holds the per-path lock from the existence check to the commit, so
      concurrent calls for the same asset run one after the other and the
      second one skips
    - Skipped, completed and failed events are emitted after the lock is
      released; only started is emitted while it is held
    - Prerequisite failures raise before anything is created or spawned
    - Errors are logged and re-raised, never retried
    """

    def __init__(
        self,
        runner: BaseProcessRunner,
        registry: LinkHandlerRegistry,
        *,
        prerequisites: PrerequisiteChecker | None = None,
        locks: PathLockRegistry | None = None,
        emitter: BaseEmitter | None = None,
        logger: t.Optional["loguru.Logger"] = None,
    ) -> None:
        self._logger = logger or get_logger(__name__)
        self._runner = runner
        self._registry = registry
        self._resolver = AssetPathResolver(registry)
        self._prerequisites = prerequisites or PrerequisiteChecker(
            runner, logger=self._logger
        )
        self._locks = locks if locks is not None else PathLockRegistry()
        self._emitter = emitter or NullEmitter()

    @property
    def emitter(self) -> BaseEmitter:
        """Event emitter for broadcasting download events."""
        return self._emitter

    def execute(
        self,
        exercise_id: str,
        link: BaseAssetLink,
        root: Path | None,
        *,
        force: bool = False,
    ) -> DownloadStatus:
        """Make sure the asset for ``link`` is cached under ``root``.

        Args:
            exercise_id: Exercise the asset belongs to, used in errors
            link: Link to fetch
            root: Download root from the preferences
            force: Fetch again even if the asset is already cached

        Returns:
            SKIPPED if the asset was already cached, SUCCEEDED otherwise.

        Raises:
            RootNotConfiguredError: If ``root`` is None.
            RootMissingError: If ``root`` does not exist.
            ToolUnavailableError: If the external tool cannot be run.
            DownloadFailedError: If the external tool exits with an error.
            FilesystemError: If the result cannot be stored in the cache.
        """
        handler = self._registry.get(link)
        final_path = self._resolver.resolve(root, link)
        if final_path is None:
            raise RootNotConfiguredError()

        failure: TranscriptionDownloaderError | None = None
        total_bytes: int | None = None
        with self._locks.hold(final_path):
            if final_path.exists() and not force:
                self._logger.debug(
                    f"Asset for exercise {exercise_id} already at {final_path}"
                )
            else:
                self._prerequisites.check(root, handler)
                try:
                    total_bytes = self._download(
                        exercise_id, link, handler, final_path, force
                    )
                except TranscriptionDownloaderError as exc:
                    self._logger.error(str(exc))
                    failure = exc

        # Outcome events go out after release; handlers may download again
        if failure is not None:
            self._emitter.emit(
                "download.failed",
                AssetDownloadFailedEvent(
                    exercise_id=exercise_id,
                    url=link.canonical,
                    destination_path=str(final_path),
                    error=ErrorInfo.from_exception(failure),
                ),
            )
            raise failure

        if total_bytes is None:
            self._emitter.emit(
                "download.skipped",
                AssetDownloadSkippedEvent(
                    exercise_id=exercise_id,
                    url=link.canonical,
                    destination_path=str(final_path),
                ),
            )
            return DownloadStatus.SKIPPED

        self._emitter.emit(
            "download.completed",
            AssetDownloadCompletedEvent(
                exercise_id=exercise_id,
                url=link.canonical,
                destination_path=str(final_path),
                total_bytes=total_bytes,
            ),
        )
        self._logger.debug(f"Download completed successfully: {final_path}")
        return DownloadStatus.SUCCEEDED

    def _download(
        self,
        exercise_id: str,
        link: BaseAssetLink,
        handler: BaseLinkHandler,
        final_path: Path,
        force: bool,
    ) -> int:
        """Fetch into a staging directory and commit; return the stored size."""
        self._logger.debug(
            f"Starting download for exercise {exercise_id}: "
            f"{link.canonical} -> {final_path}"
        )
        self._emitter.emit(
            "download.started",
            AssetDownloadStartedEvent(
                exercise_id=exercise_id,
                url=link.canonical,
                destination_path=str(final_path),
                force=force,
            ),
        )

        with tempfile.TemporaryDirectory(prefix=STAGING_PREFIX) as staging_dir:
            staged_file = Path(staging_dir) / handler.file_name
            self._fetch(exercise_id, link, handler, staged_file)
            return self._commit(exercise_id, staged_file, final_path)

    def _fetch(
        self,
        exercise_id: str,
        link: BaseAssetLink,
        handler: BaseLinkHandler,
        staged_file: Path,
    ) -> None:
        """Run the external tool once, writing into the staging directory."""
        command = handler.download_command(link, staged_file)
        try:
            result = self._runner.run(command, capture_stderr=True)
        except OSError as exc:
            raise ToolUnavailableError(handler.tool, f"cannot be started: {exc}") from exc

        if not result.succeeded:
            raise DownloadFailedError(
                exercise_id=exercise_id,
                url=link.canonical,
                diagnostic=result.stderr.strip(),
            )

    def _commit(self, exercise_id: str, staged_file: Path, final_path: Path) -> int:
        """Copy the staged file over the final path and return its size.

        The copy goes to a hidden sibling first and is renamed into place, so
        an existing good copy survives a failed copy.
        """
        partial_path = final_path.with_name(f".{final_path.name}.partial")
        try:
            final_path.parent.mkdir(parents=True, exist_ok=True)
            shutil.copyfile(staged_file, partial_path)
            partial_path.replace(final_path)
            return final_path.stat().st_size
        except OSError as exc:
            self._cleanup_partial_file(partial_path)
            raise FilesystemError(
                exercise_id=exercise_id, path=final_path, reason=str(exc)
            ) from exc

    def _cleanup_partial_file(self, file_path: Path) -> None:
        """Remove a leftover partial copy.

        Logs cleanup failures but doesn't raise, so the original error is
        the one reported.
        """
        try:
            file_path.unlink(missing_ok=True)
        except OSError as cleanup_error:
            self._logger.warning(
                f"Failed to clean up partial file {file_path}: {cleanup_error}"
            )
