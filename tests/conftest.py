"""Pytest configuration and fixtures for transcription_assets tests."""

import typing as t
from pathlib import Path

import loguru
import pytest

from transcription_assets.app import create_app
from transcription_assets.config.settings import Environment, LogLevel, Settings
from transcription_assets.domain.links import YouTubeLink
from transcription_assets.domain.manifest import (
    ExerciseManifest,
    InlineAsset,
    TranscriptionAsset,
)
from transcription_assets.domain.preferences import DownloadPreferences
from transcription_assets.downloads import LocalTranscriptionDownloader
from transcription_assets.downloads.process.base import (
    BaseProcessRunner,
    ProcessResult,
)
from transcription_assets.events import BaseEmitter
from transcription_assets.infrastructure.logging import reset_logging
from transcription_assets.manifests import InMemoryManifestLookup

YT_LINK = "https://www.youtube.com/watch?v=p4LgzLjF4xE"
EXERCISE_ID = "exercise_id"


class RecordingProcessRunner(BaseProcessRunner):
    """Stand-in for yt-dlp that records every command it is given.

    Probe commands (anything without ``--output``) exit with
    ``probe_returncode``. Download commands write ``content`` to the output
    path and exit with ``download_returncode``; failing downloads still
    leave a partial file behind, like an interrupted transcode would.
    """

    def __init__(
        self,
        *,
        probe_returncode: int = 0,
        download_returncode: int = 0,
        stderr: str = "",
        content: bytes = b"m4a audio",
        missing: bool = False,
    ) -> None:
        self.probe_returncode = probe_returncode
        self.download_returncode = download_returncode
        self.stderr = stderr
        self.content = content
        self.missing = missing
        self.calls: list[list[str]] = []
        self.output_paths: list[Path] = []

    def run(
        self, command: t.Sequence[str], *, capture_stderr: bool = False
    ) -> ProcessResult:
        command = list(command)
        self.calls.append(command)
        if self.missing:
            raise FileNotFoundError(f"No such file or directory: '{command[0]}'")

        if "--output" not in command:
            return ProcessResult(returncode=self.probe_returncode)

        output_path = Path(command[command.index("--output") + 1])
        self.output_paths.append(output_path)
        if self.download_returncode != 0:
            output_path.write_bytes(self.content[:1])
            return ProcessResult(
                returncode=self.download_returncode,
                stderr=self.stderr if capture_stderr else "",
            )

        output_path.write_bytes(self.content)
        return ProcessResult(returncode=0)

    @property
    def download_calls(self) -> list[list[str]]:
        return [command for command in self.calls if "--output" in command]

    @property
    def probe_calls(self) -> list[list[str]]:
        return [command for command in self.calls if "--output" not in command]


def build_manifest(
    link: YouTubeLink | None = None, exercise_id: str = EXERCISE_ID
) -> ExerciseManifest:
    """Transcription exercise manifest with an optional external link."""
    return ExerciseManifest(
        id=exercise_id,
        lesson_id="lesson_id",
        course_id="course_id",
        name="Exercise Name",
        exercise_asset=TranscriptionAsset(content="content", external_link=link),
    )


@pytest.fixture(autouse=True)
def clean_logging_state():
    """Automatically reset logging before each test for isolation."""
    reset_logging()
    yield
    reset_logging()


@pytest.fixture
def test_settings():
    """Provide test-specific settings."""
    return Settings(
        environment=Environment.TESTING,
        log_level=LogLevel.CRITICAL,  # Minimal logging during tests
    )


@pytest.fixture
def test_app(test_settings):
    """Provide a test app with clean logging state."""
    app = create_app(settings=test_settings)
    yield app
    reset_logging()


@pytest.fixture
def mock_logger(mocker):
    """Provide a mock logger for testing that captures log calls."""
    return mocker.Mock(spec=loguru.logger)


@pytest.fixture
def mock_emitter(mocker):
    """Provide a mock event emitter for testing event emission."""
    return mocker.Mock(spec=BaseEmitter)


@pytest.fixture
def manifest_factory():
    """Factory fixture for transcription exercise manifests."""
    return build_manifest


@pytest.fixture
def runner_factory():
    """Factory fixture for configurable tool stand-ins."""
    return RecordingProcessRunner


@pytest.fixture
def youtube_link() -> YouTubeLink:
    return YouTubeLink(url=YT_LINK)


@pytest.fixture
def recording_runner() -> RecordingProcessRunner:
    """Provide a tool stand-in that succeeds and records its invocations."""
    return RecordingProcessRunner()


@pytest.fixture
def failing_runner() -> RecordingProcessRunner:
    """Provide a tool stand-in whose downloads exit with an error."""
    return RecordingProcessRunner(
        download_returncode=1, stderr="ERROR: [youtube] badID: Video unavailable"
    )


@pytest.fixture
def download_root(tmp_path: Path) -> Path:
    """Provide an existing, empty download root."""
    root = tmp_path / "downloads"
    root.mkdir()
    return root


@pytest.fixture
def manifests(youtube_link) -> InMemoryManifestLookup:
    """Lookup with one linked exercise, one unlinked and one inline exercise."""
    return InMemoryManifestLookup(
        [
            build_manifest(youtube_link),
            build_manifest(None, exercise_id="no_link"),
            ExerciseManifest(
                id="inline",
                lesson_id="lesson_id",
                course_id="course_id",
                name="Inline",
                exercise_asset=InlineAsset(content="content"),
            ),
        ]
    )


@pytest.fixture
def make_downloader(manifests, recording_runner, mock_logger):
    """Factory fixture building a downloader over the shared manifests.

    Usage:
        def test_something(make_downloader, download_root):
            downloader = make_downloader(download_root=download_root)
    """

    def _make(
        download_root: Path | None = None,
        download_root_alias: Path | None = None,
        runner: BaseProcessRunner | None = None,
        **kwargs: t.Any,
    ) -> LocalTranscriptionDownloader:
        preferences = DownloadPreferences(
            download_root=download_root, download_root_alias=download_root_alias
        )
        return LocalTranscriptionDownloader(
            preferences,
            manifests,
            runner=runner or recording_runner,
            logger=mock_logger,
            **kwargs,
        )

    return _make
