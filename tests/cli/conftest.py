"""Shared fixtures for CLI tests."""

from dataclasses import replace
from pathlib import Path

import pytest
from typer.testing import CliRunner

from transcription_assets.cli.app import create_cli_app
from transcription_assets.cli.state import CLIState
from transcription_assets.config.settings import Environment, LogLevel, Settings
from transcription_assets.downloads import LocalTranscriptionDownloader
from transcription_assets.manifests import EXERCISE_MANIFEST_FILENAME


@pytest.fixture
def cli_runner():
    """Provide Typer CLI test runner."""
    return CliRunner()


@pytest.fixture
def library(tmp_path: Path, youtube_link, manifest_factory) -> Path:
    """Course library with one linked and one unlinked transcription exercise."""
    library_dir = tmp_path / "library"
    for name, manifest in (
        ("exercise_1", manifest_factory(youtube_link, exercise_id="exercise_id")),
        ("exercise_2", manifest_factory(None, exercise_id="no_link")),
    ):
        exercise_dir = library_dir / "guitar" / "lesson_1" / name
        exercise_dir.mkdir(parents=True)
        (exercise_dir / EXERCISE_MANIFEST_FILENAME).write_text(
            manifest.model_dump_json()
        )
    return library_dir


@pytest.fixture
def cli_settings(library: Path, download_root: Path) -> Settings:
    """Provide quiet Settings pointing at the test library and root."""
    return Settings(
        environment=Environment.TESTING,
        log_level=LogLevel.CRITICAL,
        download_root=download_root,
        library_dir=library,
    )


@pytest.fixture
def make_cli_app(cli_settings, recording_runner):
    """Factory fixture for CLI apps whose downloads use a tool stand-in.

    Usage:
        def test_something(make_cli_app, failing_runner):
            app = make_cli_app(runner=failing_runner, download_root=None)
    """

    def _make(runner=None, registry=None, **settings_overrides):
        tool = runner or recording_runner

        def downloader_factory(preferences, manifests):
            return LocalTranscriptionDownloader(
                preferences, manifests, runner=tool, registry=registry
            )

        settings = replace(cli_settings, **settings_overrides)
        return create_cli_app(state=CLIState(settings, downloader_factory))

    return _make


@pytest.fixture
def cli_app(make_cli_app):
    """CLI app over the test library with a succeeding tool stand-in."""
    return make_cli_app()


@pytest.fixture
def default_app():
    """Provide CLI app with default settings."""
    return create_cli_app()
