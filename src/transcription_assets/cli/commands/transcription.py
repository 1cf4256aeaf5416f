"""Transcription asset commands."""

import typer

from ...domain.exceptions import TranscriptionDownloaderError
from ...downloads import LocalTranscriptionDownloader
from ..output.display import (
    display_download_result,
    display_error,
    display_paths,
    display_status,
)
from ..state import CLIState


def _create_downloader(state: CLIState) -> LocalTranscriptionDownloader:
    """Build the downloader, turning configuration errors into exit code 1."""
    try:
        return state.create_downloader()
    except TranscriptionDownloaderError as e:
        display_error(e)
        raise typer.Exit(code=1)


def _show_paths(downloader: LocalTranscriptionDownloader, exercise_id: str) -> None:
    display_paths(
        downloader.resolved_path(exercise_id),
        downloader.resolved_alias_path(exercise_id),
    )


def download(
    ctx: typer.Context,
    exercise_id: str = typer.Argument(..., help="Exercise whose asset to download"),
    force: bool = typer.Option(
        False, "--force", "-f", help="Download again even if already cached"
    ),
) -> None:
    """Download the transcription asset of an exercise.

    Examples:
        tassets download guitar::lesson_1::exercise_3
        tassets --download-root ~/Music/trane download guitar::lesson_1::exercise_3 -f
    """
    state: CLIState = ctx.obj
    downloader = _create_downloader(state)

    try:
        status = downloader.download(exercise_id, force=force)
        display_download_result(exercise_id, status)
        _show_paths(downloader, exercise_id)
    except TranscriptionDownloaderError as e:
        display_error(e)
        raise typer.Exit(code=1)


def path(
    ctx: typer.Context,
    exercise_id: str = typer.Argument(..., help="Exercise to locate"),
) -> None:
    """Show where the transcription asset of an exercise is stored."""
    state: CLIState = ctx.obj
    downloader = _create_downloader(state)

    try:
        _show_paths(downloader, exercise_id)
    except TranscriptionDownloaderError as e:
        display_error(e)
        raise typer.Exit(code=1)


def status(
    ctx: typer.Context,
    exercise_id: str = typer.Argument(..., help="Exercise to check"),
) -> None:
    """Show whether the transcription asset of an exercise is downloaded."""
    state: CLIState = ctx.obj
    downloader = _create_downloader(state)

    try:
        is_downloaded = downloader.is_downloaded(exercise_id)
        display_status(exercise_id, is_downloaded)
        if is_downloaded:
            _show_paths(downloader, exercise_id)
    except TranscriptionDownloaderError as e:
        display_error(e)
        raise typer.Exit(code=1)
