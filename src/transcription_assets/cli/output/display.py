"""Output functions for CLI commands."""

from pathlib import Path

import typer

from ...domain.downloads import DownloadStatus


def display_paths(path: Path | None, alias_path: Path | None) -> None:
    """Print the download path and its alias, skipping unset ones.

    Args:
        path: Path under the download root
        alias_path: Path under the alias root
    """
    if path is not None:
        typer.echo(f"Transcription asset download path: {path}")
    if alias_path is not None:
        typer.echo(f"Transcription asset download path alias: {alias_path}")


def display_download_result(exercise_id: str, status: DownloadStatus) -> None:
    """Print the outcome of a download command.

    Args:
        exercise_id: Exercise that was downloaded
        status: Final download status
    """
    match status:
        case DownloadStatus.NOT_REQUESTED:
            typer.secho(
                f"Exercise {exercise_id} has no transcription asset to download",
                fg=typer.colors.YELLOW,
            )
        case DownloadStatus.SKIPPED:
            typer.echo(f"Transcription asset for exercise {exercise_id} already downloaded")
        case _:
            typer.secho(
                f"✓ Transcription asset for exercise {exercise_id} downloaded",
                fg=typer.colors.GREEN,
            )


def display_status(exercise_id: str, is_downloaded: bool) -> None:
    """Print whether an exercise's asset is cached.

    Args:
        exercise_id: Exercise that was checked
        is_downloaded: Whether the asset is present
    """
    if is_downloaded:
        typer.secho(
            f"Transcription for exercise {exercise_id} is downloaded",
            fg=typer.colors.GREEN,
        )
    else:
        typer.echo(f"Transcription for exercise {exercise_id} is not downloaded")


def display_error(error: Exception) -> None:
    """Print an error message in red.

    Args:
        error: The error to report
    """
    typer.secho(f"✗ {error}", fg=typer.colors.RED, err=True)
