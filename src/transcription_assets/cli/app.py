"""CLI application factory."""

from pathlib import Path
from typing import Optional

import typer

from ..app import create_app
from ..config.settings import LogLevel, Settings, build_settings
from .commands.transcription import download, path, status
from .state import CLIState


def create_cli_app(
    settings: Settings | None = None, state: CLIState | None = None
) -> typer.Typer:
    """Create CLI application with optional settings or state override.

    Args:
        settings: Optional Settings override for testing
        state: Optional CLIState override; takes precedence over settings

    Returns:
        Configured Typer application with commands registered
    """
    app = typer.Typer(
        name="tassets",
        help="Transcription assets - download and locate exercise recordings",
        no_args_is_help=True,
    )

    @app.callback()
    def setup(
        ctx: typer.Context,
        download_root: Optional[Path] = typer.Option(
            None,
            "--download-root",
            "-d",
            envvar="TASSETS_DOWNLOAD_ROOT",
            help="Directory where assets are downloaded",
        ),
        download_root_alias: Optional[Path] = typer.Option(
            None,
            "--alias-root",
            envvar="TASSETS_DOWNLOAD_ROOT_ALIAS",
            help="Root shown in place of the download root, e.g. on another machine",
        ),
        preferences_file: Optional[Path] = typer.Option(
            None,
            "--preferences",
            "-p",
            exists=True,
            dir_okay=False,
            help="User preferences JSON file with a 'transcription' section",
        ),
        library_dir: Optional[Path] = typer.Option(
            None,
            "--library",
            "-l",
            help="Course library containing exercise manifests",
        ),
        verbose: bool = typer.Option(
            False,
            "--verbose",
            "-v",
            help="Enable verbose output (DEBUG logging)",
        ),
    ) -> None:
        """Global options available to all commands."""
        if state is not None:
            resolved_state = state
        else:
            resolved_settings = settings or build_settings(
                download_root=download_root,
                download_root_alias=download_root_alias,
                preferences_file=preferences_file,
                library_dir=library_dir,
                log_level=LogLevel.DEBUG if verbose else None,
            )
            resolved_state = CLIState(resolved_settings)

        create_app(resolved_state.settings)
        ctx.obj = resolved_state

    app.command()(download)
    app.command()(path)
    app.command()(status)

    return app
