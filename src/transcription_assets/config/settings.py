import enum
import typing as t
from dataclasses import dataclass, fields, replace
from pathlib import Path


class Environment(enum.Enum):
    """Runtime environment; selects the log format."""

    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"


class LogLevel(enum.StrEnum):
    """Log levels understood by loguru."""

    TRACE = "TRACE"
    DEBUG = "DEBUG"
    INFO = "INFO"
    SUCCESS = "SUCCESS"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


@dataclass(frozen=True)
class Settings:
    """Settings container used to bootstrap the app.

    The CLI layer decides how values are populated (options and environment
    variables); core code only depends on this shape.
    """

    environment: Environment = Environment.DEVELOPMENT
    log_level: LogLevel = LogLevel.INFO

    # Directory where downloaded assets are stored. Must exist before use.
    download_root: Path | None = None
    # Display-only root, e.g. the same directory seen from another machine.
    download_root_alias: Path | None = None

    # JSON user preferences file with a "transcription" section.
    preferences_file: Path | None = None
    # Course library scanned for exercise_manifest.json files.
    library_dir: Path = Path(".")

    ytdlp_binary: str = "yt-dlp"


def build_settings(**overrides: t.Any) -> Settings:
    """Build Settings from keyword overrides, ignoring None values.

    Lets the CLI pass every option through unconditionally while unset
    options keep the Settings defaults.
    """
    known = {field.name for field in fields(Settings)}
    unknown = set(overrides) - known
    if unknown:
        raise TypeError(f"Unknown settings: {', '.join(sorted(unknown))}")

    values = {key: value for key, value in overrides.items() if value is not None}
    return replace(Settings(), **values)
