"""Loguru-based logging setup.

A single loguru sink is installed on first use. Modules obtain a logger via
get_logger(__name__), which binds the module name so records can be filtered
by origin.
"""

import sys
import typing as t

from loguru import logger

from ..config.settings import Environment, LogLevel, Settings

if t.TYPE_CHECKING:
    import loguru

_DEVELOPMENT_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{extra[name]}</cyan> - <level>{message}</level>"
)
_PRODUCTION_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {extra[name]} - {message}"
)

_configured = False


def configure_logger(
    level: LogLevel = LogLevel.INFO,
    environment: Environment = Environment.DEVELOPMENT,
) -> None:
    """Replace loguru's handlers with a single stderr sink.

    Development output is colorized with short timestamps; production and
    testing use a plain format with full timestamps.
    """
    global _configured

    logger.remove()
    logger.configure(extra={"name": "transcription_assets"})
    is_development = environment == Environment.DEVELOPMENT
    logger.add(
        sys.stderr,
        level=str(level),
        format=_DEVELOPMENT_FORMAT if is_development else _PRODUCTION_FORMAT,
        colorize=is_development,
        backtrace=is_development,
        diagnose=False,
    )
    _configured = True


def setup_logging(settings: Settings) -> None:
    """Configure logging from application settings."""
    configure_logger(level=settings.log_level, environment=settings.environment)


def is_configured() -> bool:
    return _configured


def get_logger(name: str) -> "loguru.Logger":
    """Return a logger bound to the given module name.

    Configures logging with defaults if nothing has been set up yet.
    """
    if not _configured:
        configure_logger()
    return logger.bind(name=name)


def reset_logging() -> None:
    """Drop all handlers so the next get_logger call reconfigures."""
    global _configured

    logger.remove()
    _configured = False
