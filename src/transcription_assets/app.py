from dataclasses import dataclass

from .config.settings import Settings
from .infrastructure.logging import setup_logging


@dataclass(frozen=True)
class App:
    """Process-wide wiring: the resolved `Settings` logging was set up from."""

    settings: Settings


def create_app(settings: Settings | None = None) -> App:
    """Set up logging for ``settings`` (or the defaults) and return the `App`."""
    resolved = settings or Settings()
    setup_logging(resolved)
    return App(settings=resolved)
