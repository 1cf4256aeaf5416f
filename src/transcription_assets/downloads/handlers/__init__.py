"""Per-provider link handlers."""

from .base import BaseLinkHandler
from .registry import LinkHandlerRegistry, create_default_registry
from .youtube import YouTubeLinkHandler

__all__ = [
    "BaseLinkHandler",
    "LinkHandlerRegistry",
    "YouTubeLinkHandler",
    "create_default_registry",
]
