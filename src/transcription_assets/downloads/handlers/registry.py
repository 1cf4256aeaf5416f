"""Registry mapping link providers to their handlers."""

import typing as t

from ...domain.exceptions import UnsupportedProviderError
from ...domain.links import BaseAssetLink, LinkProvider
from .base import BaseLinkHandler
from .youtube import YouTubeLinkHandler


class LinkHandlerRegistry:
    """Looks up the handler for a link by its provider."""

    def __init__(self, handlers: t.Iterable[BaseLinkHandler]) -> None:
        self._handlers: dict[LinkProvider, BaseLinkHandler] = {}
        for handler in handlers:
            self.register(handler)

    def register(self, handler: BaseLinkHandler) -> None:
        """Add or replace the handler for its provider."""
        self._handlers[handler.provider] = handler

    def get(self, link: BaseAssetLink) -> BaseLinkHandler:
        """Return the handler for a link.

        Raises:
            UnsupportedProviderError: If no handler is registered for the
                link's provider.
        """
        try:
            return self._handlers[link.provider]
        except KeyError:
            raise UnsupportedProviderError(str(link.provider)) from None

    @property
    def providers(self) -> frozenset[LinkProvider]:
        return frozenset(self._handlers)


def create_default_registry(ytdlp_binary: str = "yt-dlp") -> LinkHandlerRegistry:
    """Registry with a handler for every supported provider."""
    return LinkHandlerRegistry([YouTubeLinkHandler(binary=ytdlp_binary)])
