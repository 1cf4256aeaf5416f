"""Base interface for per-provider link handlers."""

import typing as t
from abc import ABC, abstractmethod
from pathlib import Path

from ...domain.links import BaseAssetLink, LinkProvider


class BaseLinkHandler(ABC):
    """Everything provider-specific about fetching an asset.

    The executor and path resolver only talk to handlers, so supporting a
    new provider means adding a link model and a handler.
    """

    #: Provider whose links this handler fetches.
    provider: t.ClassVar[LinkProvider]
    #: Name of the cached file. Fixed because the tool normalizes the format.
    file_name: t.ClassVar[str]
    #: Quick, side-effect-free arguments used to check the tool runs.
    probe_args: t.ClassVar[tuple[str, ...]] = ("--version",)

    @property
    @abstractmethod
    def tool(self) -> str:
        """Executable name or path of the external tool."""
        pass

    def probe_command(self) -> list[str]:
        return [self.tool, *self.probe_args]

    @abstractmethod
    def download_command(self, link: BaseAssetLink, output_path: Path) -> list[str]:
        """Build the command that writes the asset to ``output_path``."""
        pass
