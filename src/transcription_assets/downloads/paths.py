"""Content-addressed paths for cached assets.

Assets live at ``{root}/{sha1(canonical link)}/{file name}``. Exercises that
share a link share a path.
"""

import hashlib
from pathlib import Path, PurePath

from ..domain.links import BaseAssetLink
from .handlers.registry import LinkHandlerRegistry


def download_dir_name(link: BaseAssetLink) -> str:
    """Lowercase hex SHA-1 of the link's canonical payload (40 characters)."""
    return hashlib.sha1(link.canonical.encode("utf-8")).hexdigest()


class AssetPathResolver:
    """Maps asset links to paths under a root directory.

    All methods are pure; nothing here touches the filesystem.
    """

    def __init__(self, registry: LinkHandlerRegistry) -> None:
        self._registry = registry

    def file_name(self, link: BaseAssetLink) -> str:
        return self._registry.get(link).file_name

    def relative_path(self, link: BaseAssetLink) -> PurePath:
        """Path of the asset relative to any root."""
        return PurePath(download_dir_name(link), self.file_name(link))

    def resolve(self, root: Path | None, link: BaseAssetLink) -> Path | None:
        """Full path of the asset under ``root``, or None if no root is set."""
        if root is None:
            return None
        return root / self.relative_path(link)
