"""Exercise manifest lookups."""

from .base import BaseManifestLookup
from .directory import EXERCISE_MANIFEST_FILENAME, DirectoryManifestLookup
from .memory import InMemoryManifestLookup

__all__ = [
    "BaseManifestLookup",
    "DirectoryManifestLookup",
    "EXERCISE_MANIFEST_FILENAME",
    "InMemoryManifestLookup",
]
