"""Base interface for exercise manifest lookups."""

from abc import ABC, abstractmethod

from ..domain.manifest import ExerciseManifest


class BaseManifestLookup(ABC):
    """Read-only query for exercise manifests.

    Implementations must be safe to call repeatedly and must not have side
    effects visible to the caller. The downloader queries on every
    operation and never caches the result.
    """

    @abstractmethod
    def get_exercise_manifest(self, exercise_id: str) -> ExerciseManifest | None:
        """Return the manifest for the exercise, or None if it is unknown."""
        pass
