"""Manifest lookup backed by an in-memory mapping."""

import typing as t

from ..domain.manifest import ExerciseManifest
from .base import BaseManifestLookup


class InMemoryManifestLookup(BaseManifestLookup):
    """Serves manifests from a dict keyed by exercise id."""

    def __init__(self, manifests: t.Iterable[ExerciseManifest] = ()) -> None:
        self._manifests = {manifest.id: manifest for manifest in manifests}

    def get_exercise_manifest(self, exercise_id: str) -> ExerciseManifest | None:
        return self._manifests.get(exercise_id)

    def __len__(self) -> int:
        return len(self._manifests)
