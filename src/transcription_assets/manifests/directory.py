"""Manifest lookup that scans a course library on disk."""

import typing as t
from functools import cached_property
from pathlib import Path

from pydantic import ValidationError

from ..domain.manifest import ExerciseManifest
from ..infrastructure.logging import get_logger
from .base import BaseManifestLookup

if t.TYPE_CHECKING:
    import loguru

EXERCISE_MANIFEST_FILENAME = "exercise_manifest.json"


class DirectoryManifestLookup(BaseManifestLookup):
    """Indexes every exercise_manifest.json below a library directory.

    The library is scanned once, on the first query. Unreadable or invalid
    manifests are logged and left out of the index. When two manifests share
    an id, the first one found in sorted path order wins.
    """

    def __init__(
        self,
        library_dir: Path,
        *,
        logger: t.Optional["loguru.Logger"] = None,
    ) -> None:
        self._library_dir = library_dir
        self._logger = logger or get_logger(__name__)

    @property
    def library_dir(self) -> Path:
        return self._library_dir

    def get_exercise_manifest(self, exercise_id: str) -> ExerciseManifest | None:
        return self._index.get(exercise_id)

    @cached_property
    def _index(self) -> dict[str, ExerciseManifest]:
        index: dict[str, ExerciseManifest] = {}
        if not self._library_dir.is_dir():
            self._logger.warning(f"Library directory not found: {self._library_dir}")
            return index

        for manifest_path in sorted(self._library_dir.rglob(EXERCISE_MANIFEST_FILENAME)):
            manifest = self._load(manifest_path)
            if manifest is None:
                continue
            if manifest.id in index:
                self._logger.warning(
                    f"Duplicate exercise id {manifest.id} in {manifest_path}, ignoring"
                )
                continue
            index[manifest.id] = manifest

        self._logger.debug(
            f"Indexed {len(index)} exercise manifests under {self._library_dir}"
        )
        return index

    def _load(self, manifest_path: Path) -> ExerciseManifest | None:
        try:
            return ExerciseManifest.model_validate_json(
                manifest_path.read_text(encoding="utf-8")
            )
        except OSError as exc:
            self._logger.warning(f"Unable to read {manifest_path}: {exc}")
        except ValidationError as exc:
            self._logger.warning(
                f"Invalid exercise manifest {manifest_path}: "
                f"{exc.error_count()} validation error(s)"
            )
        return None
