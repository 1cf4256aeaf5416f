"""Extraction of external asset links from exercise manifests."""

from ..domain.links import AssetLink
from ..domain.manifest import ExerciseManifest, TranscriptionAsset
from ..manifests.base import BaseManifestLookup


def extract_transcription_link(manifest: ExerciseManifest) -> AssetLink | None:
    """Return the external link of a transcription exercise, if it has one."""
    match manifest.exercise_asset:
        case TranscriptionAsset(external_link=link):
            return link
        case _:
            return None


def get_transcription_link(
    exercise_id: str, manifests: BaseManifestLookup
) -> AssetLink | None:
    """Look up an exercise and return its external link, if any."""
    manifest = manifests.get_exercise_manifest(exercise_id)
    if manifest is None:
        return None
    return extract_transcription_link(manifest)
