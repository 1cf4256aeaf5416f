"""Tests for transcription link extraction."""

from transcription_assets.domain.manifest import (
    ExerciseManifest,
    InlineAsset,
    MarkdownAsset,
    TranscriptionAsset,
)
from transcription_assets.downloads.links import (
    extract_transcription_link,
    get_transcription_link,
)
from transcription_assets.manifests import InMemoryManifestLookup


class TestExtractTranscriptionLink:
    """Only linked transcription assets yield a link."""

    def test_transcription_without_link(self, manifest_factory) -> None:
        assert extract_transcription_link(manifest_factory(None)) is None

    def test_transcription_with_link(self, manifest_factory, youtube_link) -> None:
        manifest = manifest_factory(youtube_link)

        assert extract_transcription_link(manifest) == youtube_link

    def test_other_asset_types(self, manifest_factory, youtube_link) -> None:
        manifest = manifest_factory(youtube_link)
        for asset in (InlineAsset(content="content"), MarkdownAsset(path="a.md")):
            other = manifest.model_copy(update={"exercise_asset": asset})
            assert extract_transcription_link(other) is None


class TestGetTranscriptionLink:
    """Lookup plus extraction."""

    def test_known_exercise(self, manifests, youtube_link) -> None:
        assert get_transcription_link("exercise_id", manifests) == youtube_link

    def test_unknown_exercise(self, manifests) -> None:
        assert get_transcription_link("missing", manifests) is None

    def test_queries_lookup_every_time(self, mocker, manifest_factory, youtube_link):
        """The lookup result is never cached."""
        lookup = mocker.Mock(spec=InMemoryManifestLookup)
        lookup.get_exercise_manifest.return_value = manifest_factory(youtube_link)

        get_transcription_link("exercise_id", lookup)
        get_transcription_link("exercise_id", lookup)

        assert lookup.get_exercise_manifest.call_count == 2

    def test_manifest_change_is_seen(self, mocker, manifest_factory, youtube_link):
        lookup = mocker.Mock(spec=InMemoryManifestLookup)
        lookup.get_exercise_manifest.side_effect = [
            manifest_factory(youtube_link),
            ExerciseManifest(
                id="exercise_id",
                lesson_id="l",
                course_id="c",
                name="n",
                exercise_asset=TranscriptionAsset(content="c"),
            ),
        ]

        assert get_transcription_link("exercise_id", lookup) == youtube_link
        assert get_transcription_link("exercise_id", lookup) is None
