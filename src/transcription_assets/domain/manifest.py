"""Exercise manifest models.

Only the fields this package reads are modeled strictly; the manifests are
owned by the course library and may carry more.
"""

import enum
import typing as t

from pydantic import BaseModel, ConfigDict, Field

from .links import AssetLink


class ExerciseType(enum.StrEnum):
    """Kind of knowledge an exercise tests."""

    DECLARATIVE = "declarative"
    PROCEDURAL = "procedural"


class _Asset(BaseModel):
    model_config = ConfigDict(frozen=True)


class TranscriptionAsset(_Asset):
    """Transcription exercise, optionally backed by an external recording."""

    type: t.Literal["transcription"] = "transcription"
    content: str = Field(description="Instructions shown with the exercise")
    external_link: AssetLink | None = Field(
        default=None,
        description="Recording to transcribe, if hosted externally",
    )


class InlineAsset(_Asset):
    """Exercise whose content is stored inline in the manifest."""

    type: t.Literal["inline"] = "inline"
    content: str


class MarkdownAsset(_Asset):
    """Exercise whose content lives in a markdown file."""

    type: t.Literal["markdown"] = "markdown"
    path: str


class FlashcardAsset(_Asset):
    """Two-sided flashcard exercise."""

    type: t.Literal["flashcard"] = "flashcard"
    front_path: str
    back_path: str | None = None


ExerciseAsset = t.Annotated[
    TranscriptionAsset | InlineAsset | MarkdownAsset | FlashcardAsset,
    Field(discriminator="type"),
]


class ExerciseManifest(BaseModel):
    """Manifest describing a single exercise."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str = Field(min_length=1)
    lesson_id: str
    course_id: str
    name: str
    description: str | None = None
    exercise_type: ExerciseType = ExerciseType.PROCEDURAL
    exercise_asset: ExerciseAsset
