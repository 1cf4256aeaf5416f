"""User preferences for transcription asset downloads."""

from pathlib import Path

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError

from .exceptions import ManifestError


class Instrument(BaseModel):
    """Instrument the user practices transcription with."""

    id: str
    name: str


class DownloadPreferences(BaseModel):
    """Where transcription assets are cached.

    ``download_root`` is checked for existence on every download, not here,
    so removing the directory mid-session is noticed on next use.
    ``download_root_alias`` is only ever used to display paths.
    """

    model_config = ConfigDict(frozen=True)

    download_root: Path | None = Field(
        default=None,
        validation_alias=AliasChoices("download_root", "download_path"),
        description="Directory where assets are downloaded",
    )
    download_root_alias: Path | None = Field(
        default=None,
        validation_alias=AliasChoices("download_root_alias", "download_path_alias"),
        description="Same directory as seen from another environment",
    )
    instruments: list[Instrument] = Field(default_factory=list)


class UserPreferences(BaseModel):
    """Top-level user preferences document."""

    model_config = ConfigDict(extra="ignore")

    transcription: DownloadPreferences | None = None

    @classmethod
    def from_file(cls, path: Path) -> "UserPreferences":
        """Load preferences from a JSON file.

        Raises:
            ManifestError: If the file cannot be read or is invalid.
        """
        try:
            return cls.model_validate_json(path.read_text(encoding="utf-8"))
        except OSError as exc:
            raise ManifestError(f"Unable to read preferences file {path}") from exc
        except ValidationError as exc:
            raise ManifestError(f"Invalid preferences file {path}: {exc}") from exc
