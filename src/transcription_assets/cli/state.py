"""CLI state container."""

import typing as t

from ..config.settings import Settings
from ..domain.preferences import DownloadPreferences, UserPreferences
from ..downloads import LocalTranscriptionDownloader, create_default_registry
from ..manifests import BaseManifestLookup, DirectoryManifestLookup

DownloaderFactory = t.Callable[
    [DownloadPreferences, BaseManifestLookup], LocalTranscriptionDownloader
]


class CLIState:
    """Application state container for CLI commands.

    Holds Settings and the factories commands use to build their
    dependencies, so tests can swap in stand-ins.
    """

    def __init__(
        self,
        settings: Settings,
        downloader_factory: DownloaderFactory | None = None,
    ) -> None:
        self.settings = settings
        self._downloader_factory = downloader_factory or self._default_downloader

    def load_preferences(self) -> DownloadPreferences:
        """Preferences from the preferences file, overridden by CLI options.

        Raises:
            ManifestError: If the preferences file is unreadable or invalid.
        """
        preferences = DownloadPreferences()
        if self.settings.preferences_file is not None:
            user_preferences = UserPreferences.from_file(self.settings.preferences_file)
            preferences = user_preferences.transcription or preferences

        overrides = {
            "download_root": self.settings.download_root,
            "download_root_alias": self.settings.download_root_alias,
        }
        return preferences.model_copy(
            update={key: value for key, value in overrides.items() if value is not None}
        )

    def create_manifest_lookup(self) -> BaseManifestLookup:
        return DirectoryManifestLookup(self.settings.library_dir)

    def create_downloader(self) -> LocalTranscriptionDownloader:
        return self._downloader_factory(
            self.load_preferences(), self.create_manifest_lookup()
        )

    def _default_downloader(
        self, preferences: DownloadPreferences, manifests: BaseManifestLookup
    ) -> LocalTranscriptionDownloader:
        return LocalTranscriptionDownloader(
            preferences,
            manifests,
            registry=create_default_registry(self.settings.ytdlp_binary),
        )
