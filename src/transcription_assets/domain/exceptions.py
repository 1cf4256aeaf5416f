"""Custom exceptions for the transcription asset cache."""

from pathlib import Path


class TranscriptionDownloaderError(Exception):
    """Base exception for transcription asset download errors."""

    pass


class PrerequisiteError(TranscriptionDownloaderError):
    """Base exception for failed pre-download checks.

    Raised before any staging directory is created or any download starts.
    """

    pass


class ToolUnavailableError(PrerequisiteError):
    """Raised when the external download tool cannot be run."""

    def __init__(self, tool: str, reason: str) -> None:
        self.tool = tool
        self.reason = reason
        super().__init__(f'command "{tool}" {reason}')


class RootNotConfiguredError(PrerequisiteError):
    """Raised when no download root is set in the preferences."""

    def __init__(self) -> None:
        super().__init__("transcription download root is not set")


class RootMissingError(PrerequisiteError):
    """Raised when the configured download root does not exist."""

    def __init__(self, root: Path) -> None:
        self.root = root
        super().__init__(f"transcription download root {root} does not exist")


class UnsupportedProviderError(TranscriptionDownloaderError):
    """Raised when no handler is registered for a link's provider."""

    def __init__(self, provider: str) -> None:
        self.provider = provider
        super().__init__(f"no handler registered for provider '{provider}'")


class DownloadFailedError(TranscriptionDownloaderError):
    """Raised when the external tool ran but exited with an error.

    Carries the tool's captured stderr as the diagnostic.
    """

    def __init__(self, *, exercise_id: str, url: str, diagnostic: str) -> None:
        self.exercise_id = exercise_id
        self.url = url
        self.diagnostic = diagnostic
        message = f"failed to download asset for exercise {exercise_id} from {url}"
        if diagnostic:
            message = f"{message}: {diagnostic}"
        super().__init__(message)


class FilesystemError(TranscriptionDownloaderError):
    """Raised when the downloaded file cannot be moved into the cache."""

    def __init__(self, *, exercise_id: str, path: Path, reason: str) -> None:
        self.exercise_id = exercise_id
        self.path = path
        self.reason = reason
        super().__init__(
            f"failed to store asset for exercise {exercise_id} at {path}: {reason}"
        )


class ManifestError(TranscriptionDownloaderError):
    """Raised when a manifest or preferences file cannot be loaded."""

    pass
