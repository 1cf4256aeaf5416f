"""Handler for YouTube links, fetched as audio with yt-dlp."""

from pathlib import Path

from ...domain.links import BaseAssetLink, LinkProvider, YouTubeLink
from .base import BaseLinkHandler


class YouTubeLinkHandler(BaseLinkHandler):
    """Extracts the audio track of a video into an m4a file."""

    provider = LinkProvider.YOUTUBE
    file_name = "audio.m4a"

    def __init__(self, binary: str = "yt-dlp") -> None:
        self._binary = binary

    @property
    def tool(self) -> str:
        return self._binary

    def download_command(self, link: BaseAssetLink, output_path: Path) -> list[str]:
        if not isinstance(link, YouTubeLink):
            raise TypeError(f"Expected a YouTube link, got {type(link).__name__}")
        return [
            self._binary,
            "--enable-file-urls",
            "--extract-audio",
            "--audio-format",
            "m4a",
            "--output",
            str(output_path),
            link.url,
        ]
