"""Abstract interface for streaming-platform audio retrieval."""

from abc import ABC, abstractmethod
from pathlib import Path

from media_transcriber.domain.models import PlatformMedia


class PlatformClient(ABC):
    """Abstract base class for platform metadata and stream access."""

    name: str = "platform"

    @abstractmethod
    def is_valid_url(self, url: str) -> bool:
        """Returns True if `url` matches the platform's link pattern."""

    @abstractmethod
    def fetch_media_info(self, url: str) -> PlatformMedia:
        """
        Queries platform metadata and selects the audio-only stream.

        Raises:
            SourceUnavailableError: If metadata cannot be fetched or no
                audio-only stream exists.
        """

    @abstractmethod
    def download(self, url: str, media: PlatformMedia, destination: Path) -> None:
        """
        Streams the selected audio format into `destination`.

        Returns only once the file has been completely written.

        Raises:
            SourceUnavailableError: If the stream cannot be downloaded.
        """
