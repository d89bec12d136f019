"""Abstract interface for fetching a generic URL to disk."""

from abc import ABC, abstractmethod
from pathlib import Path


class Downloader(ABC):
    """Abstract base class for generic URL downloaders."""

    @abstractmethod
    def download(self, url: str, destination: Path) -> int:
        """
        Streams the body behind `url` into `destination`.

        Args:
            url: The remote file URL.
            destination: Workspace path to write to.

        Returns:
            Number of bytes written.

        Raises:
            DownloadFailedError: On transport error or non-success status.
        """
