"""Abstract interface for audio extraction from video containers."""

from abc import ABC, abstractmethod
from pathlib import Path


class Transcoder(ABC):
    """Abstract base class for audio extraction backends."""

    output_extension: str = ".mp3"

    def output_path(self, input_path: Path) -> Path:
        """Deterministic output location derived from the input's base name."""
        input_path = Path(input_path)
        return input_path.with_name(f"{input_path.stem}_audio{self.output_extension}")

    @abstractmethod
    def extract(self, input_path: Path) -> Path:
        """
        Strips the video stream and encodes the audio track.

        Args:
            input_path: Video file in the workspace.

        Returns:
            Path of the extracted audio, equal to `output_path(input_path)`.

        Raises:
            ExtractionFailedError: If the transcoder exits with a nonzero status.
        """
