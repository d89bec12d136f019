"""Abstract interface for transcription service operations."""

from abc import ABC, abstractmethod
from pathlib import Path


class TranscriptionService(ABC):
    """Abstract base class for audio transcription backends."""

    @abstractmethod
    def transcribe(self, audio_path: Path) -> str:
        """
        Transcribes a local audio file and returns plain text.

        Args:
            audio_path: Local audio file.

        Returns:
            The transcription text.

        Raises:
            TranscriptionFailedError: If transcription fails for any reason.
        """
        pass
