"""AssemblyAI implementation of the TranscriptionService interface."""

from pathlib import Path

import assemblyai as aai

from media_transcriber.exceptions import TranscriptionFailedError
from media_transcriber.logging import setup_logging

from .interfaces import TranscriptionService

logger = setup_logging()


class AssemblyAITranscriber(TranscriptionService):
    """Handles audio transcription using AssemblyAI."""

    def __init__(self, transcriber: aai.Transcriber):
        self._transcriber = transcriber

    def transcribe(self, audio_path: Path) -> str:
        """
        Streams the audio file to AssemblyAI and returns the transcript text.

        Single attempt; every failure is re-raised as TranscriptionFailedError.
        """
        file_name = Path(audio_path).name
        try:
            with open(audio_path, "rb") as audio_file:
                transcript = self._transcriber.transcribe(audio_file)

            if transcript.status == aai.TranscriptStatus.error:
                raise TranscriptionFailedError(file_name, Exception(transcript.error))

            if transcript.text is None:
                raise TranscriptionFailedError(
                    file_name, Exception("Transcription returned no text")
                )

            logger.info(
                "Audio transcription successful",
                extra={"file_name": file_name, "characters": len(transcript.text)},
            )
            return transcript.text

        except TranscriptionFailedError as e:
            logger.error(
                "AssemblyAI transcription failed",
                extra={"file_name": file_name, "error": str(e.cause)},
            )
            raise
        except Exception as e:
            logger.exception(
                "AssemblyAI transcription failed", extra={"file_name": file_name}
            )
            raise TranscriptionFailedError(file_name, e) from e
