"""Request and response models for the transcription API."""

from pydantic import BaseModel


class UrlRequest(BaseModel):
    """Body of the URL-based transcription endpoints."""

    url: str | None = None


class TranscriptionResponse(BaseModel):
    """Transcription of a generic URL or uploaded file."""

    transcription: str


class PlatformTranscriptionResponse(BaseModel):
    """Transcription of a platform link, with the source title."""

    title: str | None
    transcription: str


class ErrorResponse(BaseModel):
    """Body returned for every failed request."""

    error: str
