"""Domain models for the transcription pipeline."""

from enum import Enum
from pathlib import Path
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field


class PlatformSource(BaseModel, frozen=True):
    """A link to a streaming platform page (YouTube)."""

    kind: Literal["platform"] = "platform"
    url: str


class UrlSource(BaseModel, frozen=True):
    """A direct link to a hosted media file."""

    kind: Literal["url"] = "url"
    url: str


class UploadSource(BaseModel, frozen=True):
    """A file already deposited in the workspace by the upload handler."""

    kind: Literal["upload"] = "upload"
    path: Path
    content_type: str = "application/octet-stream"

    @property
    def is_video(self) -> bool:
        return self.content_type.startswith("video/")


SourceDescriptor = Annotated[
    Union[PlatformSource, UrlSource, UploadSource], Field(discriminator="kind")
]


class ArtifactProvenance(str, Enum):
    """How a local audio artifact came to exist."""

    DOWNLOADED = "downloaded"
    EXTRACTED = "extracted"
    PASS_THROUGH = "pass_through"


class LocalAudioArtifact(BaseModel, frozen=True):
    """A local audio file owned by a single pipeline run."""

    path: Path
    provenance: ArtifactProvenance
    title: str | None = None


class PlatformMedia(BaseModel, frozen=True):
    """Platform metadata needed to fetch the audio-only stream."""

    media_id: str
    title: str | None = None
    format_id: str
    extension: str = "m4a"


class TranscriptionResult(BaseModel, frozen=True):
    """Result of a completed pipeline run."""

    text: str
    title: str | None = None
