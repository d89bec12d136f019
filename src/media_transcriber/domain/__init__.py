"""Domain layer exports."""

from .models import (
    ArtifactProvenance,
    LocalAudioArtifact,
    PlatformMedia,
    PlatformSource,
    SourceDescriptor,
    TranscriptionResult,
    UploadSource,
    UrlSource,
)
from .run import PipelineRun, RunState
from .workspace import Workspace

__all__ = [
    "ArtifactProvenance",
    "LocalAudioArtifact",
    "PlatformMedia",
    "PlatformSource",
    "SourceDescriptor",
    "TranscriptionResult",
    "UploadSource",
    "UrlSource",
    "PipelineRun",
    "RunState",
    "Workspace",
]
