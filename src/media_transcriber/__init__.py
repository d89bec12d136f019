from media_transcriber.config import AppConfig, load_config
from media_transcriber.exceptions import (
    DownloadFailedError,
    ExtractionFailedError,
    InvalidSourceError,
    MissingInputError,
    PipelineError,
    SourceNotSupportedError,
    SourceUnavailableError,
    TranscriptionFailedError,
)
from media_transcriber.logging import setup_logging

__all__ = [
    "setup_logging",
    "AppConfig",
    "load_config",
    "PipelineError",
    "MissingInputError",
    "InvalidSourceError",
    "SourceUnavailableError",
    "DownloadFailedError",
    "ExtractionFailedError",
    "TranscriptionFailedError",
    "SourceNotSupportedError",
]
