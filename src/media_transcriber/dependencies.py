"""FastAPI dependency injection configuration."""

from pathlib import Path

import assemblyai as aai

from media_transcriber.config import load_config
from media_transcriber.domain import Workspace
from media_transcriber.handlers import SourceResolver, TranscriptionPipeline
from media_transcriber.infrastructure import (
    AssemblyAITranscriber,
    FfmpegTranscoder,
    HttpDownloader,
    YtDlpClient,
)
from media_transcriber.logging import setup_logging

logger = setup_logging()

_config = load_config()

# Workspace setup
_workspace = Workspace(Path(_config.workspace.path))
_workspace.ensure_exists()

# AssemblyAI setup
aai.settings.api_key = _config.assemblyai.api_key
_aai_config = aai.TranscriptionConfig(
    speech_model=aai.SpeechModel(_config.assemblyai.speech_model),
    language_code=_config.assemblyai.language_code,
)
_aai_transcriber = aai.Transcriber(config=_aai_config)

_transcription_service = AssemblyAITranscriber(_aai_transcriber)


def _ffmpeg_binary() -> str:
    if _config.transcoder.ffmpeg_binary:
        return _config.transcoder.ffmpeg_binary
    from moviepy.config import FFMPEG_BINARY

    return FFMPEG_BINARY


_transcoder = FfmpegTranscoder(_ffmpeg_binary(), _config.transcoder)

_resolver = SourceResolver(
    _workspace,
    YtDlpClient(_config.platform),
    HttpDownloader(_config.download),
    default_extension=_config.download.default_extension,
)

_pipeline = TranscriptionPipeline(
    _workspace, _resolver, _transcoder, _transcription_service
)

logger.info(
    "Transcription pipeline initialized",
    extra={
        "workspace": str(_workspace.root),
        "speech_model": _config.assemblyai.speech_model,
    },
)


def get_config():
    """Returns the loaded application configuration."""
    return _config


def get_workspace() -> Workspace:
    """Returns the shared transient workspace."""
    return _workspace


def get_pipeline() -> TranscriptionPipeline:
    """Returns the configured transcription pipeline."""
    return _pipeline
