"""Application configuration loaded from environment variables."""

import os

from dotenv import load_dotenv
from pydantic import BaseModel


class ServerConfig(BaseModel, frozen=True):
    """HTTP server configuration."""

    host: str = "0.0.0.0"
    port: int = 3001
    cors_origins: tuple[str, ...] = ("*",)


class WorkspaceConfig(BaseModel, frozen=True):
    """Scratch directory holding transient audio artifacts."""

    path: str = "temp"


class AssemblyAIConfig(BaseModel, frozen=True):
    """AssemblyAI API configuration."""

    api_key: str
    speech_model: str = "best"
    language_code: str | None = None


class TranscoderConfig(BaseModel, frozen=True):
    """ffmpeg audio extraction configuration."""

    ffmpeg_binary: str | None = None
    audio_codec: str = "libmp3lame"
    bitrate: str = "128k"
    sample_rate: int = 44100
    output_extension: str = ".mp3"
    timeout_seconds: float = 600.0


class DownloadConfig(BaseModel, frozen=True):
    """Generic URL download configuration."""

    timeout_seconds: float = 30.0
    chunk_size: int = 64 * 1024
    default_extension: str = ".mp3"


class PlatformConfig(BaseModel, frozen=True):
    """yt-dlp configuration for platform links."""

    player_clients: tuple[str, ...] = ()


class TracingConfig(BaseModel, frozen=True):
    """Datadog tracing configuration."""

    enabled: bool = True


class AppConfig(BaseModel, frozen=True):
    """Root application configuration."""

    server: ServerConfig
    workspace: WorkspaceConfig
    assemblyai: AssemblyAIConfig
    transcoder: TranscoderConfig
    download: DownloadConfig
    platform: PlatformConfig
    tracing: TracingConfig


def _split(value: str) -> tuple[str, ...]:
    return tuple(item.strip() for item in value.split(",") if item.strip())


def load_config() -> AppConfig:
    """Loads configuration from environment variables."""
    load_dotenv()
    return AppConfig(
        server=ServerConfig(
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "3001")),
            cors_origins=_split(os.getenv("CORS_ORIGINS", "*")),
        ),
        workspace=WorkspaceConfig(
            path=os.getenv("WORKSPACE_DIR", "temp"),
        ),
        assemblyai=AssemblyAIConfig(
            api_key=os.getenv("ASSEMBLYAI_API_KEY", ""),
            speech_model=os.getenv("ASSEMBLYAI_SPEECH_MODEL", "best"),
            language_code=os.getenv("ASSEMBLYAI_LANGUAGE_CODE") or None,
        ),
        transcoder=TranscoderConfig(
            ffmpeg_binary=os.getenv("FFMPEG_BINARY") or None,
            timeout_seconds=float(os.getenv("FFMPEG_TIMEOUT_SECONDS", "600")),
        ),
        download=DownloadConfig(
            timeout_seconds=float(os.getenv("DOWNLOAD_TIMEOUT_SECONDS", "30")),
            chunk_size=int(os.getenv("DOWNLOAD_CHUNK_SIZE", str(64 * 1024))),
        ),
        platform=PlatformConfig(
            player_clients=_split(os.getenv("YTDLP_PLAYER_CLIENTS", "")),
        ),
        tracing=TracingConfig(
            enabled=os.getenv("DD_TRACE_ENABLED", "true").lower()
            not in ("0", "false", "no"),
        ),
    )
