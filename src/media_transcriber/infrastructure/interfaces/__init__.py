"""Infrastructure interface exports."""

from .downloader import Downloader
from .platform_client import PlatformClient
from .transcoder import Transcoder
from .transcription_service import TranscriptionService

__all__ = ["Downloader", "PlatformClient", "Transcoder", "TranscriptionService"]
