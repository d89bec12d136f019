"""yt-dlp implementation of the PlatformClient interface for YouTube."""

import logging
from pathlib import Path
from typing import Any

import yt_dlp
from yt_dlp.extractor.youtube import YoutubeIE
from yt_dlp.utils import YoutubeDLError

from media_transcriber.config import PlatformConfig
from media_transcriber.domain.models import PlatformMedia
from media_transcriber.exceptions import SourceUnavailableError
from media_transcriber.logging import setup_logging

from .interfaces import PlatformClient

logger = setup_logging()


def select_audio_format(formats: list[dict[str, Any]]) -> dict[str, Any] | None:
    """Returns the first audio-only format: no video codec, some audio codec."""
    for fmt in formats:
        if fmt.get("vcodec") == "none" and fmt.get("acodec") not in (None, "none"):
            return fmt
    return None


class YtDlpClient(PlatformClient):
    """Resolves YouTube links to audio-only streams using yt-dlp."""

    name = "YouTube"

    def __init__(self, config: PlatformConfig):
        self._config = config

    def _options(self, **overrides: Any) -> dict[str, Any]:
        options: dict[str, Any] = {
            "quiet": True,
            "no_warnings": True,
            "noprogress": True,
            "noplaylist": True,
            "logger": logging.getLogger("yt_dlp"),
        }
        if self._config.player_clients:
            options["extractor_args"] = {
                "youtube": {"player_client": list(self._config.player_clients)},
            }
        options.update(overrides)
        return options

    def is_valid_url(self, url: str) -> bool:
        return bool(YoutubeIE.suitable(url))

    def fetch_media_info(self, url: str) -> PlatformMedia:
        try:
            with yt_dlp.YoutubeDL(self._options()) as ydl:
                info = ydl.extract_info(url, download=False)
        except YoutubeDLError as e:
            logger.exception("Failed to fetch video info", extra={"url": url})
            raise SourceUnavailableError(url, e) from e

        audio_format = select_audio_format(info.get("formats") or [])
        if audio_format is None:
            logger.error("No audio-only format available", extra={"url": url})
            raise SourceUnavailableError(url, Exception("No audio-only format"))

        media = PlatformMedia(
            media_id=info["id"],
            title=info.get("title"),
            format_id=str(audio_format["format_id"]),
            extension=audio_format.get("ext") or "m4a",
        )
        logger.info(
            "Video info fetched",
            extra={
                "url": url,
                "video_id": media.media_id,
                "format_id": media.format_id,
            },
        )
        return media

    def download(self, url: str, media: PlatformMedia, destination: Path) -> None:
        options = self._options(
            format=media.format_id,
            outtmpl={"default": str(destination)},
            overwrites=True,
        )
        try:
            with yt_dlp.YoutubeDL(options) as ydl:
                ydl.download([url])
        except YoutubeDLError as e:
            logger.exception(
                "Audio stream download failed",
                extra={"url": url, "video_id": media.media_id},
            )
            raise SourceUnavailableError(url, e) from e

        logger.info(
            "Audio stream downloaded",
            extra={"video_id": media.media_id, "path": str(destination)},
        )
