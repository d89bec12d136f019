"""requests implementation of the Downloader interface."""

from pathlib import Path

import requests

from media_transcriber.config import DownloadConfig
from media_transcriber.exceptions import DownloadFailedError
from media_transcriber.logging import setup_logging

from .interfaces import Downloader

logger = setup_logging()


class HttpDownloader(Downloader):
    """Streams remote files to disk over HTTP."""

    def __init__(self, config: DownloadConfig):
        self._config = config

    def download(self, url: str, destination: Path) -> int:
        try:
            with requests.get(
                url, stream=True, timeout=self._config.timeout_seconds
            ) as response:
                response.raise_for_status()
                written = 0
                with open(destination, "wb") as f:
                    for chunk in response.iter_content(
                        chunk_size=self._config.chunk_size
                    ):
                        if chunk:
                            f.write(chunk)
                            written += len(chunk)
        except requests.HTTPError as e:
            status_code = e.response.status_code if e.response is not None else None
            logger.error(
                "Download returned a non-success status",
                extra={"url": url, "status_code": status_code},
            )
            raise DownloadFailedError(url, e, status_code=status_code) from e
        except (requests.RequestException, OSError) as e:
            logger.exception("Download failed", extra={"url": url})
            raise DownloadFailedError(url, e) from e

        if written == 0:
            logger.error("Download returned an empty body", extra={"url": url})
            raise DownloadFailedError(url, Exception("Empty response body"))

        logger.info(
            "File downloaded",
            extra={"url": url, "path": str(destination), "bytes": written},
        )
        return written
