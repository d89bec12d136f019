"""Turns a source descriptor into a local audio file."""

from pathlib import Path
from urllib.parse import urlparse

from media_transcriber.domain import (
    ArtifactProvenance,
    LocalAudioArtifact,
    PipelineRun,
    PlatformSource,
    SourceDescriptor,
    UploadSource,
    UrlSource,
    Workspace,
)
from media_transcriber.exceptions import InvalidSourceError, SourceUnavailableError
from media_transcriber.infrastructure.interfaces import Downloader, PlatformClient
from media_transcriber.logging import setup_logging

logger = setup_logging()


class SourceResolver:
    """Produces a workspace audio file for each kind of source."""

    def __init__(
        self,
        workspace: Workspace,
        platform: PlatformClient,
        downloader: Downloader,
        default_extension: str = ".mp3",
    ):
        self._workspace = workspace
        self._platform = platform
        self._downloader = downloader
        self._default_extension = default_extension

    def resolve(self, source: SourceDescriptor, run: PipelineRun) -> LocalAudioArtifact:
        """
        Resolves `source` to a local file.

        Every path is registered on `run` before it is written, so partial
        files are cleaned up when a download fails halfway.

        Raises:
            InvalidSourceError: Platform URL does not match the platform pattern.
            SourceUnavailableError: Metadata, stream or download failure.
        """
        if isinstance(source, PlatformSource):
            return self._resolve_platform(source, run)
        if isinstance(source, UrlSource):
            return self._resolve_url(source, run)
        if isinstance(source, UploadSource):
            return self._resolve_upload(source, run)
        raise TypeError(f"Unsupported source descriptor: {type(source).__name__}")

    def _resolve_platform(
        self, source: PlatformSource, run: PipelineRun
    ) -> LocalAudioArtifact:
        if not self._platform.is_valid_url(source.url):
            raise InvalidSourceError(source.url)

        media = self._platform.fetch_media_info(source.url)
        path = self._workspace.allocate(media.media_id, media.extension)
        run.track(path, ArtifactProvenance.DOWNLOADED)

        self._platform.download(source.url, media, path)
        if not path.is_file() or path.stat().st_size == 0:
            raise SourceUnavailableError(
                source.url, Exception("Downloaded audio stream is empty")
            )

        logger.info(
            "Platform audio resolved",
            extra={"run_id": run.run_id, "video_id": media.media_id, "path": str(path)},
        )
        return LocalAudioArtifact(
            path=path, provenance=ArtifactProvenance.DOWNLOADED, title=media.title
        )

    def _resolve_url(self, source: UrlSource, run: PipelineRun) -> LocalAudioArtifact:
        suffix = Path(urlparse(source.url).path).suffix or self._default_extension
        path = self._workspace.allocate("url", suffix)
        if not path.suffix:
            path = path.with_suffix(self._default_extension)
        run.track(path, ArtifactProvenance.DOWNLOADED)

        self._downloader.download(source.url, path)

        logger.info(
            "URL audio resolved",
            extra={"run_id": run.run_id, "url": source.url, "path": str(path)},
        )
        return LocalAudioArtifact(path=path, provenance=ArtifactProvenance.DOWNLOADED)

    def _resolve_upload(
        self, source: UploadSource, run: PipelineRun
    ) -> LocalAudioArtifact:
        run.track(source.path, ArtifactProvenance.PASS_THROUGH)
        if not source.path.is_file():
            raise SourceUnavailableError(
                str(source.path), Exception("Uploaded file is missing")
            )
        return LocalAudioArtifact(
            path=source.path, provenance=ArtifactProvenance.PASS_THROUGH
        )
