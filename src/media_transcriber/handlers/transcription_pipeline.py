"""Pipeline orchestrator: resolve, extract, transcribe, clean up."""

from pathlib import Path

from media_transcriber.domain import (
    ArtifactProvenance,
    LocalAudioArtifact,
    PipelineRun,
    PlatformSource,
    RunState,
    SourceDescriptor,
    TranscriptionResult,
    UploadSource,
    UrlSource,
    Workspace,
)
from media_transcriber.exceptions import MissingInputError, SourceNotSupportedError
from media_transcriber.infrastructure.interfaces import (
    Transcoder,
    TranscriptionService,
)
from media_transcriber.logging import setup_logging

from .source_resolver import SourceResolver

logger = setup_logging()


class TranscriptionPipeline:
    """
    Runs one source through to a transcription.

    Each call is an independent run. Whatever the outcome, every file the
    run created is deleted before the call returns or raises.
    """

    def __init__(
        self,
        workspace: Workspace,
        resolver: SourceResolver,
        transcoder: Transcoder,
        transcription_service: TranscriptionService,
    ):
        self._workspace = workspace
        self._resolver = resolver
        self._transcoder = transcoder
        self._transcription_service = transcription_service

    def transcribe_platform(self, url: str | None) -> TranscriptionResult:
        """Transcribes a YouTube link; the result carries the video title."""
        run = self._receive("platform", url, "url")
        return self._execute(run, PlatformSource(url=url))

    def transcribe_url(self, url: str | None) -> TranscriptionResult:
        """Transcribes a direct link to a media file."""
        run = self._receive("url", url, "url")
        return self._execute(run, UrlSource(url=url))

    def transcribe_upload(
        self, path: Path | None, content_type: str | None
    ) -> TranscriptionResult:
        """Transcribes a file already stored in the workspace, extracting audio from video."""
        run = self._receive("upload", path, "file")
        source = UploadSource(
            path=path, content_type=content_type or "application/octet-stream"
        )
        return self._execute(run, source)

    def reject_unsupported(self, platform: str, url: str | None) -> None:
        """Validates input presence, then reports `platform` as unsupported."""
        run = self._receive(platform.lower(), url, "url")
        run.transition(RunState.FAILED)
        raise SourceNotSupportedError(platform)

    def _receive(self, label: str, value: object, field: str) -> PipelineRun:
        run = PipelineRun(label)
        if not value:
            logger.warning(
                "Request rejected: missing input",
                extra={"run_id": run.run_id, "field": field},
            )
            run.transition(RunState.FAILED)
            raise MissingInputError(field)
        return run

    def _execute(self, run: PipelineRun, source: SourceDescriptor) -> TranscriptionResult:
        try:
            result = self._process(run, source)
        except Exception as e:
            logger.error(
                "Pipeline run failed",
                extra={
                    "run_id": run.run_id,
                    "state": run.state.value,
                    "error_type": type(e).__name__,
                    "error": str(e),
                },
            )
            self._clean(run)
            run.transition(RunState.FAILED)
            raise
        self._clean(run)
        run.transition(RunState.DONE)
        return result

    def _process(self, run: PipelineRun, source: SourceDescriptor) -> TranscriptionResult:
        run.transition(RunState.RESOLVING)
        artifact = self._resolver.resolve(source, run)

        if isinstance(source, UploadSource) and source.is_video:
            run.transition(RunState.EXTRACTING)
            artifact = self._extract(artifact, run)

        run.transition(RunState.TRANSCRIBING)
        text = self._transcription_service.transcribe(artifact.path)

        logger.info(
            "Transcription completed",
            extra={"run_id": run.run_id, "audio_file": artifact.path.name},
        )
        return TranscriptionResult(text=text, title=artifact.title)

    def _extract(self, artifact: LocalAudioArtifact, run: PipelineRun) -> LocalAudioArtifact:
        run.track(
            self._transcoder.output_path(artifact.path), ArtifactProvenance.EXTRACTED
        )
        audio_path = self._transcoder.extract(artifact.path)
        run.track(audio_path, ArtifactProvenance.EXTRACTED)
        return LocalAudioArtifact(
            path=audio_path,
            provenance=ArtifactProvenance.EXTRACTED,
            title=artifact.title,
        )

    def _clean(self, run: PipelineRun) -> None:
        run.transition(RunState.CLEANING)
        for path in run.artifacts:
            self._workspace.remove(path)
