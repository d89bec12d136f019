"""Transcription endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile

from media_transcriber.dependencies import get_pipeline, get_workspace
from media_transcriber.domain import Workspace
from media_transcriber.exceptions import (
    InvalidSourceError,
    MissingInputError,
    PipelineError,
    SourceNotSupportedError,
    TranscriptionFailedError,
)
from media_transcriber.handlers import TranscriptionPipeline
from media_transcriber.logging import setup_logging
from media_transcriber.response_models import (
    PlatformTranscriptionResponse,
    TranscriptionResponse,
    UrlRequest,
)

logger = setup_logging()

router = APIRouter(prefix="/api/transcribe", tags=["transcribe"])

PipelineDep = Annotated[TranscriptionPipeline, Depends(get_pipeline)]
WorkspaceDep = Annotated[Workspace, Depends(get_workspace)]

_NOT_IMPLEMENTED = {
    "Spotify": (
        "Spotify transcription is not yet implemented. "
        "This would require Spotify API integration."
    ),
    "SoundCloud": (
        "SoundCloud transcription is not yet implemented. "
        "This would require SoundCloud API integration."
    ),
}


@router.post("/youtube", response_model=PlatformTranscriptionResponse)
def transcribe_youtube(request: UrlRequest, pipeline: PipelineDep):
    """Downloads the audio-only stream of a YouTube video and transcribes it."""
    try:
        result = pipeline.transcribe_platform(request.url)
    except MissingInputError:
        raise HTTPException(status_code=400, detail="URL is required")
    except InvalidSourceError:
        raise HTTPException(status_code=400, detail="Invalid YouTube URL")
    except TranscriptionFailedError:
        raise HTTPException(status_code=500, detail="Failed to transcribe audio")
    except PipelineError:
        raise HTTPException(status_code=500, detail="Failed to process YouTube video")
    except Exception:
        logger.exception("YouTube processing error", extra={"url": request.url})
        raise HTTPException(status_code=500, detail="Failed to process YouTube video")
    return PlatformTranscriptionResponse(title=result.title, transcription=result.text)


def _reject_unsupported(platform: str, request: UrlRequest, pipeline: TranscriptionPipeline):
    try:
        pipeline.reject_unsupported(platform, request.url)
    except MissingInputError:
        raise HTTPException(status_code=400, detail="URL is required")
    except SourceNotSupportedError:
        raise HTTPException(status_code=501, detail=_NOT_IMPLEMENTED[platform])


@router.post("/spotify", status_code=501)
def transcribe_spotify(request: UrlRequest, pipeline: PipelineDep):
    """Declared but not implemented."""
    _reject_unsupported("Spotify", request, pipeline)


@router.post("/soundcloud", status_code=501)
def transcribe_soundcloud(request: UrlRequest, pipeline: PipelineDep):
    """Declared but not implemented."""
    _reject_unsupported("SoundCloud", request, pipeline)


@router.post("/url", response_model=TranscriptionResponse)
def transcribe_url(request: UrlRequest, pipeline: PipelineDep):
    """Downloads a media file from a URL and transcribes it."""
    try:
        result = pipeline.transcribe_url(request.url)
    except MissingInputError:
        raise HTTPException(status_code=400, detail="URL is required")
    except PipelineError:
        raise HTTPException(status_code=500, detail="Failed to process audio from URL")
    except Exception:
        logger.exception("URL processing error", extra={"url": request.url})
        raise HTTPException(status_code=500, detail="Failed to process audio from URL")
    return TranscriptionResponse(transcription=result.text)


@router.post("/file", response_model=TranscriptionResponse)
def transcribe_file(
    pipeline: PipelineDep,
    workspace: WorkspaceDep,
    file: UploadFile | None = File(None),
):
    """
    Transcribes an uploaded audio or video file.

    Video uploads have their audio track extracted first.
    """
    try:
        upload_path = None
        content_type = None
        if file is not None and file.filename:
            upload_path = workspace.store_upload(file.file, file.filename)
            content_type = file.content_type
        result = pipeline.transcribe_upload(upload_path, content_type)
    except MissingInputError:
        raise HTTPException(status_code=400, detail="No file uploaded")
    except PipelineError:
        raise HTTPException(status_code=500, detail="Failed to process audio file")
    except Exception:
        logger.exception(
            "File processing error",
            extra={"file_name": file.filename if file else None},
        )
        raise HTTPException(status_code=500, detail="Failed to process audio file")
    return TranscriptionResponse(transcription=result.text)
