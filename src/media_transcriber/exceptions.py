"""Custom exceptions for the transcription pipeline."""


class PipelineError(Exception):
    """Base class for failures that end a pipeline run."""


class MissingInputError(PipelineError):
    """Raised when a request lacks the URL or file it needs."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Required input '{field}' is missing")


class InvalidSourceError(PipelineError):
    """Raised when a platform URL does not match the platform's pattern."""

    def __init__(self, url: str):
        self.url = url
        super().__init__(f"'{url}' is not a supported platform URL")


class SourceUnavailableError(PipelineError):
    """Raised when audio cannot be obtained from the source."""

    def __init__(self, source: str, cause: Exception | None = None):
        self.source = source
        self.cause = cause
        super().__init__(f"Failed to obtain audio from '{source}'")


class DownloadFailedError(SourceUnavailableError):
    """Raised when a generic URL download fails or returns a non-success status."""

    def __init__(
        self,
        url: str,
        cause: Exception | None = None,
        status_code: int | None = None,
    ):
        super().__init__(url, cause)
        self.url = url
        self.status_code = status_code


class ExtractionFailedError(PipelineError):
    """Raised when the transcoder cannot extract audio from a video file."""

    def __init__(
        self,
        file_name: str,
        exit_code: int | None = None,
        cause: Exception | None = None,
    ):
        self.file_name = file_name
        self.exit_code = exit_code
        self.cause = cause
        super().__init__(
            f"Failed to extract audio from '{file_name}' (exit code {exit_code})"
        )


class TranscriptionFailedError(PipelineError):
    """Raised when audio transcription fails."""

    def __init__(self, file_name: str, cause: Exception | None = None):
        self.file_name = file_name
        self.cause = cause
        super().__init__(f"Failed to transcribe audio file '{file_name}'")


class SourceNotSupportedError(PipelineError):
    """Raised for source platforms that are declared but not implemented."""

    def __init__(self, platform: str):
        self.platform = platform
        super().__init__(f"{platform} transcription is not implemented")
