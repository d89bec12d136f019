import os
import tempfile
from pathlib import Path

import pytest

os.environ.setdefault("ASSEMBLYAI_API_KEY", "test-key")
os.environ.setdefault("DD_TRACE_ENABLED", "false")
os.environ.setdefault("FFMPEG_BINARY", "ffmpeg")
os.environ.setdefault("WORKSPACE_DIR", tempfile.mkdtemp(prefix="media-transcriber-"))

from media_transcriber.domain import PlatformMedia, Workspace  # noqa: E402
from media_transcriber.exceptions import (  # noqa: E402
    DownloadFailedError,
    ExtractionFailedError,
    SourceUnavailableError,
    TranscriptionFailedError,
)
from media_transcriber.handlers import (  # noqa: E402
    SourceResolver,
    TranscriptionPipeline,
)
from media_transcriber.infrastructure.interfaces import (  # noqa: E402
    Downloader,
    PlatformClient,
    Transcoder,
    TranscriptionService,
)

AUDIO_BYTES = b"ID3" + b"\x00" * 1024


class FakePlatformClient(PlatformClient):
    name = "YouTube"

    def __init__(self, payload: bytes = AUDIO_BYTES, fail_on: str | None = None):
        self.payload = payload
        self.fail_on = fail_on
        self.info_calls: list[str] = []
        self.downloads: list[Path] = []

    def is_valid_url(self, url: str) -> bool:
        return url.startswith("https://www.youtube.com/watch?v=")

    def fetch_media_info(self, url: str) -> PlatformMedia:
        self.info_calls.append(url)
        if self.fail_on == "info":
            raise SourceUnavailableError(url, Exception("metadata unavailable"))
        return PlatformMedia(
            media_id="abc123", title="Test video", format_id="140", extension="m4a"
        )

    def download(self, url: str, media: PlatformMedia, destination: Path) -> None:
        self.downloads.append(destination)
        if self.fail_on == "download":
            destination.write_bytes(self.payload[:10])
            raise SourceUnavailableError(url, Exception("stream interrupted"))
        destination.write_bytes(self.payload)


class FakeDownloader(Downloader):
    def __init__(self, payload: bytes = AUDIO_BYTES, status_code: int | None = None):
        self.payload = payload
        self.status_code = status_code
        self.downloads: list[Path] = []

    def download(self, url: str, destination: Path) -> int:
        self.downloads.append(destination)
        if self.status_code is not None:
            destination.write_bytes(b"<html>not found</html>")
            raise DownloadFailedError(url, status_code=self.status_code)
        destination.write_bytes(self.payload)
        return len(self.payload)


class FakeTranscoder(Transcoder):
    def __init__(self, exit_code: int = 0):
        self.exit_code = exit_code
        self.calls: list[Path] = []

    def extract(self, input_path: Path) -> Path:
        self.calls.append(input_path)
        output_path = self.output_path(input_path)
        if self.exit_code != 0:
            output_path.write_bytes(b"partial")
            raise ExtractionFailedError(input_path.name, exit_code=self.exit_code)
        output_path.write_bytes(AUDIO_BYTES)
        return output_path


class FakeTranscriptionService(TranscriptionService):
    def __init__(self, text: str = "hello world", fail: bool = False):
        self.text = text
        self.fail = fail
        self.calls: list[Path] = []
        self.sizes: list[int] = []

    def transcribe(self, audio_path: Path) -> str:
        self.calls.append(audio_path)
        self.sizes.append(audio_path.stat().st_size)
        if self.fail:
            raise TranscriptionFailedError(audio_path.name, Exception("quota exceeded"))
        return self.text


def workspace_files(workspace: Workspace) -> list[Path]:
    return sorted(p for p in workspace.root.iterdir())


@pytest.fixture
def workspace(tmp_path):
    ws = Workspace(tmp_path / "workspace")
    ws.ensure_exists()
    return ws


@pytest.fixture
def platform():
    return FakePlatformClient()


@pytest.fixture
def downloader():
    return FakeDownloader()


@pytest.fixture
def transcoder():
    return FakeTranscoder()


@pytest.fixture
def transcription_service():
    return FakeTranscriptionService()


@pytest.fixture
def resolver(workspace, platform, downloader):
    return SourceResolver(workspace, platform, downloader)


@pytest.fixture
def pipeline(workspace, resolver, transcoder, transcription_service):
    return TranscriptionPipeline(workspace, resolver, transcoder, transcription_service)


@pytest.fixture
def upload(workspace):
    """Stores a fake upload in the workspace and returns its path."""

    def _upload(name: str = "clip.mp4", data: bytes = b"\x00\x00\x00\x18ftypmp42") -> Path:
        path = workspace.allocate("upload", Path(name).suffix)
        path.write_bytes(data)
        return path

    return _upload
