"""Infrastructure layer exports."""

from .assemblyai_transcriber import AssemblyAITranscriber
from .ffmpeg_transcoder import FfmpegTranscoder
from .http_downloader import HttpDownloader
from .ytdlp_client import YtDlpClient

__all__ = ["AssemblyAITranscriber", "FfmpegTranscoder", "HttpDownloader", "YtDlpClient"]
