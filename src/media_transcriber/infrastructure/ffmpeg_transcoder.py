"""ffmpeg implementation of the Transcoder interface."""

import subprocess
from pathlib import Path

from media_transcriber.config import TranscoderConfig
from media_transcriber.exceptions import ExtractionFailedError
from media_transcriber.logging import setup_logging

from .interfaces import Transcoder

logger = setup_logging()

_STDERR_TAIL_LINES = 20


class FfmpegTranscoder(Transcoder):
    """Extracts audio tracks by running ffmpeg as a child process."""

    def __init__(self, ffmpeg_binary: str, config: TranscoderConfig):
        self._binary = ffmpeg_binary
        self._config = config
        self.output_extension = config.output_extension

    def build_command(self, input_path: Path, output_path: Path) -> list[str]:
        return [
            self._binary,
            "-y",
            "-i",
            str(input_path),
            "-vn",
            "-acodec",
            self._config.audio_codec,
            "-ab",
            self._config.bitrate,
            "-ar",
            str(self._config.sample_rate),
            str(output_path),
        ]

    def extract(self, input_path: Path) -> Path:
        """
        Runs ffmpeg and waits for it to exit.

        Success is decided by the exit status alone; stderr is only logged.

        Raises:
            ExtractionFailedError: On nonzero exit, timeout, or a missing binary.
        """
        input_path = Path(input_path)
        output_path = self.output_path(input_path)
        command = self.build_command(input_path, output_path)

        logger.info(
            "Running ffmpeg",
            extra={
                "command": command,
                "timeout_seconds": self._config.timeout_seconds,
            },
        )
        try:
            result = subprocess.run(
                command,
                stdin=subprocess.DEVNULL,
                capture_output=True,
                text=True,
                timeout=self._config.timeout_seconds,
                check=False,
            )
        except subprocess.TimeoutExpired as e:
            logger.exception(
                "ffmpeg timed out", extra={"file_name": input_path.name}
            )
            raise ExtractionFailedError(input_path.name, cause=e) from e
        except OSError as e:
            logger.exception(
                "ffmpeg could not be started",
                extra={"file_name": input_path.name, "binary": self._binary},
            )
            raise ExtractionFailedError(input_path.name, cause=e) from e

        stderr_lines = (result.stderr or "").splitlines()
        if stderr_lines:
            logger.info(
                "ffmpeg output",
                extra={"file_name": input_path.name, "stderr": stderr_lines},
            )

        if result.returncode != 0:
            logger.error(
                "ffmpeg exited with an error",
                extra={
                    "file_name": input_path.name,
                    "exit_code": result.returncode,
                    "stderr_tail": stderr_lines[-_STDERR_TAIL_LINES:],
                },
            )
            raise ExtractionFailedError(input_path.name, exit_code=result.returncode)

        logger.info(
            "Audio extracted successfully",
            extra={"video_file": input_path.name, "audio_file": output_path.name},
        )
        return output_path
