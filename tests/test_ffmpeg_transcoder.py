import logging
import subprocess

import pytest

from media_transcriber.config import TranscoderConfig
from media_transcriber.exceptions import ExtractionFailedError
from media_transcriber.infrastructure import FfmpegTranscoder


class FakeRun:
    def __init__(self, returncode=0, stderr="", raises=None):
        self.returncode = returncode
        self.stderr = stderr
        self.raises = raises
        self.calls = []

    def __call__(self, args, **kwargs):
        self.calls.append((args, kwargs))
        if self.raises is not None:
            raise self.raises
        return subprocess.CompletedProcess(args, self.returncode, stdout="", stderr=self.stderr)


@pytest.fixture
def transcoder():
    return FfmpegTranscoder("ffmpeg", TranscoderConfig())


def test_output_path_is_derived_from_input_name(transcoder, tmp_path):
    assert transcoder.output_path(tmp_path / "upload_1.mp4") == tmp_path / "upload_1_audio.mp3"
    assert transcoder.output_path(tmp_path / "upload_2.mp3") == tmp_path / "upload_2_audio.mp3"


def test_extract_runs_ffmpeg_with_fixed_arguments(transcoder, tmp_path, monkeypatch):
    fake_run = FakeRun(stderr="Input #0, mov\nOutput #0, mp3")
    monkeypatch.setattr(subprocess, "run", fake_run)
    input_path = tmp_path / "upload_1.mp4"

    output_path = transcoder.extract(input_path)

    args, kwargs = fake_run.calls[0]
    assert output_path == tmp_path / "upload_1_audio.mp3"
    assert args[0] == "ffmpeg"
    assert args[args.index("-i") + 1] == str(input_path)
    assert "-vn" in args
    assert args[args.index("-acodec") + 1] == "libmp3lame"
    assert args[args.index("-ab") + 1] == "128k"
    assert args[args.index("-ar") + 1] == "44100"
    assert args[-1] == str(output_path)
    assert kwargs["check"] is False
    assert kwargs["stdin"] is subprocess.DEVNULL


def test_nonzero_exit_raises_with_exit_code(transcoder, tmp_path, monkeypatch):
    monkeypatch.setattr(subprocess, "run", FakeRun(returncode=1, stderr="Invalid data"))

    with pytest.raises(ExtractionFailedError) as exc_info:
        transcoder.extract(tmp_path / "broken.mp4")

    assert exc_info.value.exit_code == 1
    assert exc_info.value.file_name == "broken.mp4"


def test_missing_binary_raises_extraction_failed(transcoder, tmp_path, monkeypatch):
    monkeypatch.setattr(subprocess, "run", FakeRun(raises=FileNotFoundError("ffmpeg")))

    with pytest.raises(ExtractionFailedError) as exc_info:
        transcoder.extract(tmp_path / "clip.mp4")

    assert exc_info.value.exit_code is None
    assert isinstance(exc_info.value.cause, FileNotFoundError)


def test_timeout_raises_extraction_failed(transcoder, tmp_path, monkeypatch):
    monkeypatch.setattr(
        subprocess, "run", FakeRun(raises=subprocess.TimeoutExpired("ffmpeg", 600))
    )

    with pytest.raises(ExtractionFailedError):
        transcoder.extract(tmp_path / "clip.mp4")


def test_custom_codec_settings(tmp_path, monkeypatch):
    fake_run = FakeRun()
    monkeypatch.setattr(subprocess, "run", fake_run)
    transcoder = FfmpegTranscoder(
        "/opt/ffmpeg", TranscoderConfig(bitrate="64k", output_extension=".m4a", audio_codec="aac")
    )

    output_path = transcoder.extract(tmp_path / "clip.mov")

    args, _ = fake_run.calls[0]
    assert args[0] == "/opt/ffmpeg"
    assert args[args.index("-ab") + 1] == "64k"
    assert output_path.suffix == ".m4a"


def _ffmpeg_output_records(caplog):
    return [record for record in caplog.records if record.getMessage() == "ffmpeg output"]


def test_stderr_is_logged_at_info_on_success(transcoder, tmp_path, monkeypatch, caplog):
    monkeypatch.setattr(
        subprocess, "run", FakeRun(stderr="Input #0, mov\nStream mapping: aac -> mp3")
    )

    transcoder.extract(tmp_path / "clip.mp4")

    records = _ffmpeg_output_records(caplog)
    assert len(records) == 1
    assert records[0].levelno == logging.INFO
    assert records[0].stderr == ["Input #0, mov", "Stream mapping: aac -> mp3"]
    assert records[0].file_name == "clip.mp4"


def test_stderr_is_logged_on_nonzero_exit(transcoder, tmp_path, monkeypatch, caplog):
    monkeypatch.setattr(
        subprocess, "run", FakeRun(returncode=1, stderr="moov atom not found\nInvalid data")
    )

    with pytest.raises(ExtractionFailedError):
        transcoder.extract(tmp_path / "broken.mp4")

    records = _ffmpeg_output_records(caplog)
    assert len(records) == 1
    assert records[0].levelno == logging.INFO
    assert records[0].stderr == ["moov atom not found", "Invalid data"]
    failure = next(r for r in caplog.records if r.getMessage() == "ffmpeg exited with an error")
    assert failure.levelno == logging.ERROR
    assert failure.stderr_tail == ["moov atom not found", "Invalid data"]


def test_empty_stderr_logs_nothing_extra(transcoder, tmp_path, monkeypatch, caplog):
    monkeypatch.setattr(subprocess, "run", FakeRun())

    transcoder.extract(tmp_path / "clip.mp4")

    assert _ffmpeg_output_records(caplog) == []
