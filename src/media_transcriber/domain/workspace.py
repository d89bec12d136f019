"""Transient scratch directory for intermediate audio artifacts."""

import itertools
import re
import shutil
import threading
import time
from pathlib import Path
from typing import BinaryIO

from media_transcriber.logging import setup_logging

logger = setup_logging()

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9_-]+")
_EXTENSION = re.compile(r"^\.[A-Za-z0-9]{1,10}$")


class Workspace:
    """
    Allocates collision-free file names inside a shared directory.

    Names combine a nanosecond timestamp with a process-wide counter, so
    concurrent runs never receive the same path.
    """

    def __init__(self, root: Path):
        self.root = Path(root)
        self._counter = itertools.count(1)
        self._lock = threading.Lock()

    def ensure_exists(self) -> None:
        self.root.mkdir(parents=True, exist_ok=True)
        logger.info("Workspace ready", extra={"workspace": str(self.root)})

    def allocate(self, prefix: str, suffix: str = "") -> Path:
        """Returns a fresh path `<prefix>_<unique><suffix>` inside the workspace."""
        with self._lock:
            token = f"{time.time_ns()}_{next(self._counter)}"
        safe_prefix = _UNSAFE_CHARS.sub("_", prefix).strip("_") or "file"
        return self.root / f"{safe_prefix}_{token}{safe_suffix(suffix)}"

    def store_upload(self, data: BinaryIO, original_name: str | None) -> Path:
        """Writes an uploaded stream to a fresh `upload_*` path, keeping its extension."""
        path = self.allocate("upload", Path(original_name or "").suffix)
        try:
            with open(path, "wb") as f:
                shutil.copyfileobj(data, f)
        except OSError:
            logger.exception("Failed to store upload", extra={"path": str(path)})
            self.remove(path)
            raise
        logger.info(
            "Upload stored",
            extra={"path": str(path), "original_name": original_name},
        )
        return path

    def remove(self, path: Path) -> bool:
        """Deletes `path`; failures are logged and reported as False."""
        path = Path(path)
        if not path.exists():
            logger.info("Artifact already absent", extra={"path": str(path)})
            return True
        try:
            path.unlink(missing_ok=True)
        except OSError:
            logger.exception("Failed to delete artifact", extra={"path": str(path)})
            return False
        logger.info("Artifact deleted", extra={"path": str(path)})
        return True


def safe_suffix(suffix: str) -> str:
    """Keeps short alphanumeric extensions and drops anything else."""
    if not suffix:
        return ""
    if not suffix.startswith("."):
        suffix = f".{suffix}"
    return suffix.lower() if _EXTENSION.match(suffix) else ""
