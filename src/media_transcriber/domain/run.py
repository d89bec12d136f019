"""Per-request pipeline run state."""

import os
import uuid
from enum import Enum
from pathlib import Path

from media_transcriber.logging import setup_logging

from .models import ArtifactProvenance

logger = setup_logging()


class RunState(str, Enum):
    RECEIVED = "received"
    RESOLVING = "resolving"
    EXTRACTING = "extracting"
    TRANSCRIBING = "transcribing"
    CLEANING = "cleaning"
    DONE = "done"
    FAILED = "failed"


_TRANSITIONS: dict[RunState, frozenset[RunState]] = {
    RunState.RECEIVED: frozenset({RunState.RESOLVING, RunState.FAILED}),
    RunState.RESOLVING: frozenset(
        {RunState.EXTRACTING, RunState.TRANSCRIBING, RunState.CLEANING}
    ),
    RunState.EXTRACTING: frozenset({RunState.TRANSCRIBING, RunState.CLEANING}),
    RunState.TRANSCRIBING: frozenset({RunState.CLEANING}),
    RunState.CLEANING: frozenset({RunState.DONE, RunState.FAILED}),
    RunState.DONE: frozenset(),
    RunState.FAILED: frozenset(),
}


class PipelineRun:
    """
    Binds one source to the artifacts it created.

    Artifacts are keyed by absolute path so a file registered twice (an
    upload that is also the final audio) is deleted once.
    """

    def __init__(self, source_label: str):
        self.run_id = uuid.uuid4().hex
        self.source_label = source_label
        self.state = RunState.RECEIVED
        self._artifacts: dict[str, ArtifactProvenance] = {}

    def transition(self, state: RunState) -> None:
        """Moves the run to `state`, rejecting out-of-order transitions."""
        if state not in _TRANSITIONS[self.state]:
            raise ValueError(
                f"Illegal pipeline transition {self.state.value} -> {state.value}"
            )
        logger.info(
            "Pipeline state changed",
            extra={
                "run_id": self.run_id,
                "source": self.source_label,
                "from_state": self.state.value,
                "state": state.value,
            },
        )
        self.state = state

    def track(self, path: Path, provenance: ArtifactProvenance) -> None:
        """Registers a file this run owns, before anything is written to it."""
        self._artifacts.setdefault(os.path.abspath(path), provenance)

    @property
    def artifacts(self) -> list[Path]:
        return [Path(p) for p in self._artifacts]
