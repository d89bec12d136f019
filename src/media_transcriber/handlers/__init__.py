"""Handlers orchestrating domain logic over infrastructure capabilities."""

from .source_resolver import SourceResolver
from .transcription_pipeline import TranscriptionPipeline

__all__ = ["SourceResolver", "TranscriptionPipeline"]
