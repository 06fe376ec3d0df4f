"""Data models for passages, capture sessions and service results."""
from .passage_word import PassageWordUnit
from .results import CoachingResult, EvaluationResult, Tip, WordStatus
from .session import AudioArtifact, CaptureSession, ReadingContext

__all__ = [
    "PassageWordUnit",
    "CoachingResult",
    "EvaluationResult",
    "Tip",
    "WordStatus",
    "AudioArtifact",
    "CaptureSession",
    "ReadingContext",
]
