"""
read_practice

Reading-practice controller:
- live word highlighting from a continuous recognizer (greedy forward match)
- one recorder + one recognizer coordinated per attempt
- transcribe -> evaluate -> persist -> coach feedback chain against the backend
- text-to-speech playback of the passage and the coach's encouragement
"""
from .alignment import PassageRenderer, mark_words_as_read, normalize_words, tokenize_passage
from .capture.controller import CaptureController, CaptureState
from .config import PipelineConfig
from .errors import CaptureStateError, MicrophoneUnavailableError, ReadPracticeError, ServiceError
from .feedback import FeedbackOutcome, FeedbackPipeline, FeedbackView, ReadingServiceClient
from .models import AudioArtifact, CaptureSession, CoachingResult, EvaluationResult, PassageWordUnit, ReadingContext
from .playback import AudioPlayer, PlaybackTrigger

__all__ = [
    "PassageRenderer",
    "mark_words_as_read",
    "normalize_words",
    "tokenize_passage",
    "CaptureController",
    "CaptureState",
    "PipelineConfig",
    "CaptureStateError",
    "MicrophoneUnavailableError",
    "ReadPracticeError",
    "ServiceError",
    "FeedbackOutcome",
    "FeedbackPipeline",
    "FeedbackView",
    "ReadingServiceClient",
    "AudioArtifact",
    "CaptureSession",
    "CoachingResult",
    "EvaluationResult",
    "PassageWordUnit",
    "ReadingContext",
    "AudioPlayer",
    "PlaybackTrigger",
]
