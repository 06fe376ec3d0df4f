"""Recorder/recognizer coordination for one practice attempt.

The controller lives in ``read_practice.capture.controller``; this package
namespace only carries the event and device types it is built from.
"""
from .devices import AudioRecorder, RecognitionSettings, SpeechRecognizer, UnsupportedRecognizer
from .events import (
    AudioChunk,
    EventChannel,
    RecognitionError,
    RecognitionResult,
    RecognizedSegment,
    RecordingStopped,
)

__all__ = [
    "AudioRecorder",
    "RecognitionSettings",
    "SpeechRecognizer",
    "UnsupportedRecognizer",
    "AudioChunk",
    "EventChannel",
    "RecognitionError",
    "RecognitionResult",
    "RecognizedSegment",
    "RecordingStopped",
]
