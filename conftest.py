"""In-memory audio producers and fixtures shared by the test modules."""
from typing import List, Optional
from unittest.mock import MagicMock

import pytest

from read_practice.capture.devices import AudioRecorder, RecognitionSettings, SpeechRecognizer
from read_practice.capture.events import (
    AudioChunk,
    EventChannel,
    RecognitionError,
    RecognitionResult,
    RecognizedSegment,
    RecordingStopped,
)
from read_practice.errors import MicrophoneUnavailableError
from read_practice.feedback.client import ReadingServiceClient
from read_practice.feedback.pipeline import FeedbackOutcome, FeedbackPipeline
from read_practice.playback import AudioPlayer


class FakeRecorder(AudioRecorder):
    """Recorder that emits whatever the test feeds it.

    With ``deliver_on_stop`` the stop event follows ``stop()`` immediately;
    otherwise the test calls ``finish()`` to simulate the late completion.
    """

    def __init__(self, deny: bool = False, deliver_on_stop: bool = True):
        self.deny = deny
        self.deliver_on_stop = deliver_on_stop
        self.events: Optional[EventChannel] = None
        self.opened = 0
        self.stop_calls = 0
        self._active = False

    def open(self) -> None:
        if self.deny:
            raise MicrophoneUnavailableError("Permission denied")
        self.opened += 1

    def start(self, events: EventChannel) -> None:
        self.events = events
        self._active = True

    def stop(self) -> None:
        self.stop_calls += 1
        self._active = False
        if self.deliver_on_stop:
            self.finish()

    @property
    def active(self) -> bool:
        return self._active

    def emit(self, data: bytes) -> None:
        self.events.publish(AudioChunk(data))

    def finish(self) -> None:
        self.events.publish(RecordingStopped())


class FakeRecognizer(SpeechRecognizer):
    def __init__(self, supported: bool = True, fail_on_stop: bool = False):
        self.supported = supported
        self.fail_on_stop = fail_on_stop
        self.settings: Optional[RecognitionSettings] = None
        self.events: Optional[EventChannel] = None
        self.start_calls = 0
        self.stop_calls = 0

    def start(self, settings: RecognitionSettings, events: EventChannel) -> None:
        self.settings = settings
        self.events = events
        self.start_calls += 1

    def stop(self) -> None:
        self.stop_calls += 1
        if self.fail_on_stop:
            raise RuntimeError("recognition has not started")

    def final(self, *texts: str) -> None:
        segments = [RecognizedSegment(t, is_final=True) for t in texts]
        self.events.publish(RecognitionResult(results=segments, result_index=0))

    def interim(self, text: str) -> None:
        self.events.publish(RecognitionResult(results=[RecognizedSegment(text, is_final=False)]))

    def error(self, message: str) -> None:
        self.events.publish(RecognitionError(message))


class FakePlayer(AudioPlayer):
    def __init__(self):
        self.played: List[bytes] = []

    def play(self, audio: bytes) -> None:
        self.played.append(audio)


@pytest.fixture
def recorder():
    return FakeRecorder()


@pytest.fixture
def recognizer():
    return FakeRecognizer()


@pytest.fixture
def pipeline():
    mock = MagicMock(spec=FeedbackPipeline)
    mock.run.return_value = FeedbackOutcome()
    return mock


@pytest.fixture
def client():
    return MagicMock(spec=ReadingServiceClient)
