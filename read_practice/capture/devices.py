"""Interfaces for the two audio producers driven by the capture controller.

Concrete recorders and recognizers belong to the runtime (browser bridge,
desktop audio stack, test doubles). They report everything through the
``EventChannel`` handed to them on start:

- recorder: ``AudioChunk`` while recording, one ``RecordingStopped`` after
  ``stop()`` once every fragment has been delivered
- recognizer: ``RecognitionResult`` and ``RecognitionError``
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from .events import EventChannel


@dataclass(frozen=True)
class RecognitionSettings:
    lang: str = "en-US"
    continuous: bool = True
    interim_results: bool = True
    max_alternatives: int = 1


class AudioRecorder(ABC):
    """Finite audio recorder backed by a microphone stream."""

    @abstractmethod
    def open(self) -> None:
        """Acquire a fresh microphone stream.

        Raises:
            MicrophoneUnavailableError: permission denied or no input device
        """

    @abstractmethod
    def start(self, events: EventChannel) -> None:
        """Begin buffering; fragments are published as ``AudioChunk``."""

    @abstractmethod
    def stop(self) -> None:
        """Request stop; ``RecordingStopped`` follows the last fragment."""

    @property
    @abstractmethod
    def active(self) -> bool:
        ...


class SpeechRecognizer(ABC):
    """Continuous recognizer producing interim and finalized results."""

    supported: bool = True

    @abstractmethod
    def start(self, settings: RecognitionSettings, events: EventChannel) -> None:
        ...

    @abstractmethod
    def stop(self) -> None:
        ...


class UnsupportedRecognizer(SpeechRecognizer):
    """Stand-in for runtimes without speech recognition."""

    supported = False

    def start(self, settings: RecognitionSettings, events: EventChannel) -> None:
        return None

    def stop(self) -> None:
        return None
