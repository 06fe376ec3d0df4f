"""Exceptions raised by the reading-practice controller."""
from __future__ import annotations

from typing import Optional


class ReadPracticeError(Exception):
    pass


class CaptureStateError(ReadPracticeError):
    """A capture operation was requested from a state that does not allow it."""


class MicrophoneUnavailableError(ReadPracticeError):
    """Microphone access was denied or no input device exists."""


class ServiceError(ReadPracticeError):
    """A backend call failed: transport error, non-success status or bad body."""

    def __init__(self, stage: str, message: str, status_code: Optional[int] = None):
        super().__init__(f"{stage}: {message}")
        self.stage = stage
        self.status_code = status_code
