"""Text-to-speech playback for the passage and for coaching feedback."""
from __future__ import annotations

import warnings
from abc import ABC, abstractmethod

from read_practice.errors import ServiceError
from read_practice.feedback.client import ReadingServiceClient
from read_practice.feedback.view import FeedbackView
from read_practice.models.session import ReadingContext


class AudioPlayer(ABC):
    @abstractmethod
    def play(self, audio: bytes) -> None:
        """Start playing synthesized audio immediately."""


class PlaybackTrigger:
    """Fire-and-forget speech playback; failures are reported, never raised."""

    def __init__(self, client: ReadingServiceClient, player: AudioPlayer):
        self.client = client
        self.player = player

    def speak(self, text: str) -> bool:
        try:
            audio = self.client.synthesize_speech(text)
        except ServiceError as e:
            warnings.warn(f"TTS request failed: {e}")
            return False
        self.player.play(audio)
        return True

    def speak_passage(self, context: ReadingContext) -> bool:
        """Read the correct passage aloud."""
        return self.speak(context.passage_text or "")

    def speak_feedback(self, view: FeedbackView) -> bool:
        """Read the coach's encouragement aloud; nothing to say means no request."""
        if not view.has_encouragement:
            return False
        return self.speak(view.encouragement)
