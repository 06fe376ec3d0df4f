"""Per-attempt capture state and the context threaded through an attempt."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional
from urllib.parse import parse_qs

from read_practice.capture.events import EventChannel

AUDIO_MIME_TYPE = "audio/webm"
AUDIO_FILENAME = "audio.webm"


@dataclass(frozen=True)
class ReadingContext:
    """What the page knows about the current practice.

    Attributes:
        passage_text: The reference passage (None when nothing is loaded)
        assignment_id: Assignment scope for persistence and grade lookup
    """
    passage_text: Optional[str] = None
    assignment_id: Optional[int] = None

    @property
    def has_passage(self) -> bool:
        return bool(self.passage_text and self.passage_text.strip())

    @classmethod
    def from_query(cls, passage_text: Optional[str], query_string: str = "") -> "ReadingContext":
        """Build a context, reading the assignment id from a URL query string.

        Example: ``ReadingContext.from_query(text, "?id=42")`` scopes the
        attempt to assignment 42. A missing or non-integer ``id`` leaves the
        attempt unscoped.
        """
        params = parse_qs(query_string.lstrip("?"))
        raw_id = (params.get("id") or [""])[0].strip()
        try:
            assignment_id: Optional[int] = int(raw_id)
        except ValueError:
            assignment_id = None
        return cls(passage_text=passage_text, assignment_id=assignment_id)


@dataclass(frozen=True)
class AudioArtifact:
    """The finished recording of one attempt."""
    data: bytes
    mime_type: str = AUDIO_MIME_TYPE
    filename: str = AUDIO_FILENAME


@dataclass
class CaptureSession:
    """State of the single live attempt, owned by the capture controller.

    ``transcript`` only ever grows from finalized recognizer results and is
    frozen once ``recognition_active`` drops at stop.
    """
    recording: bool = False
    recognition_active: bool = False
    audio_chunks: List[bytes] = field(default_factory=list)
    transcript: str = ""
    events: EventChannel = field(default_factory=EventChannel)

    def append_final_result(self, text: str) -> bool:
        if not self.recognition_active:
            return False
        self.transcript += text + " "
        return True

    def assemble_artifact(self) -> AudioArtifact:
        """Join the buffered fragments into one artifact and clear the buffer."""
        artifact = AudioArtifact(data=b"".join(self.audio_chunks))
        self.audio_chunks = []
        return artifact
