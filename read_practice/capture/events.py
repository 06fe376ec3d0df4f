"""Event channel connecting the recorder and recognizer to the controller."""
from __future__ import annotations

from collections import defaultdict, deque
from dataclasses import dataclass, field
from typing import Any, Callable, DefaultDict, Deque, List, Sequence


@dataclass(frozen=True)
class RecognizedSegment:
    transcript: str
    is_final: bool = False


@dataclass(frozen=True)
class RecognitionResult:
    """A batch of recognizer results; only entries from ``result_index`` are new."""
    results: Sequence[RecognizedSegment] = field(default_factory=tuple)
    result_index: int = 0


@dataclass(frozen=True)
class RecognitionError:
    error: str


@dataclass(frozen=True)
class AudioChunk:
    data: bytes


@dataclass(frozen=True)
class RecordingStopped:
    pass


Handler = Callable[[Any], None]


class EventChannel:
    """Single-threaded observer with FIFO delivery.

    Handlers for an event type run in subscription order. An event published
    from inside a handler is queued and delivered after the current event
    has reached every handler, so handlers never re-enter each other.
    """

    def __init__(self) -> None:
        self._handlers: DefaultDict[type, List[Handler]] = defaultdict(list)
        self._queue: Deque[Any] = deque()
        self._dispatching = False

    def subscribe(self, event_type: type, handler: Handler) -> None:
        self._handlers[event_type].append(handler)

    def clear(self) -> None:
        self._handlers.clear()
        self._queue.clear()

    def publish(self, event: Any) -> None:
        self._queue.append(event)
        if self._dispatching:
            return
        self._dispatching = True
        try:
            while self._queue:
                current = self._queue.popleft()
                for handler in list(self._handlers.get(type(current), ())):
                    handler(current)
        finally:
            self._dispatching = False
