"""Capture controller: one attempt from start button to rendered feedback.

States: IDLE -> RECORDING -> PROCESSING -> IDLE

The recorder and the recognizer run independently and report through the
session's ``EventChannel``. Both are started together and told to stop
together. Recognizer output is aligned live against the passage; when the
recorder reports it has stopped, the buffered audio is handed to the
feedback pipeline.
"""
from __future__ import annotations

import warnings
from enum import Enum
from typing import List, Optional

from read_practice.alignment.aligner import mark_words_as_read
from read_practice.alignment.tokenizer import PassageRenderer
from read_practice.config import PipelineConfig
from read_practice.errors import CaptureStateError, MicrophoneUnavailableError
from read_practice.feedback.pipeline import FeedbackOutcome, FeedbackPipeline
from read_practice.feedback.view import (
    FEEDBACK_FAILED,
    MICROPHONE_UNAVAILABLE,
    NO_PASSAGE,
    PROCESSING,
    RECORDING,
    FeedbackView,
)
from read_practice.models.passage_word import PassageWordUnit
from read_practice.models.session import CaptureSession, ReadingContext
from .devices import AudioRecorder, RecognitionSettings, SpeechRecognizer, UnsupportedRecognizer
from .events import AudioChunk, RecognitionError, RecognitionResult, RecordingStopped


class CaptureState(Enum):
    IDLE = "idle"
    RECORDING = "recording"
    PROCESSING = "processing"


class CaptureController:
    """Coordinates recorder, recognizer, live alignment and the pipeline.

    Args:
        context: Passage and assignment scope for the attempt
        recorder: Microphone recorder
        pipeline: Feedback pipeline run once the recording is assembled
        recognizer: Live recognizer; omit on runtimes without one
        view: Render state to update (a fresh one by default)
        config: Supplies the recognition language
    """

    def __init__(
        self,
        context: ReadingContext,
        recorder: AudioRecorder,
        pipeline: FeedbackPipeline,
        recognizer: Optional[SpeechRecognizer] = None,
        view: Optional[FeedbackView] = None,
        config: Optional[PipelineConfig] = None,
    ):
        self.context = context
        self.recorder = recorder
        self.recognizer = recognizer or UnsupportedRecognizer()
        self.pipeline = pipeline
        self.view = view or FeedbackView()
        self.config = config or PipelineConfig()
        self.renderer = PassageRenderer()
        self.state = CaptureState.IDLE
        self.session: Optional[CaptureSession] = None
        self.last_outcome: Optional[FeedbackOutcome] = None
        self.load(context)

    @property
    def units(self) -> List[PassageWordUnit]:
        return self.renderer.units

    def load(self, context: ReadingContext) -> None:
        """Show a new passage as plain text. Not allowed mid-attempt."""
        if self.state is not CaptureState.IDLE:
            raise CaptureStateError(f"cannot load a passage while {self.state.value}")
        self.context = context
        self.renderer = PassageRenderer()
        self.renderer.reset(context.passage_text)
        self.view.passage_html = self.renderer.to_html()

    def start(self) -> bool:
        """Begin an attempt. Returns False when there is no passage to read.

        Raises:
            CaptureStateError: feedback for the previous attempt is still running
            MicrophoneUnavailableError: microphone access failed; back to IDLE
        """
        if self.state is CaptureState.PROCESSING:
            raise CaptureStateError("cannot start while the previous attempt is processing")
        self._halt_producers()

        passage_text = self.context.passage_text
        if not self.context.has_passage:
            self.view.status = NO_PASSAGE
            return False

        self.renderer.reset(passage_text)
        self.renderer.tokenize(passage_text)
        self.view.passage_html = self.renderer.to_html()
        self.view.clear_results()

        session = CaptureSession()
        self._wire(session)
        self.session = session

        try:
            self.recorder.open()
        except MicrophoneUnavailableError:
            self.session = None
            session.events.clear()
            self.view.status = MICROPHONE_UNAVAILABLE
            raise

        session.recording = True
        self.recorder.start(session.events)
        self.state = CaptureState.RECORDING
        self.view.status = RECORDING
        self.view.recording = True

        if self.recognizer.supported:
            self._start_recognition(session)
        return True

    def stop(self) -> None:
        """Stop both producers; feedback runs once the recorder reports back.

        Raises:
            CaptureStateError: not recording
        """
        if self.state is not CaptureState.RECORDING or self.session is None:
            raise CaptureStateError(f"cannot stop while {self.state.value}")
        session = self.session
        self._enter_processing(session)
        self.recorder.stop()

    # --- producers -----------------------------------------------------

    def _start_recognition(self, session: CaptureSession) -> None:
        settings = RecognitionSettings(lang=self.config.recognition_lang)
        session.recognition_active = True
        try:
            self.recognizer.start(settings, session.events)
        except Exception as e:
            # Live highlighting is optional; recording carries on without it
            session.recognition_active = False
            warnings.warn(f"Speech recognition could not start: {e}")

    def _stop_recognition(self, session: CaptureSession) -> None:
        if not session.recognition_active:
            return
        session.recognition_active = False
        try:
            self.recognizer.stop()
        except Exception as e:
            warnings.warn(f"Speech recognition stop failed: {e}")

    def _halt_producers(self) -> None:
        """Force any in-flight attempt to stop and forget it."""
        session = self.session
        if session is None:
            return
        self.session = None
        self._stop_recognition(session)
        session.events.clear()
        if self.recorder.active:
            try:
                self.recorder.stop()
            except Exception as e:
                warnings.warn(f"Recorder stop failed: {e}")
        self.state = CaptureState.IDLE
        self.view.recording = False

    def _enter_processing(self, session: CaptureSession) -> None:
        self._stop_recognition(session)
        self.state = CaptureState.PROCESSING
        self.view.status = PROCESSING
        self.view.recording = False

    # --- events --------------------------------------------------------

    def _wire(self, session: CaptureSession) -> None:
        events = session.events
        events.subscribe(RecognitionResult, lambda e: self._on_recognition_result(session, e))
        events.subscribe(RecognitionError, lambda e: self._on_recognition_error(session, e))
        events.subscribe(AudioChunk, lambda e: self._on_audio_chunk(session, e))
        events.subscribe(RecordingStopped, lambda e: self._on_recording_stopped(session, e))

    def _on_recognition_result(self, session: CaptureSession, event: RecognitionResult) -> None:
        # Results racing with stop() land here after recognition went inactive
        if session is not self.session or not session.recognition_active:
            return
        changed = False
        for segment in list(event.results)[event.result_index:]:
            if segment.is_final and session.append_final_result(segment.transcript):
                changed = True
        if changed:
            mark_words_as_read(session.transcript, self.renderer.units)
            self.view.passage_html = self.renderer.to_html()

    def _on_recognition_error(self, session: CaptureSession, event: RecognitionError) -> None:
        if session is self.session:
            warnings.warn(f"Speech recognition error: {event.error}")

    def _on_audio_chunk(self, session: CaptureSession, event: AudioChunk) -> None:
        if session is self.session and session.recording and event.data:
            session.audio_chunks.append(event.data)

    def _on_recording_stopped(self, session: CaptureSession, event: RecordingStopped) -> None:
        if session is not self.session:
            return
        if self.state is CaptureState.RECORDING:
            # Recorder ended on its own (device lost); treat as a stop
            self._enter_processing(session)
        session.recording = False
        artifact = session.assemble_artifact()
        self.session = None
        try:
            self.last_outcome = self.pipeline.run(artifact, self.context, self.view)
        except Exception:
            self.view.status = FEEDBACK_FAILED
            raise
        finally:
            self.state = CaptureState.IDLE
