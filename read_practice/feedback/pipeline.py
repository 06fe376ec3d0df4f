"""Post-recording feedback pipeline: transcribe → evaluate → persist → coach."""
from __future__ import annotations

import warnings
from dataclasses import dataclass, field
from typing import List, Optional

from read_practice.config import PipelineConfig
from read_practice.errors import ServiceError
from read_practice.models.results import CoachingResult, EvaluationResult
from read_practice.models.session import AudioArtifact, ReadingContext
from .client import ReadingServiceClient
from .view import (
    COACH_FAILED,
    DONE,
    EVALUATE_FAILED,
    TRANSCRIBE_FAILED,
    FeedbackView,
    render_coaching,
    render_word_feedback,
)


@dataclass
class FeedbackOutcome:
    """What one pipeline run produced; ``None`` marks a stage that did not finish."""
    transcript: Optional[str] = None
    evaluation: Optional[EvaluationResult] = None
    persisted: bool = False
    grade_level: Optional[float] = None
    coaching: Optional[CoachingResult] = None
    failed_stages: List[str] = field(default_factory=list)

    @property
    def completed(self) -> bool:
        return self.coaching is not None and not self.failed_stages


class FeedbackPipeline:
    """Strictly sequential chain of backend calls after a recording ends.

    Each stage is issued only after the previous stage's response arrived.
    Failures are contained per stage:
    - transcribe: status + warning; continue with "" unless configured to abort
    - evaluate: status + warning; stops the run (later stages need its output)
    - persist / grade lookup: warning only, never affects the run
    - coach: status + warning; placeholders are rendered
    """

    def __init__(self, client: ReadingServiceClient, config: Optional[PipelineConfig] = None):
        self.client = client
        self.config = config or PipelineConfig()

    def run(self, artifact: AudioArtifact, context: ReadingContext, view: FeedbackView) -> FeedbackOutcome:
        outcome = FeedbackOutcome()
        target = context.passage_text or ""
        view.clear_results()

        # Step 1: Transcribe
        try:
            transcript = self.client.transcribe(artifact)
        except ServiceError as e:
            warnings.warn(f"Transcription failed: {e}")
            outcome.failed_stages.append("transcribe")
            view.status = TRANSCRIBE_FAILED
            if self.config.abort_on_transcribe_failure:
                return outcome
            transcript = ""
        outcome.transcript = transcript
        view.transcript = transcript

        # Step 2: Evaluate
        try:
            evaluation = self.client.evaluate(target, transcript)
        except ServiceError as e:
            warnings.warn(f"Evaluation failed: {e}")
            outcome.failed_stages.append("evaluate")
            view.status = EVALUATE_FAILED
            return outcome
        outcome.evaluation = evaluation
        render_word_feedback(view, evaluation)
        misreads = evaluation.misread_words()

        # Step 3: Persist (best effort)
        outcome.persisted = self._persist(context, evaluation, misreads)

        # Step 4: Coach
        outcome.grade_level = self._grade_level(context)
        try:
            coaching = self.client.coach(target, transcript, misreads, outcome.grade_level)
        except ServiceError as e:
            warnings.warn(f"Coaching failed: {e}")
            outcome.failed_stages.append("coach")
            render_coaching(view, CoachingResult())
            view.status = COACH_FAILED
            return outcome
        outcome.coaching = coaching
        render_coaching(view, coaching)

        if not outcome.failed_stages:
            view.status = DONE
        view.passage_playback_visible = True
        view.feedback_playback_visible = True
        return outcome

    def _persist(self, context: ReadingContext, evaluation: EvaluationResult, misreads: List[str]) -> bool:
        if context.assignment_id is None:
            return False
        try:
            self.client.save_submission(context.assignment_id, evaluation.accuracy, misreads)
        except ServiceError as e:
            warnings.warn(f"Error saving submission data: {e}")
            return False
        return True

    def _grade_level(self, context: ReadingContext) -> Optional[float]:
        if context.assignment_id is None:
            return None
        try:
            return self.client.get_grade_level(context.assignment_id)
        except ServiceError as e:
            warnings.warn(f"Error loading assignment for grade level: {e}")
            return None
