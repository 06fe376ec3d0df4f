"""User-facing render state of an attempt, and the renderers that fill it."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from read_practice.models.results import CoachingResult, EvaluationResult
from read_practice.text import escape_html

NO_PASSAGE = "No passage to read."
RECORDING = "Recording…"
PROCESSING = "Processing…"
DONE = "Done!"
MICROPHONE_UNAVAILABLE = "Microphone unavailable."
TRANSCRIBE_FAILED = "Transcription failed."
EVALUATE_FAILED = "Evaluation failed."
COACH_FAILED = "Coaching unavailable."
FEEDBACK_FAILED = "Feedback failed."

NO_ENCOURAGEMENT = "No feedback available."
NO_TIPS = "No tips for this reading."
NO_QUESTIONS = "No questions available."


@dataclass
class FeedbackView:
    """Everything the page shows for the current attempt.

    ``*_html`` fields hold escaped markup; the rest are plain text.
    """
    status: str = ""
    passage_html: str = ""
    transcript: str = ""
    accuracy: str = ""
    word_feedback_html: str = ""
    encouragement: str = ""
    tips_html: str = ""
    questions_html: str = ""
    recording: bool = False
    passage_playback_visible: bool = False
    feedback_playback_visible: bool = False

    @property
    def has_encouragement(self) -> bool:
        return bool(self.encouragement.strip()) and self.encouragement != NO_ENCOURAGEMENT

    def clear_results(self) -> None:
        """Drop everything the previous attempt rendered."""
        self.transcript = ""
        self.accuracy = ""
        self.word_feedback_html = ""
        self.encouragement = ""
        self.tips_html = ""
        self.questions_html = ""
        self.passage_playback_visible = False
        self.feedback_playback_visible = False


def format_accuracy(value: Union[int, float]) -> str:
    number = int(value) if float(value).is_integer() else value
    return f"Accuracy: {number}%"


def render_word_feedback(view: FeedbackView, evaluation: EvaluationResult) -> None:
    view.accuracy = format_accuracy(evaluation.accuracy)
    view.word_feedback_html = " ".join(
        f'<span class="{escape_html(w.status)}">{escape_html(w.word)}</span>'
        for w in evaluation.words
    )


def render_coaching(view: FeedbackView, coaching: CoachingResult) -> None:
    """Fill encouragement, tips and questions; each field independently.

    An absent field renders its placeholder rather than an empty block.
    """
    encouragement = (coaching.encouragement or "").strip()
    view.encouragement = coaching.encouragement if encouragement else NO_ENCOURAGEMENT

    if coaching.tips:
        view.tips_html = "".join(
            f"<p><strong>{escape_html(t.word)}:</strong> {escape_html(t.tip)}</p>"
            for t in coaching.tips
        )
    else:
        view.tips_html = NO_TIPS

    if coaching.questions:
        view.questions_html = "".join(
            f"<p>{i}. {escape_html(q)}</p>" for i, q in enumerate(coaching.questions, start=1)
        )
    else:
        view.questions_html = NO_QUESTIONS
