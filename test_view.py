"""Rendering of evaluation and coaching results."""
from read_practice.feedback.view import (
    NO_ENCOURAGEMENT,
    NO_QUESTIONS,
    NO_TIPS,
    FeedbackView,
    format_accuracy,
    render_coaching,
    render_word_feedback,
)
from read_practice.models.results import CoachingResult, EvaluationResult
from read_practice.text import escape_html


def test_accuracy_formatting():
    assert format_accuracy(80.0) == "Accuracy: 80%"
    assert format_accuracy(92.5) == "Accuracy: 92.5%"
    assert format_accuracy(0) == "Accuracy: 0%"


def test_word_feedback_is_escaped():
    view = FeedbackView()
    evaluation = EvaluationResult.model_validate(
        {"accuracy": 50, "words": [{"word": "<b>", "status": 'x" onclick="y'}, {"word": "ok", "status": "correct"}]}
    )
    render_word_feedback(view, evaluation)
    assert view.word_feedback_html == (
        '<span class="x&quot; onclick=&quot;y">&lt;b&gt;</span> <span class="correct">ok</span>'
    )


def test_empty_tips_render_placeholder_not_blank():
    view = FeedbackView()
    render_coaching(view, CoachingResult.model_validate({"encouragement": "Nice!", "tips": []}))
    assert view.tips_html == NO_TIPS
    assert view.questions_html == NO_QUESTIONS
    assert view.encouragement == "Nice!"


def test_absent_encouragement_renders_placeholder():
    view = FeedbackView(encouragement="Earlier")
    render_coaching(view, CoachingResult.model_validate({"encouragement": "  "}))
    assert view.encouragement == NO_ENCOURAGEMENT
    assert not view.has_encouragement


def test_clear_results_drops_previous_attempt():
    view = FeedbackView(status="Done!", passage_html="p")
    render_word_feedback(view, EvaluationResult(accuracy=100))
    render_coaching(view, CoachingResult(encouragement="Well done", tips=[], questions=[]))
    view.transcript = "the cat"
    view.feedback_playback_visible = True
    view.passage_playback_visible = True

    view.clear_results()
    assert (view.transcript, view.accuracy, view.word_feedback_html) == ("", "", "")
    assert (view.encouragement, view.tips_html, view.questions_html) == ("", "", "")
    assert not view.feedback_playback_visible and not view.passage_playback_visible
    assert view.status == "Done!"
    assert view.passage_html == "p"


def test_questions_are_numbered_and_escaped():
    view = FeedbackView()
    render_coaching(view, CoachingResult(questions=["Why?", "<script>"]))
    assert view.questions_html == "<p>1. Why?</p><p>2. &lt;script&gt;</p>"


def test_escape_html_ignores_non_strings():
    assert escape_html(None) == ""
    assert escape_html(3) == ""
    assert escape_html("a & b") == "a &amp; b"
