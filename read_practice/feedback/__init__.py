"""Feedback pipeline run after a recording ends."""
from .client import ReadingServiceClient
from .pipeline import FeedbackOutcome, FeedbackPipeline
from .view import FeedbackView

__all__ = ["ReadingServiceClient", "FeedbackOutcome", "FeedbackPipeline", "FeedbackView"]
