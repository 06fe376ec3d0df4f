"""Response models for the evaluation and coaching services."""
from __future__ import annotations

from typing import Any, List, Optional, Union

from pydantic import BaseModel, field_validator

MISREAD_STATUS = "misread"
CORRECT_STATUS = "correct"


def _text_or_empty(value: Any) -> str:
    return value if isinstance(value, str) else ""


class WordStatus(BaseModel):
    word: str = ""
    status: str = ""

    @field_validator("word", "status", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> str:
        return _text_or_empty(value)


class EvaluationResult(BaseModel):
    """Scorer output: overall accuracy plus a per-word status list."""
    # Integers from the scorer pass through unchanged (80 stays 80)
    accuracy: Union[int, float] = 0
    words: List[WordStatus] = []

    @field_validator("accuracy", mode="before")
    @classmethod
    def _accuracy_or_zero(cls, value: Any) -> Any:
        # Missing or null accuracy renders as 0%
        return 0 if value is None else value

    @field_validator("words", mode="before")
    @classmethod
    def _words_or_empty(cls, value: Any) -> Any:
        if not isinstance(value, list):
            return []
        return [w for w in value if isinstance(w, dict)]

    def misread_words(self) -> List[str]:
        """Words the scorer flagged as misread, in passage order."""
        return [w.word for w in self.words if w.status == MISREAD_STATUS]


class Tip(BaseModel):
    word: str = ""
    tip: str = ""

    @field_validator("word", "tip", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> str:
        return _text_or_empty(value)


class CoachingResult(BaseModel):
    """Coach output. Every field may be absent independently."""
    encouragement: Optional[str] = None
    tips: List[Tip] = []
    questions: List[str] = []

    @field_validator("encouragement", mode="before")
    @classmethod
    def _text_only(cls, value: Any) -> Any:
        return value if isinstance(value, str) else None

    @field_validator("tips", mode="before")
    @classmethod
    def _tip_entries(cls, value: Any) -> Any:
        if not isinstance(value, list):
            return []
        return [t for t in value if isinstance(t, dict)]

    @field_validator("questions", mode="before")
    @classmethod
    def _question_entries(cls, value: Any) -> Any:
        if not isinstance(value, list):
            return []
        return [q for q in value if isinstance(q, str)]
