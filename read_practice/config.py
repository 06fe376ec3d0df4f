"""Runtime configuration for the reading-practice controller."""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

# Base URL of the backend serving /api/transcribe, /api/evaluate, ...
API_BASE_URL = os.getenv("READ_PRACTICE_API_URL", "http://localhost:5000")

# Language tag handed to the live recognizer
RECOGNITION_LANG = os.getenv("READ_PRACTICE_RECOGNITION_LANG", "en-US")


def _env_flag(name: str, default: bool) -> bool:
    v = (os.getenv(name, "1" if default else "0") or "").strip().lower()
    return v in {"1", "true", "yes", "on"}


def _env_timeout(name: str) -> Optional[float]:
    v = (os.getenv(name, "") or "").strip()
    if not v:
        return None
    try:
        seconds = float(v)
    except ValueError:
        return None
    return seconds if seconds > 0 else None


def _env_int(name: str, default: int) -> int:
    try:
        return max(0, int(os.getenv(name, str(default)) or default))
    except ValueError:
        return default


@dataclass(frozen=True)
class PipelineConfig:
    """
    Tunables for the feedback pipeline and its HTTP client.

    Notes:
    - request_timeout=None waits indefinitely, like the browser client did
    - max_retries=0 sends each request once; retries back off exponentially
    - abort_on_transcribe_failure=False carries on with an empty transcript
    """

    api_base_url: str = API_BASE_URL
    request_timeout: Optional[float] = None
    max_retries: int = 0
    retry_backoff_factor: float = 0.5
    abort_on_transcribe_failure: bool = False
    recognition_lang: str = RECOGNITION_LANG

    @classmethod
    def from_env(cls) -> "PipelineConfig":
        return cls(
            api_base_url=os.getenv("READ_PRACTICE_API_URL", API_BASE_URL),
            request_timeout=_env_timeout("READ_PRACTICE_REQUEST_TIMEOUT"),
            max_retries=_env_int("READ_PRACTICE_MAX_RETRIES", 0),
            abort_on_transcribe_failure=_env_flag("READ_PRACTICE_ABORT_ON_TRANSCRIBE_FAILURE", False),
            recognition_lang=os.getenv("READ_PRACTICE_RECOGNITION_LANG", RECOGNITION_LANG),
        )
