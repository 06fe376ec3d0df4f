"""HTTP client for the transcription, scoring, coaching and TTS services."""
from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

import requests
from pydantic import ValidationError
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from read_practice.config import PipelineConfig
from read_practice.errors import ServiceError
from read_practice.models.results import CoachingResult, EvaluationResult
from read_practice.models.session import AudioArtifact

TRANSCRIBE_PATH = "/api/transcribe"
EVALUATE_PATH = "/api/evaluate"
COACH_PATH = "/api/coach"
SUBMISSIONS_PATH = "/api/submissions"
ASSIGNMENT_PATH = "/api/assignments/{assignment_id}"
TTS_PATH = "/api/tts"


def _build_session(config: PipelineConfig) -> requests.Session:
    session = requests.Session()
    if config.max_retries > 0:
        retry = Retry(
            total=config.max_retries,
            backoff_factor=config.retry_backoff_factor,
            status_forcelist=(502, 503, 504),
            allowed_methods=None,  # retry POSTs too
        )
        adapter = HTTPAdapter(max_retries=retry)
        session.mount("http://", adapter)
        session.mount("https://", adapter)
    return session


class ReadingServiceClient:
    """Thin wrapper over the backend JSON API.

    Every method raises ``ServiceError`` (carrying the stage name) on a
    transport failure, a non-success status or an undecodable body, so
    callers decide per stage whether the failure is fatal.
    """

    def __init__(self, config: Optional[PipelineConfig] = None, session: Optional[requests.Session] = None):
        self.config = config or PipelineConfig()
        self.base_url = self.config.api_base_url.rstrip("/")
        self.session = session or _build_session(self.config)

    def _url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    def _request(self, stage: str, method: str, path: str, **kwargs: Any) -> requests.Response:
        try:
            r = self.session.request(method, self._url(path), timeout=self.config.request_timeout, **kwargs)
        except requests.exceptions.RequestException as e:
            raise ServiceError(stage, f"request failed: {e}") from e
        if not r.ok:
            raise ServiceError(stage, f"service returned {r.status_code}", status_code=r.status_code)
        return r

    def _json(self, stage: str, r: requests.Response) -> Dict[str, Any]:
        try:
            data = r.json()
        except ValueError as e:
            raise ServiceError(stage, "response was not JSON", status_code=r.status_code) from e
        if not isinstance(data, dict):
            raise ServiceError(stage, "response was not a JSON object", status_code=r.status_code)
        return data

    def transcribe(self, artifact: AudioArtifact) -> str:
        files = {"audio": (artifact.filename, artifact.data, artifact.mime_type)}
        r = self._request("transcribe", "POST", TRANSCRIBE_PATH, files=files)
        text = self._json("transcribe", r).get("text")
        return text if isinstance(text, str) else ""

    def evaluate(self, target: str, transcript: str) -> EvaluationResult:
        r = self._request("evaluate", "POST", EVALUATE_PATH, json={"target": target, "transcript": transcript})
        try:
            return EvaluationResult.model_validate(self._json("evaluate", r))
        except ValidationError as e:
            raise ServiceError("evaluate", f"malformed evaluation: {e.error_count()} error(s)") from e

    def coach(
        self,
        target: str,
        transcript: str,
        misreads: List[str],
        grade_level: Optional[float] = None,
    ) -> CoachingResult:
        payload = {
            "target": target,
            "transcript": transcript,
            "misreads": misreads,
            "grade_level": grade_level,
        }
        r = self._request("coach", "POST", COACH_PATH, json=payload)
        # Field validators already drop malformed optional fields
        return CoachingResult.model_validate(self._json("coach", r))

    def save_submission(self, assignment_id: int, accuracy: Union[int, float], words_missed: List[str]) -> None:
        payload = {
            "assignment_id": assignment_id,
            "accuracy": accuracy,
            "words_missed": words_missed,
            "submitted": False,
        }
        self._request("persist", "POST", SUBMISSIONS_PATH, json=payload)

    def get_grade_level(self, assignment_id: int) -> Optional[float]:
        path = ASSIGNMENT_PATH.format(assignment_id=assignment_id)
        r = self._request("assignment", "GET", path)
        grade = self._json("assignment", r).get("grade_level")
        if isinstance(grade, bool) or not isinstance(grade, (int, float)):
            return None
        return grade

    def synthesize_speech(self, text: str) -> bytes:
        r = self._request("tts", "POST", TTS_PATH, json={"text": text})
        return r.content
