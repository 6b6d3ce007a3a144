"""Client for the Gemini generateContent endpoint."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Optional

import requests

from app.config import get_settings
from app.exceptions import UpstreamError
from app.infra.logging_config import get_logger

logger = get_logger("gemini")

ROLE_USER = "user"
ROLE_MODEL = "model"

GENERATION_CONFIG = {
    "temperature": 0.9,
    "topK": 1,
    "topP": 1,
    "maxOutputTokens": 2048,
}

SAFETY_CATEGORIES = (
    "HARM_CATEGORY_HARASSMENT",
    "HARM_CATEGORY_HATE_SPEECH",
    "HARM_CATEGORY_SEXUALLY_EXPLICIT",
    "HARM_CATEGORY_DANGEROUS_CONTENT",
)
SAFETY_THRESHOLD = "BLOCK_MEDIUM_AND_ABOVE"


@dataclass
class Turn:
    """One role-tagged entry of the prompt."""

    role: str
    text: str

    def to_content(self) -> dict[str, Any]:
        return {"role": self.role, "parts": [{"text": self.text}]}


@dataclass
class CompletionResult:
    text: str
    tokens_used: int = 0


class GeminiClient:
    """Synchronous text completion; every failure surfaces as UpstreamError."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        api_base: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        settings = get_settings()
        self._api_key = api_key if api_key is not None else settings.gemini_api_key
        self._model = model or settings.gemini_model
        self._api_base = (api_base or settings.gemini_api_base).rstrip("/")
        self._timeout = timeout if timeout is not None else settings.gemini_timeout_seconds
        self._http = session or requests.Session()

    @property
    def url(self) -> str:
        return f"{self._api_base}/models/{self._model}:generateContent"

    def build_payload(self, turns: List[Turn]) -> dict[str, Any]:
        return {
            "contents": [t.to_content() for t in turns],
            "generationConfig": dict(GENERATION_CONFIG),
            "safetySettings": [
                {"category": c, "threshold": SAFETY_THRESHOLD}
                for c in SAFETY_CATEGORIES
            ],
        }

    def generate(self, turns: List[Turn]) -> CompletionResult:
        if not self._api_key:
            raise UpstreamError("GEMINI_API_KEY not configured")

        logger.info("Calling Gemini with %d turns", len(turns))
        try:
            resp = self._http.post(
                self.url,
                params={"key": self._api_key},
                json=self.build_payload(turns),
                headers={"Content-Type": "application/json"},
                timeout=self._timeout,
            )
        except requests.RequestException as e:
            logger.error("Gemini request failed: %s", e)
            raise UpstreamError(f"Gemini request failed: {e}") from e

        if not resp.ok:
            body = resp.text[:500] if resp.text else "no body"
            logger.error("Gemini API error %s: %s", resp.status_code, body)
            raise UpstreamError(f"Gemini API error: {resp.status_code} - {body}")

        try:
            data = resp.json()
        except ValueError as e:
            raise UpstreamError(f"Invalid JSON from Gemini API: {e}") from e

        text = _extract_text(data)
        if text is None:
            logger.error("Invalid Gemini response: %s", data)
            raise UpstreamError("Invalid response from Gemini API")

        usage = data.get("usageMetadata") or {}
        return CompletionResult(
            text=text,
            tokens_used=int(usage.get("totalTokenCount") or 0),
        )


def _extract_text(data: Any) -> Optional[str]:
    """candidates[0].content.parts[0].text, or None if any step is missing."""
    if not isinstance(data, dict):
        return None
    try:
        text = data["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        return None
    if not isinstance(text, str) or not text:
        return None
    return text
