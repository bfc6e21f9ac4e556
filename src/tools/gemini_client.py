"""
Client for the Gemini generateContent REST API.

One POST per call, no retries. The caller supplies the API key on every
request; it is sent as the ``key`` query parameter and never logged.
"""
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_MODEL = "gemini-2.0-flash-exp"
NO_RESPONSE_TEXT = "No response generated"


class GeminiAPIError(Exception):
    """Raised when the generation service returns an error or cannot be reached."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


@dataclass(frozen=True)
class GenerationResult:
    text: str
    model: str
    status_code: int
    reason: str


class GeminiClient:
    """Thin wrapper around the generateContent endpoint."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        default_model: str = DEFAULT_MODEL,
        timeout: float = 60,
    ):
        self.base_url = base_url.rstrip("/")
        self.default_model = default_model
        self.timeout = timeout

    def generate(
        self,
        api_key: str,
        prompt: str,
        model: Optional[str] = None,
        empty_text: str = NO_RESPONSE_TEXT,
    ) -> GenerationResult:
        """
        Send a single prompt and return the generated text.

        Args:
            api_key: Gemini API key
            prompt: Prompt text
            model: Model name, defaults to the client's default model
            empty_text: Text returned when the reply has no text part

        Returns:
            GenerationResult with the first candidate's text

        Raises:
            GeminiAPIError: On a non-success status or a network error
        """
        model = model or self.default_model
        url = f"{self.base_url}/models/{model}:generateContent"
        payload = {"contents": [{"parts": [{"text": prompt}]}]}

        logger.info(f"Calling Gemini model {model} ({len(prompt)} prompt chars)")

        try:
            response = requests.post(
                url,
                params={"key": api_key},
                json=payload,
                headers={"Content-Type": "application/json"},
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as e:
            # requests puts the full URL, key included, in some messages
            message = str(e).replace(api_key, "***") if api_key else str(e)
            logger.error(f"Gemini request to model {model} failed: {message}")
            raise GeminiAPIError(f"Network error: {message}") from e

        if not response.ok:
            logger.error(f"Gemini API returned {response.status_code} for model {model}")
            raise GeminiAPIError(
                f"API Error {response.status_code}: {response.text}",
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except ValueError as e:
            raise GeminiAPIError(f"Invalid JSON in Gemini response: {e}", response.status_code) from e

        return GenerationResult(
            text=extract_text(data, empty_text),
            model=model,
            status_code=response.status_code,
            reason=response.reason or "",
        )


def extract_text(data: Dict[str, Any], empty_text: str = NO_RESPONSE_TEXT) -> str:
    """Get the first candidate's first text part, or a placeholder."""
    try:
        text = data["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        return empty_text
    return text or empty_text
