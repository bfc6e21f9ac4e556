"""Tests for the Gemini REST client."""

from unittest.mock import MagicMock, patch

import pytest
import requests

from src.tools.gemini_client import (
    DEFAULT_MODEL,
    GeminiAPIError,
    GeminiClient,
    extract_text,
)


def _response(payload=None, status_code=200, reason="OK", text=""):
    response = MagicMock()
    response.status_code = status_code
    response.reason = reason
    response.ok = 200 <= status_code < 300
    response.text = text
    response.json.return_value = payload
    return response


class TestGeminiClient:
    """Tests for GeminiClient.generate."""

    def test_default_model(self):
        """Test the client falls back to the default model."""
        client = GeminiClient()
        assert client.default_model == DEFAULT_MODEL

    @patch("src.tools.gemini_client.requests.post")
    def test_generate_returns_text(self, mock_post, gemini_success_payload):
        """Test a successful call returns the first candidate's text."""
        mock_post.return_value = _response(gemini_success_payload)

        result = GeminiClient().generate("secret-key", "Hello")

        assert result.text == "Hello from Gemini"
        assert result.model == DEFAULT_MODEL
        assert result.status_code == 200
        assert result.reason == "OK"

    @patch("src.tools.gemini_client.requests.post")
    def test_generate_request_shape(self, mock_post, gemini_success_payload):
        """Test the URL, key parameter and payload sent to the service."""
        mock_post.return_value = _response(gemini_success_payload)

        client = GeminiClient(base_url="https://gemini.test/v1beta/", timeout=5)
        client.generate("secret-key", "Hi there", model="gemini-pro")

        args, kwargs = mock_post.call_args
        assert args[0] == "https://gemini.test/v1beta/models/gemini-pro:generateContent"
        assert kwargs["params"] == {"key": "secret-key"}
        assert kwargs["json"] == {"contents": [{"parts": [{"text": "Hi there"}]}]}
        assert kwargs["timeout"] == 5

    @patch("src.tools.gemini_client.requests.post")
    def test_error_status_raises(self, mock_post):
        """Test a non-success status raises GeminiAPIError with the body."""
        mock_post.return_value = _response(status_code=400, reason="Bad Request", text='{"error": "API key not valid"}')

        with pytest.raises(GeminiAPIError, match="API Error 400") as exc_info:
            GeminiClient().generate("bad-key", "Hello")
        assert exc_info.value.status_code == 400
        assert "API key not valid" in str(exc_info.value)

    @patch("src.tools.gemini_client.requests.post")
    def test_network_error_redacts_key(self, mock_post):
        """Test network errors are wrapped and do not leak the key."""
        mock_post.side_effect = requests.exceptions.ConnectionError(
            "Max retries exceeded with url: /models/x:generateContent?key=secret-key"
        )

        with pytest.raises(GeminiAPIError) as exc_info:
            GeminiClient().generate("secret-key", "Hello")
        assert "secret-key" not in str(exc_info.value)
        assert "Network error" in str(exc_info.value)
        assert exc_info.value.status_code is None


class TestExtractText:
    """Tests for extract_text."""

    def test_missing_candidates(self):
        """Test the placeholder when no candidates are returned."""
        assert extract_text({}) == "No response generated"

    def test_empty_parts(self):
        """Test the placeholder when a candidate has no parts."""
        assert extract_text({"candidates": [{"content": {"parts": []}}]}) == "No response generated"

    def test_custom_placeholder(self):
        """Test the caller-supplied placeholder for an empty reply."""
        assert extract_text({}, "No analysis generated") == "No analysis generated"
        assert extract_text({"candidates": [{"content": {"parts": [{"text": ""}]}}]}, "No code generated") == "No code generated"

    @patch("src.tools.gemini_client.requests.post")
    def test_generate_uses_placeholder(self, mock_post):
        """Test generate returns the given placeholder when the reply has no text."""
        mock_post.return_value = _response({"candidates": []})

        result = GeminiClient().generate("secret-key", "Hello", empty_text="No code generated")
        assert result.text == "No code generated"
