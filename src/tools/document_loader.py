"""
Fetching and decoding of OpenAPI/Swagger documents.

Documents can come from an http(s) URL, a file:// URL or a local path.
JSON is the default encoding; YAML is used for .yaml/.yml sources and for
responses served with a YAML content type.
"""
import json
import logging
from pathlib import Path
from typing import Any
from urllib.parse import unquote, urlparse

import requests
import yaml

logger = logging.getLogger(__name__)

YAML_SUFFIXES = (".yaml", ".yml")


class DocumentLoadError(Exception):
    """Raised when a document cannot be fetched or decoded."""


def fetch_document(source: str, timeout: float = 30) -> Any:
    """
    Fetch and decode an API description document.

    Args:
        source: http(s) URL, file:// URL or filesystem path
        timeout: Request timeout in seconds for remote sources

    Returns:
        The decoded document

    Raises:
        DocumentLoadError: If the document cannot be fetched or decoded
    """
    if not source or not source.strip():
        raise DocumentLoadError("No document source given")

    parsed = urlparse(source)
    if parsed.scheme in ("http", "https"):
        text, is_yaml = _fetch_remote(source, timeout)
    elif parsed.scheme == "file":
        text, is_yaml = _read_local(Path(unquote(parsed.path)))
    else:
        text, is_yaml = _read_local(Path(source).expanduser())

    return decode_document(text, is_yaml=is_yaml)


def _fetch_remote(url: str, timeout: float) -> tuple[str, bool]:
    logger.info(f"Fetching API document from: {url}")
    try:
        response = requests.get(url, timeout=timeout)
    except requests.exceptions.RequestException as e:
        logger.error(f"Request for {url} failed: {e}")
        raise DocumentLoadError(str(e)) from e

    if not response.ok:
        logger.error(f"HTTP error from {url}: {response.status_code} {response.reason}")
        raise DocumentLoadError(f"HTTP {response.status_code}: {response.reason}")

    content_type = response.headers.get("Content-Type", "").lower()
    path = urlparse(url).path.lower()
    is_yaml = "yaml" in content_type or path.endswith(YAML_SUFFIXES)
    return response.text, is_yaml


def _read_local(path: Path) -> tuple[str, bool]:
    logger.info(f"Reading API document from: {path}")
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        logger.error(f"Failed to read {path}: {e}")
        raise DocumentLoadError(f"Cannot read {path}: {e.strerror or e}") from e
    return text, path.suffix.lower() in YAML_SUFFIXES


def decode_document(text: str, is_yaml: bool = False) -> Any:
    """
    Decode document text as JSON, or as YAML when is_yaml is set.

    YAML output is normalized to JSON-compatible values, so timestamps
    and other YAML-only scalars become strings, mapping keys included.
    """
    if not is_yaml:
        try:
            return json.loads(text)
        except (ValueError, RecursionError) as e:
            raise DocumentLoadError(f"Invalid JSON document: {e}") from e

    try:
        data = yaml.safe_load(text)
        return json.loads(json.dumps(_string_keys(data), default=str))
    except yaml.YAMLError as e:
        raise DocumentLoadError(f"Invalid YAML document: {e}") from e
    except (TypeError, ValueError, RecursionError) as e:
        raise DocumentLoadError(f"Unsupported YAML document: {e}") from e


def _string_keys(value: Any) -> Any:
    """Recursively convert mapping keys to strings."""
    if isinstance(value, dict):
        return {_key_to_str(k): _string_keys(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_string_keys(item) for item in value]
    return value


def _key_to_str(key: Any) -> str:
    # YAML booleans/null keys keep their JSON spelling
    if isinstance(key, (bool, type(None))):
        return json.dumps(key)
    return str(key)
