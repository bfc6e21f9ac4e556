"""
Environment-based settings for the API docs MCP server.

Values are read from the process environment after loading a .env file
if one is present.
"""
import os
import logging
from typing import Dict

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from src.tools.gemini_client import DEFAULT_BASE_URL, DEFAULT_MODEL

logger = logging.getLogger(__name__)

TRANSPORTS = ("stdio", "sse", "streamable-http")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseModel):
    transport: str = "stdio"
    log_level: str = "INFO"
    gemini_base_url: str = DEFAULT_BASE_URL
    gemini_default_model: str = DEFAULT_MODEL
    gemini_timeout: float = 60
    document_fetch_timeout: float = 30
    preload: Dict[str, str] = Field(default_factory=dict)


def parse_preload(value: str) -> Dict[str, str]:
    """
    Parse API_DOCS_PRELOAD into a name -> source mapping.

    Format is comma-separated name=source pairs, e.g.
    "petstore=https://petstore3.swagger.io/api/v3/openapi.json,local=./api.yaml".
    Malformed entries are skipped with a warning.
    """
    preload: Dict[str, str] = {}
    for entry in value.split(","):
        entry = entry.strip()
        if not entry:
            continue
        name, sep, source = entry.partition("=")
        if not sep or not name.strip() or not source.strip():
            logger.warning(f"Ignoring malformed API_DOCS_PRELOAD entry: {entry}")
            continue
        preload[name.strip()] = source.strip()
    return preload


def get_settings() -> Settings:
    """
    Build settings from environment variables.

    Returns:
        Settings instance

    Raises:
        ValueError: If MCP_TRANSPORT or LOG_LEVEL has an unsupported value
    """
    load_dotenv()

    transport = os.getenv("MCP_TRANSPORT", "stdio").lower()
    if transport not in TRANSPORTS:
        raise ValueError(f"Invalid MCP_TRANSPORT value: {transport}")

    log_level = os.getenv("LOG_LEVEL", "INFO").upper()
    if log_level not in LOG_LEVELS:
        raise ValueError(f"Invalid LOG_LEVEL value: {log_level}")

    return Settings(
        transport=transport,
        log_level=log_level,
        gemini_base_url=os.getenv("GEMINI_BASE_URL", DEFAULT_BASE_URL),
        gemini_default_model=os.getenv("GEMINI_DEFAULT_MODEL", DEFAULT_MODEL),
        gemini_timeout=float(os.getenv("GEMINI_TIMEOUT_SECONDS", "60")),
        document_fetch_timeout=float(os.getenv("DOCUMENT_FETCH_TIMEOUT_SECONDS", "30")),
        preload=parse_preload(os.getenv("API_DOCS_PRELOAD", "")),
    )
