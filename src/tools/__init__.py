"""Tools package for the API docs MCP server."""

from src.tools.endpoint_index import (
    EndpointIndex,
    EndpointRecord,
    ExampleRecord,
    HttpMethod,
    ParameterRecord,
    ResponseRecord,
)
from src.tools.document_loader import DocumentLoadError, fetch_document
from src.tools.gemini_client import GeminiAPIError, GeminiClient, GenerationResult

__all__ = [
    "EndpointIndex",
    "EndpointRecord",
    "ExampleRecord",
    "HttpMethod",
    "ParameterRecord",
    "ResponseRecord",
    "DocumentLoadError",
    "fetch_document",
    "GeminiAPIError",
    "GeminiClient",
    "GenerationResult",
]
