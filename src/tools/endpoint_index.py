"""
Endpoint Index for loaded OpenAPI/Swagger documents.

This module normalizes OpenAPI-shaped documents into flat endpoint records
and keeps them in named collections for keyword search and exact lookup.
"""
import re
import logging
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, JsonValue

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


class HttpMethod(str, Enum):
    """Standard HTTP methods."""
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    PATCH = "PATCH"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"
    TRACE = "TRACE"


class ParameterRecord(BaseModel):
    """A single operation parameter."""
    model_config = ConfigDict(frozen=True)

    name: str = ""
    type: str = "string"
    required: bool = False
    description: str = ""
    # Taken verbatim from the document's "in" field, not validated
    location: Optional[Any] = None


class ResponseRecord(BaseModel):
    """A documented response for one status code."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    status_code: Optional[int] = Field(default=None, alias="statusCode")
    description: str = ""
    schema_: JsonValue = Field(default=None, alias="schema")


class ExampleRecord(BaseModel):
    """A named request example. The response side is never captured."""
    model_config = ConfigDict(frozen=True)

    title: str
    request: JsonValue = None
    response: Dict[str, JsonValue] = Field(default_factory=dict)


class EndpointRecord(BaseModel):
    """One (method, path) operation from a loaded document."""
    model_config = ConfigDict(frozen=True)

    method: str
    path: str
    description: str = ""
    parameters: List[ParameterRecord] = Field(default_factory=list)
    responses: List[ResponseRecord] = Field(default_factory=list)
    examples: List[ExampleRecord] = Field(default_factory=list)


def is_blank(value: Any) -> bool:
    """
    True for null, false, zero and empty strings.

    Empty mappings and lists are not blank: an empty schema is still a schema.
    """
    if value is None or value is False:
        return True
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value == 0
    return value == ""


def parse_status_code(key: Any) -> Optional[int]:
    """
    Parse a response key into an integer status code.

    Only the leading integer is used, so "404" gives 404 and "2XX" gives 2.
    Keys without one (e.g. "default") give None.
    """
    match = _LEADING_INT.match(str(key))
    if not match:
        return None
    return int(match.group(1))


class EndpointIndex:
    """
    In-memory index of API endpoints grouped into named collections.

    Each call to ingest() replaces the collection stored under its name.
    Collections keep their first insertion position, and searches read
    across all of them in that order.
    """

    def __init__(self):
        self._collections: Dict[str, List[EndpointRecord]] = {}

    def ingest(self, document: Any, name: str) -> int:
        """
        Build endpoint records from an OpenAPI/Swagger document.

        Args:
            document: Decoded OpenAPI/Swagger document
            name: Collection name to store the records under

        Returns:
            Number of endpoint records stored for this name
        """
        if not isinstance(name, str) or not name.strip():
            raise ValueError("API name must be a non-empty string")

        paths = document.get("paths") if isinstance(document, dict) else None
        if paths is None:
            logger.warning(f"Document for '{name}' has no 'paths' mapping, indexing 0 endpoints")
            paths = {}
        elif not isinstance(paths, dict):
            logger.warning(f"'paths' for '{name}' is not a mapping, indexing 0 endpoints")
            paths = {}

        logger.info(f"Building index for '{name}' from {len(paths)} paths...")

        endpoints: List[EndpointRecord] = []
        for path, methods in paths.items():
            if not isinstance(methods, dict):
                logger.warning(f"Skipping path {path}: path item is not a mapping")
                continue
            for method, details in methods.items():
                # Lists count as structured values, e.g. path-level "parameters"
                if not isinstance(details, (dict, list)):
                    logger.debug(f"Skipping {method} {path}: details are null or scalar")
                    continue
                endpoints.append(self._parse_endpoint(str(method), str(path), details))

        self._collections[name] = endpoints
        logger.info(f"Indexed {len(endpoints)} endpoints for '{name}'")
        return len(endpoints)

    def _parse_endpoint(self, method: str, path: str, details: Any) -> EndpointRecord:
        method = method.upper()
        if method not in HttpMethod.__members__:
            logger.debug(f"Non-standard method {method} on {path}")

        if not isinstance(details, dict):
            details = {}

        description = details.get("summary") or details.get("description") or ""

        return EndpointRecord(
            method=method,
            path=path,
            description=str(description),
            parameters=self._parse_parameters(details.get("parameters") or []),
            responses=self._parse_responses(details.get("responses") or {}),
            examples=self._parse_examples(details.get("examples") or {}),
        )

    def _parse_parameters(self, params: Any) -> List[ParameterRecord]:
        if not isinstance(params, list):
            logger.warning("Ignoring 'parameters' that is not a list")
            return []

        result = []
        for param in params:
            if not isinstance(param, dict):
                logger.warning(f"Skipping parameter that is not a mapping: {param!r}")
                continue

            schema = param.get("schema")
            schema_type = schema.get("type") if isinstance(schema, dict) else None

            result.append(
                ParameterRecord(
                    name=str(param.get("name") or ""),
                    type=str(schema_type or param.get("type") or "string"),
                    required=bool(param.get("required") or False),
                    description=str(param.get("description") or ""),
                    location=param.get("in"),
                )
            )
        return result

    def _parse_responses(self, responses: Any) -> List[ResponseRecord]:
        if not isinstance(responses, dict):
            logger.warning("Ignoring 'responses' that is not a mapping")
            return []

        result = []
        for code, details in responses.items():
            if not isinstance(details, dict):
                details = {}
            schema = details.get("schema")
            if is_blank(schema):
                schema = details.get("content")
            result.append(
                ResponseRecord(
                    status_code=parse_status_code(code),
                    description=str(details.get("description") or ""),
                    schema=schema,
                )
            )
        return result

    def _parse_examples(self, examples: Any) -> List[ExampleRecord]:
        if not isinstance(examples, dict):
            logger.warning("Ignoring 'examples' that is not a mapping")
            return []

        result = []
        for title, example in examples.items():
            request = example
            if isinstance(example, dict) and not is_blank(example.get("value")):
                request = example["value"]
            result.append(ExampleRecord(title=str(title), request=request, response={}))
        return result

    def get_endpoints(self, name: str) -> List[EndpointRecord]:
        """Get the endpoints stored under a collection name."""
        return list(self._collections.get(name, []))

    def search(self, query: str) -> List[EndpointRecord]:
        """
        Search endpoints by keyword across all collections.

        Matches case-insensitively against path and description. An empty
        query returns every endpoint.

        Args:
            query: Keyword to look for

        Returns:
            Matching endpoints in collection order, then document order
        """
        query_lower = query.lower()
        results = []

        for endpoints in self._collections.values():
            for endpoint in endpoints:
                if query_lower in endpoint.path.lower() or query_lower in endpoint.description.lower():
                    results.append(endpoint)

        logger.debug(f"Found {len(results)} endpoints for query '{query}'")
        return results

    def find_by_method_and_path(self, method: str, path: str) -> Optional[EndpointRecord]:
        """
        Find the first endpoint with this method and exact path.

        The method is upper-cased before comparing; the path is compared
        as-is, including case.
        """
        method = method.upper()
        for endpoint in self.search(""):
            if endpoint.method == method and endpoint.path == path:
                return endpoint
        return None

    def list_collection_names(self) -> List[str]:
        """Get the names of all loaded collections in insertion order."""
        return list(self._collections.keys())

    def __len__(self) -> int:
        """Return the number of endpoints across all collections."""
        return sum(len(endpoints) for endpoints in self._collections.values())
