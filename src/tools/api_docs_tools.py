"""
Handlers for the API documentation tools.

Each handler receives the EndpointIndex it works on and returns the text
shown to the MCP client. Fetch and decode failures come back as text too.
"""
import logging
from typing import Any, Callable

from src.tools.code_samples import generate_code_sample
from src.tools.document_loader import fetch_document
from src.tools.endpoint_index import EndpointIndex
from src.utils.formatters import (
    endpoint_formatter,
    endpoint_not_found_formatter,
    loaded_apis_formatter,
    search_results_formatter,
)

logger = logging.getLogger(__name__)

DocumentFetcher = Callable[[str], Any]


def load_api_docs(index: EndpointIndex, url: str, api_name: str, fetcher: DocumentFetcher = fetch_document) -> str:
    """
    Fetch a document and ingest it under api_name.

    Args:
        index: Index to load into
        url: Document source (URL or path)
        api_name: Collection name; replaces an existing collection of that name
        fetcher: Callable returning the decoded document for a source

    Returns:
        A success line with the endpoint count, or an error line
    """
    try:
        document = fetcher(url)
        index.ingest(document, api_name)
    except Exception as e:
        logger.error(f"Error loading API docs from {url}: {e}")
        return f"Error loading API docs: {e}"

    count = len(index.get_endpoints(api_name))
    return f"Successfully loaded API documentation for {api_name}. Found {count} endpoints."


def search_endpoints(index: EndpointIndex, query: str) -> str:
    """Search all loaded endpoints by keyword."""
    return search_results_formatter(query, index.search(query))


def get_endpoint_details(index: EndpointIndex, method: str, path: str) -> str:
    """Describe one endpoint, or report that it was not found."""
    endpoint = index.find_by_method_and_path(method, path)
    if endpoint is None:
        return endpoint_not_found_formatter(method, path)
    return endpoint_formatter(endpoint)


def code_sample(method: str, path: str, language: str) -> str:
    return generate_code_sample(method, path, language)


def loaded_apis(index: EndpointIndex) -> str:
    return loaded_apis_formatter(index.list_collection_names())
