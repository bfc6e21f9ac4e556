import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Any, Callable, Dict

from src.tools.api_docs_tools import DocumentFetcher
from src.tools.endpoint_index import EndpointIndex

logger = logging.getLogger(__name__)


def preload_documents(index: EndpointIndex, preload: Dict[str, str], fetcher: DocumentFetcher) -> int:
    """
    Load the configured documents into the index.

    A document that fails to load is logged and skipped.

    Returns:
        Number of documents loaded successfully
    """
    loaded = 0
    for name, source in preload.items():
        try:
            count = index.ingest(fetcher(source), name)
        except Exception as e:
            logger.error(f"Failed to preload API docs '{name}' from {source}: {e}")
            continue
        logger.info(f"Preloaded '{name}' with {count} endpoints")
        loaded += 1
    return loaded


def make_lifespan(
    index: EndpointIndex,
    preload: Dict[str, str],
    fetcher: DocumentFetcher,
) -> Callable[[Any], Any]:
    """Create the server lifespan bound to an index and its preload list."""

    @asynccontextmanager
    async def lifespan(server) -> AsyncIterator[dict[str, Any]]:
        """
        Lifespan context manager to handle startup and shutdown events.

        On startup, it loads any documents configured in API_DOCS_PRELOAD.

        Args:
            server: The FastMCP server instance this lifespan is managing

        Returns:
            A dictionary exposing the endpoint index to request handlers
        """
        logger.info("Starting API docs MCP server...")

        if preload:
            loaded = preload_documents(index, preload, fetcher)
            logger.info(f"Preloaded {loaded}/{len(preload)} API documents")

        yield {"endpoint_index": index}

        logger.info("Shutting down API docs MCP server...")

    return lifespan
