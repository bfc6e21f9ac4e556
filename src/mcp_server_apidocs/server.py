import sys
import logging
from functools import partial
from pathlib import Path
from typing import Optional

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
)

# Add the project root directory to the Python path when running as a script
_project_root = Path(__file__).parent.parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

from mcp.server.fastmcp import FastMCP

from src.mcp_server_apidocs.config import Settings, get_settings
from src.mcp_server_apidocs.lifespan import make_lifespan
from src.tools import api_docs_tools, gemini_tools
from src.tools.api_docs_tools import DocumentFetcher
from src.tools.document_loader import fetch_document
from src.tools.endpoint_index import EndpointIndex
from src.tools.gemini_client import GeminiClient

logger = logging.getLogger(__name__)

SERVER_NAME = "api-docs-mcp"
LOADED_APIS_URI = "api://loaded-apis"


def create_server(
    settings: Optional[Settings] = None,
    index: Optional[EndpointIndex] = None,
    gemini_client: Optional[GeminiClient] = None,
    fetcher: Optional[DocumentFetcher] = None,
) -> FastMCP:
    """
    Build the MCP server and register its tools, resources and prompts.

    The endpoint index is created here once and handed to every handler.

    Args:
        settings: Server settings, defaults to Settings()
        index: Endpoint index to serve, defaults to a new empty index
        gemini_client: Client for the generation service
        fetcher: Callable that fetches and decodes a document source

    Returns:
        Configured FastMCP server
    """
    settings = settings or Settings()
    index = index if index is not None else EndpointIndex()
    gemini_client = gemini_client or GeminiClient(
        base_url=settings.gemini_base_url,
        default_model=settings.gemini_default_model,
        timeout=settings.gemini_timeout,
    )
    fetcher = fetcher or partial(fetch_document, timeout=settings.document_fetch_timeout)

    mcp = FastMCP(
        SERVER_NAME,
        lifespan=make_lifespan(index, settings.preload, fetcher),
        log_level=settings.log_level,
    )

    # ========================================================================
    # API DOCUMENTATION TOOLS
    # ========================================================================

    @mcp.tool()
    def load_api_docs(url: str, api_name: str) -> str:
        """
        Load and parse API documentation from a URL or file.

        Loading again under the same api_name replaces the earlier documentation.

        Args:
            url: URL or file path of an OpenAPI/Swagger document (JSON or YAML)
            api_name: Name to identify this API

        Returns:
            Number of endpoints found, or an error description
        """
        return api_docs_tools.load_api_docs(index, url, api_name, fetcher=fetcher)

    @mcp.tool()
    def search_endpoints(query: str) -> str:
        """
        Search for API endpoints by keyword.

        Matches the keyword case-insensitively against endpoint paths and
        descriptions across all loaded APIs. An empty query lists everything.

        Args:
            query: Search term for endpoints

        Returns:
            One "METHOD path - description" line per matching endpoint
        """
        return api_docs_tools.search_endpoints(index, query)

    @mcp.tool()
    def get_endpoint_details(method: str, path: str) -> str:
        """
        Get detailed information about a specific endpoint.

        Args:
            method: HTTP method (case-insensitive)
            path: Endpoint path, exactly as documented

        Returns:
            Markdown with description, parameters and responses
        """
        return api_docs_tools.get_endpoint_details(index, method, path)

    @mcp.tool()
    def generate_code_sample(method: str, path: str, language: str) -> str:
        """
        Generate code sample for an endpoint.

        Args:
            method: HTTP method
            path: Endpoint path
            language: Programming language (javascript, python, curl)
        """
        return api_docs_tools.code_sample(method, path, language)

    # ========================================================================
    # GEMINI TOOLS
    # ========================================================================

    @mcp.tool()
    def test_gemini_api(api_key: str, test_message: Optional[str] = None) -> str:
        """
        Test your Gemini API key and connection.

        Args:
            api_key: Your Gemini API key
            test_message: Test message to send
        """
        return gemini_tools.test_gemini_api(gemini_client, api_key, test_message)

    @mcp.tool()
    def gemini_chat(api_key: str, message: str, model: Optional[str] = None) -> str:
        """
        Chat with Gemini AI using your API key.

        Args:
            api_key: Your Gemini API key
            message: Message to send to Gemini
            model: Model to use (defaults to the server's configured model)
        """
        return gemini_tools.gemini_chat(gemini_client, api_key, message, model)

    @mcp.tool()
    def gemini_analyze_code(
        api_key: str,
        code: str,
        language: str = "",
        analysis_type: str = "review",
    ) -> str:
        """
        Use Gemini to analyze and review code.

        Args:
            api_key: Your Gemini API key
            code: Code to analyze
            language: Programming language
            analysis_type: Type of analysis (review, bugs, optimization, explanation)
        """
        return gemini_tools.gemini_analyze_code(gemini_client, api_key, code, language, analysis_type)

    @mcp.tool()
    def gemini_generate_code(
        api_key: str,
        requirements: str,
        language: str = "",
        style: str = "",
    ) -> str:
        """
        Use Gemini to generate code based on requirements.

        Args:
            api_key: Your Gemini API key
            requirements: Code requirements or description
            language: Programming language
            style: Code style or framework preferences
        """
        return gemini_tools.gemini_generate_code(gemini_client, api_key, requirements, language, style)

    # ========================================================================
    # RESOURCES
    # ========================================================================

    @mcp.resource(
        LOADED_APIS_URI,
        name="Loaded API Documentation",
        description="List of all loaded API specifications",
        mime_type="text/plain",
    )
    def loaded_apis() -> str:
        return api_docs_tools.loaded_apis(index)

    # ========================================================================
    # PROMPTS
    # ========================================================================

    @mcp.prompt(name="api-integration-helper", description="Help integrate with a loaded API")
    def api_integration_helper(task: str) -> str:
        return (
            f"I need help with: {task or 'API integration'}\n\n"
            "Please use the available API documentation tools to:\n"
            "1. Search for relevant endpoints\n"
            "2. Get detailed endpoint information\n"
            "3. Generate appropriate code samples\n"
            "4. Provide implementation guidance\n\n"
            "Focus on best practices, error handling, and clear documentation."
        )

    @mcp.prompt(name="gemini-project-setup", description="Help set up a Gemini AI project")
    def gemini_project_setup(project_type: str) -> str:
        return (
            f"I want to build: {project_type or 'an AI project'}\n\n"
            "Please help me:\n"
            "1. Test my Gemini API key\n"
            "2. Understand the capabilities available\n"
            "3. Generate starter code for my project\n"
            "4. Provide best practices for Gemini integration\n\n"
            "Use the available Gemini tools to assist with this setup."
        )

    return mcp


def main() -> None:
    """Run the server on the configured transport; exit with status 1 if it cannot start."""
    try:
        settings = get_settings()
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        sys.exit(1)

    logging.getLogger().setLevel(settings.log_level)
    server = create_server(settings)

    logger.info(f"API docs MCP server running on {settings.transport}")
    try:
        server.run(transport=settings.transport)
    except KeyboardInterrupt:
        logger.info("Server interrupted")
    except Exception as e:
        logger.error(f"Failed to start server: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
