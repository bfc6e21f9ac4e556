"""Tests for server assembly, lifespan preloading and startup."""

import asyncio
from unittest.mock import patch

import pytest

from src.mcp_server_apidocs.config import Settings
from src.mcp_server_apidocs.lifespan import make_lifespan, preload_documents
from src.mcp_server_apidocs.server import LOADED_APIS_URI, create_server, main
from src.tools.document_loader import DocumentLoadError


EXPECTED_TOOLS = {
    "load_api_docs",
    "search_endpoints",
    "get_endpoint_details",
    "generate_code_sample",
    "test_gemini_api",
    "gemini_chat",
    "gemini_analyze_code",
    "gemini_generate_code",
}


class TestCreateServer:
    """Tests for create_server registration."""

    def test_tools_registered(self, index):
        """Test every tool is exposed."""
        server = create_server(index=index)
        tools = asyncio.run(server.list_tools())
        assert {tool.name for tool in tools} == EXPECTED_TOOLS

    def test_tool_required_arguments(self, index):
        """Test required arguments in the declared input schemas."""
        server = create_server(index=index)
        tools = {tool.name: tool for tool in asyncio.run(server.list_tools())}

        assert set(tools["load_api_docs"].inputSchema["required"]) == {"url", "api_name"}
        assert set(tools["gemini_analyze_code"].inputSchema["required"]) == {"api_key", "code"}
        assert set(tools["test_gemini_api"].inputSchema["required"]) == {"api_key"}

    def test_resource_registered(self, index):
        """Test the loaded-apis resource is exposed."""
        server = create_server(index=index)
        resources = asyncio.run(server.list_resources())
        assert [str(resource.uri).rstrip("/") for resource in resources] == [LOADED_APIS_URI]

    def test_prompts_registered(self, index):
        """Test both prompts are exposed."""
        server = create_server(index=index)
        prompts = asyncio.run(server.list_prompts())
        assert {prompt.name for prompt in prompts} == {"api-integration-helper", "gemini-project-setup"}


class TestLifespan:
    """Tests for startup preloading."""

    def test_preload_documents(self, index, ping_document):
        """Test configured documents are loaded and failures skipped."""

        def fetcher(source):
            if source == "bad":
                raise DocumentLoadError("HTTP 404: Not Found")
            return ping_document

        loaded = preload_documents(index, {"svc": "good", "broken": "bad"}, fetcher)

        assert loaded == 1
        assert index.list_collection_names() == ["svc"]

    def test_lifespan_yields_index(self, index, ping_document):
        """Test the lifespan preloads and exposes the index."""
        lifespan = make_lifespan(index, {"svc": "x"}, lambda source: ping_document)

        async def run():
            async with lifespan(None) as context:
                return context

        context = asyncio.run(run())
        assert context["endpoint_index"] is index
        assert len(index) == 1


class TestMain:
    """Tests for the main entry point."""

    def test_invalid_config_exits(self, monkeypatch):
        """Test invalid configuration exits with status 1."""
        monkeypatch.setenv("MCP_TRANSPORT", "carrier-pigeon")
        with pytest.raises(SystemExit) as exc_info:
            main()
        assert exc_info.value.code == 1

    def test_transport_failure_exits(self):
        """Test a transport that fails to start exits with status 1."""
        with patch("mcp.server.fastmcp.FastMCP.run", side_effect=OSError("stdin closed")):
            with pytest.raises(SystemExit) as exc_info:
                main()
        assert exc_info.value.code == 1

    def test_server_name(self, index):
        """Test the server builds without a running transport."""
        server = create_server(Settings(gemini_default_model="gemini-pro"), index=index)
        assert server.name == "api-docs-mcp"
