"""Pytest configuration and shared fixtures for API docs MCP tests."""

import pytest

from src.tools.endpoint_index import EndpointIndex


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Ensure a clean environment for each test by removing server env vars."""
    server_env_vars = [
        "MCP_TRANSPORT",
        "LOG_LEVEL",
        "GEMINI_BASE_URL",
        "GEMINI_DEFAULT_MODEL",
        "GEMINI_TIMEOUT_SECONDS",
        "DOCUMENT_FETCH_TIMEOUT_SECONDS",
        "API_DOCS_PRELOAD",
    ]
    for var in server_env_vars:
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def index():
    """Empty endpoint index."""
    return EndpointIndex()


@pytest.fixture
def ping_document():
    """Minimal document with a single health check endpoint."""
    return {"paths": {"/ping": {"get": {"summary": "health check"}}}}


@pytest.fixture
def petstore_document():
    """Small Swagger 2.0 / OpenAPI 3 style document."""
    return {
        "swagger": "2.0",
        "info": {"title": "Petstore", "version": "1.0.0"},
        "paths": {
            "/pets": {
                "get": {
                    "summary": "List all pets",
                    "parameters": [
                        {
                            "name": "limit",
                            "in": "query",
                            "description": "How many items to return",
                            "schema": {"type": "integer"},
                        }
                    ],
                    "responses": {
                        "200": {
                            "description": "A paged array of pets",
                            "content": {"application/json": {"schema": {"type": "array"}}},
                        },
                        "default": {"description": "unexpected error"},
                    },
                },
                "post": {
                    "description": "Create a pet",
                    "parameters": [
                        {"name": "body", "in": "body", "required": True, "type": "object"}
                    ],
                    "responses": {"201": {"description": "Null response"}},
                    "examples": {
                        "cat": {"value": {"name": "Tom", "tag": "cat"}},
                        "raw": {"name": "Rex"},
                    },
                },
            },
            "/Pets/{petId}": {
                "parameters": [{"name": "petId", "in": "path", "required": True}],
                "get": {
                    "summary": "Info for a specific pet",
                    "parameters": [{"name": "petId", "in": "path", "required": True}],
                    "responses": {
                        "404": {"description": "Pet not found", "schema": {"$ref": "#/definitions/Error"}}
                    },
                },
            },
        },
    }


@pytest.fixture
def gemini_success_payload():
    """Typical generateContent response body."""
    return {
        "candidates": [
            {"content": {"parts": [{"text": "Hello from Gemini"}], "role": "model"}}
        ]
    }
