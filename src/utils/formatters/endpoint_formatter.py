import logging

from src.tools.endpoint_index import EndpointRecord

logger = logging.getLogger("utils.formatters.endpoint_formatter")


def search_results_formatter(query: str, endpoints: list[EndpointRecord]) -> str:
    """
    Formats search results as one "METHOD path - description" line per endpoint.

    Args:
        query (str): The query the endpoints were matched against.
        endpoints (list[EndpointRecord]): The matching endpoints.

    Returns:
        str: A header line followed by the endpoint lines.
    """
    lines = [f"{endpoint.method} {endpoint.path} - {endpoint.description}" for endpoint in endpoints]
    return f'Found {len(endpoints)} endpoints matching "{query}":\n\n' + "\n".join(lines)


def endpoint_formatter(endpoint: EndpointRecord) -> str:
    """
    Formats a single endpoint as a Markdown block.

    Args:
        endpoint (EndpointRecord): The endpoint to describe.

    Returns:
        str: Markdown with description, parameters and responses.
    """
    parameters = "\n".join(
        f"- {p.name} ({p.type}{', required' if p.required else ''}): {p.description}"
        for p in endpoint.parameters
    ) or "None"

    responses = "\n".join(
        f"- {r.status_code if r.status_code is not None else 'N/A'}: {r.description}"
        for r in endpoint.responses
    ) or "None"

    return (
        f"## {endpoint.method} {endpoint.path}\n\n"
        f"**Description:** {endpoint.description}\n\n"
        f"**Parameters:**\n{parameters}\n\n"
        f"**Responses:**\n{responses}\n"
    )


def endpoint_not_found_formatter(method: str, path: str) -> str:
    return f"Endpoint {method} {path} not found."


def loaded_apis_formatter(names: list[str]) -> str:
    """Formats the loaded collection names for the loaded-apis resource."""
    api_list = "\n".join(names)
    return f"Loaded APIs:\n{api_list or 'No APIs loaded yet'}"
