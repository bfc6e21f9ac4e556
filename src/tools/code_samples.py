"""Code sample templates for calling an endpoint."""

SUPPORTED_LANGUAGES = ("javascript", "python", "curl")


def _javascript_sample(method: str, path: str) -> str:
    return f"""
// {method} {path}
const response = await fetch('{path}', {{
  method: '{method}',
  headers: {{
    'Content-Type': 'application/json',
  }},
  // Add body for POST/PUT requests
}});

const data = await response.json();
console.log(data);
"""


def _python_sample(method: str, path: str) -> str:
    return f"""
# {method} {path}
import requests

response = requests.{method.lower()}('{path}')
data = response.json()
print(data)
"""


def _curl_sample(method: str, path: str) -> str:
    return f"""
# {method} {path}
curl -X {method} \\
  '{path}' \\
  -H 'Content-Type: application/json'
"""


_TEMPLATES = {
    "javascript": _javascript_sample,
    "python": _python_sample,
    "curl": _curl_sample,
}


def generate_code_sample(method: str, path: str, language: str) -> str:
    """
    Render a request snippet for an endpoint.

    Args:
        method: HTTP method, used as given
        path: Endpoint path
        language: One of javascript, python or curl (case-insensitive)

    Returns:
        The snippet, or a "not supported yet" message for other languages
    """
    template = _TEMPLATES.get(language.lower())
    if template is None:
        return f"Code generation for {language} not supported yet."
    return template(method, path)
