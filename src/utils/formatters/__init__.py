from .endpoint_formatter import (
    endpoint_formatter,
    endpoint_not_found_formatter,
    loaded_apis_formatter,
    search_results_formatter,
)
from .gemini_formatter import (
    analysis_formatter,
    chat_formatter,
    connection_failure_formatter,
    connection_success_formatter,
    generated_code_formatter,
)

__all__ = [
    "endpoint_formatter",
    "endpoint_not_found_formatter",
    "loaded_apis_formatter",
    "search_results_formatter",
    "analysis_formatter",
    "chat_formatter",
    "connection_failure_formatter",
    "connection_success_formatter",
    "generated_code_formatter",
]
