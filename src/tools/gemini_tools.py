"""
Handlers for the Gemini pass-through tools.

Each handler fills a prompt template, makes one call through GeminiClient
and formats the reply. Service errors are returned as text, never raised.
"""
import logging
from typing import Optional

from src.tools.gemini_client import GeminiAPIError, GeminiClient
from src.utils.formatters import (
    analysis_formatter,
    chat_formatter,
    connection_failure_formatter,
    connection_success_formatter,
    generated_code_formatter,
)

logger = logging.getLogger(__name__)

DEFAULT_TEST_MESSAGE = "Hello, this is a test message to verify my API key is working!"
NO_ANALYSIS_TEXT = "No analysis generated"
NO_CODE_TEXT = "No code generated"

ANALYSIS_PROMPTS = {
    "review": "Please review this {language} code and provide feedback on code quality, best practices, and potential improvements:",
    "bugs": "Please analyze this {language} code for potential bugs, errors, or issues:",
    "optimization": "Please analyze this {language} code for performance optimizations and efficiency improvements:",
    "explanation": "Please explain how this {language} code works, including its purpose and key components:",
}


def build_analysis_prompt(code: str, language: str = "", analysis_type: str = "review") -> str:
    """Build the analysis prompt; unknown analysis types use the review prompt."""
    template = ANALYSIS_PROMPTS.get(analysis_type, ANALYSIS_PROMPTS["review"])
    instruction = template.format(language=language)
    return f"{instruction}\n\n```{language}\n{code}\n```"


def build_generation_prompt(requirements: str, language: str = "", style: str = "") -> str:
    style_line = f"Style/Framework: {style}" if style else ""
    return (
        f"Generate {language} code based on these requirements:\n\n"
        f"Requirements: {requirements}\n\n"
        f"{style_line}\n\n"
        "Please provide clean, well-documented code with comments explaining key parts."
    )


def test_gemini_api(client: GeminiClient, api_key: str, test_message: Optional[str] = None) -> str:
    """Send one test message with the default model and report the outcome."""
    test_message = test_message or DEFAULT_TEST_MESSAGE
    try:
        result = client.generate(api_key, test_message)
    except GeminiAPIError as e:
        return connection_failure_formatter(e)
    return connection_success_formatter(test_message, result)


def gemini_chat(client: GeminiClient, api_key: str, message: str, model: Optional[str] = None) -> str:
    try:
        result = client.generate(api_key, message, model=model)
    except GeminiAPIError as e:
        return f"Error communicating with Gemini: {e}"
    return chat_formatter(message, result)


def gemini_analyze_code(
    client: GeminiClient,
    api_key: str,
    code: str,
    language: str = "",
    analysis_type: str = "review",
) -> str:
    """
    Ask Gemini to analyze a piece of code.

    Args:
        client: Gemini client
        api_key: Gemini API key
        code: Code to analyze
        language: Language name, used in the prompt and the code fence
        analysis_type: review, bugs, optimization or explanation

    Returns:
        The formatted analysis or an error line
    """
    analysis_type = analysis_type or "review"
    prompt = build_analysis_prompt(code, language, analysis_type)
    try:
        result = client.generate(api_key, prompt, empty_text=NO_ANALYSIS_TEXT)
    except GeminiAPIError as e:
        return f"Error analyzing code: {e}"
    return analysis_formatter(analysis_type, language, result)


def gemini_generate_code(
    client: GeminiClient,
    api_key: str,
    requirements: str,
    language: str = "",
    style: str = "",
) -> str:
    prompt = build_generation_prompt(requirements, language, style)
    try:
        result = client.generate(api_key, prompt, empty_text=NO_CODE_TEXT)
    except GeminiAPIError as e:
        return f"Error generating code: {e}"
    return generated_code_formatter(requirements, language, style, result)
