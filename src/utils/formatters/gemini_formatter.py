import logging

from src.tools.gemini_client import GenerationResult

logger = logging.getLogger("utils.formatters.gemini_formatter")


def connection_success_formatter(test_message: str, result: GenerationResult) -> str:
    """
    Formats a successful connection test.

    Args:
        test_message (str): The message that was sent.
        result (GenerationResult): The service reply.

    Returns:
        str: A Markdown report.
    """
    return (
        "✅ **Gemini API Test Successful!**\n\n"
        f"**Your Message:** {test_message}\n\n"
        f"**Gemini Response:** {result.text}\n\n"
        "**API Details:**\n"
        f"- Status: {result.status_code} {result.reason}\n"
        f"- Model: {result.model}\n"
        "- API Key: Working correctly\n\n"
        "Your Gemini API integration is ready to use."
    )


def connection_failure_formatter(error: Exception) -> str:
    """
    Formats a failed connection test with remediation hints.

    Args:
        error (Exception): The error raised by the client.

    Returns:
        str: A Markdown report.
    """
    return (
        "❌ **Gemini API Test Failed**\n\n"
        f"**Error:** {error}\n\n"
        "**Common Issues:**\n"
        "- Invalid API key\n"
        "- API key doesn't have necessary permissions\n"
        "- Network connectivity issues\n"
        "- Rate limiting\n\n"
        "**Next Steps:**\n"
        "1. Verify your API key at https://aistudio.google.com/\n"
        "2. Check if billing is enabled\n"
        "3. Ensure API key has Generative AI permissions"
    )


def chat_formatter(message: str, result: GenerationResult) -> str:
    return f"**Your Message:** {message}\n\n**Gemini Response:**\n{result.text}"


def analysis_formatter(analysis_type: str, language: str, result: GenerationResult) -> str:
    return (
        f"# Code Analysis ({analysis_type})\n\n"
        f"**Language:** {language}\n\n"
        f"**Analysis:**\n{result.text}"
    )


def generated_code_formatter(requirements: str, language: str, style: str, result: GenerationResult) -> str:
    """
    Formats generated code with the request that produced it.

    The style line is omitted when no style was given.
    """
    header = f"# Generated Code\n\n**Requirements:** {requirements}\n**Language:** {language}\n"
    if style:
        header += f"**Style:** {style}\n"
    return f"{header}\n**Generated Code:**\n{result.text}"
