"""Mapping of transport and payload failures onto user-facing categories."""

from __future__ import annotations

from typing import Any

import httpx

from prompt_assistant.exceptions import ChatServiceError
from prompt_assistant.models import ErrorCategory

_CLIENT_ERROR_GUIDANCE = (
    "Unable to connect to OpenRouter.\n\n"
    "Ensure you have:\n"
    "- A valid OpenRouter API key\n"
    "- Credits in your OpenRouter account\n"
    "- The correct model name"
)


def classify_status(status_code: int, model: str) -> tuple[ErrorCategory, str] | None:
    """Return the category and message for a recognized HTTP status."""

    if status_code == 401:
        return (
            ErrorCategory.INVALID_CREDENTIAL,
            "Invalid API key. Please check your OpenRouter API key in settings.",
        )
    if status_code == 403:
        return (
            ErrorCategory.ACCESS_FORBIDDEN,
            "Access forbidden. Please verify your OpenRouter API key has proper permissions.",
        )
    if status_code == 404:
        return (
            ErrorCategory.MODEL_NOT_FOUND,
            f"Model '{model}' not found. Please check the model name in settings.",
        )
    if status_code == 429:
        return ErrorCategory.RATE_LIMITED, "Rate limit exceeded. Please try again later."
    if 500 <= status_code <= 599:
        return (
            ErrorCategory.SERVICE_UNAVAILABLE,
            "OpenRouter service error. Please try again later.",
        )
    if 400 <= status_code <= 499:
        return ErrorCategory.UNKNOWN, _CLIENT_ERROR_GUIDANCE
    return None


def from_status(status_code: int, model: str, detail: str | None = None) -> ChatServiceError:
    """Build the error for an HTTP failure.

    A recognized status always wins over ``detail``; otherwise ``detail`` is
    kept verbatim.
    """

    classified = classify_status(status_code, model)
    if classified is None:
        message = detail or f"Chat service returned status {status_code}"
        return ChatServiceError(message, status_code=status_code)

    category, message = classified
    return ChatServiceError(message, status_code=status_code, category=category)


def payload_error(error: Any) -> ChatServiceError:
    """Error object embedded in an otherwise successful response."""

    message = error.get("message") if isinstance(error, dict) else None
    return ChatServiceError(
        f"API Error: {message or 'Unknown error'}",
        category=ErrorCategory.MALFORMED_RESPONSE,
    )


def missing_choices() -> ChatServiceError:
    return ChatServiceError("No response from API", category=ErrorCategory.MALFORMED_RESPONSE)


def malformed(message: str) -> ChatServiceError:
    return ChatServiceError(message, category=ErrorCategory.MALFORMED_RESPONSE)


def from_exception(exc: BaseException, model: str) -> ChatServiceError:
    """Normalize any failure raised while talking to the chat endpoint."""

    if isinstance(exc, ChatServiceError):
        return exc
    if isinstance(exc, httpx.HTTPStatusError):
        return from_status(exc.response.status_code, model, detail=str(exc))
    if isinstance(exc, httpx.TimeoutException):
        return ChatServiceError("Chat service timed out")
    return ChatServiceError(str(exc) or "Chat service request failed")


def user_message(error: BaseException) -> str:
    """Line shown to the person who triggered the request."""

    detail = str(error) or "An error occurred while processing your request."
    return f"AI chat assistant error: {detail}"
