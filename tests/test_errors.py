import httpx
import pytest

from prompt_assistant import errors
from prompt_assistant.exceptions import ChatServiceError
from prompt_assistant.models import ErrorCategory


@pytest.mark.parametrize(
    ("status_code", "category"),
    [
        (401, ErrorCategory.INVALID_CREDENTIAL),
        (403, ErrorCategory.ACCESS_FORBIDDEN),
        (404, ErrorCategory.MODEL_NOT_FOUND),
        (429, ErrorCategory.RATE_LIMITED),
        (500, ErrorCategory.SERVICE_UNAVAILABLE),
        (503, ErrorCategory.SERVICE_UNAVAILABLE),
        (599, ErrorCategory.SERVICE_UNAVAILABLE),
        (402, ErrorCategory.UNKNOWN),
    ],
)
def test_status_categories(status_code: int, category: ErrorCategory) -> None:
    error = errors.from_status(status_code, "openai/gpt-4o-mini")

    assert error.category == category
    assert error.status_code == status_code


def test_recognized_status_ignores_underlying_detail() -> None:
    error = errors.from_status(401, "m", detail="User not found.")

    assert error.category == ErrorCategory.INVALID_CREDENTIAL
    assert error.message == "Invalid API key. Please check your OpenRouter API key in settings."


def test_not_found_names_model() -> None:
    error = errors.from_status(404, "anthropic/claude-3.5-sonnet")

    assert "anthropic/claude-3.5-sonnet" in error.message


def test_other_client_errors_give_guidance() -> None:
    error = errors.from_status(402, "m", detail="Insufficient credits")

    assert "Credits in your OpenRouter account" in error.message


def test_unrecognized_status_keeps_detail() -> None:
    error = errors.from_status(302, "m", detail="Found elsewhere")

    assert error.category == ErrorCategory.UNKNOWN
    assert error.message == "Found elsewhere"


def test_payload_error_is_malformed_response() -> None:
    error = errors.payload_error({"message": "Model overloaded", "code": 502})

    assert error.category == ErrorCategory.MALFORMED_RESPONSE
    assert error.message == "API Error: Model overloaded"
    assert errors.payload_error({}).message == "API Error: Unknown error"


def test_missing_choices_is_malformed_response() -> None:
    error = errors.missing_choices()

    assert error.category == ErrorCategory.MALFORMED_RESPONSE
    assert error.message == "No response from API"


def test_from_exception_maps_http_status_error() -> None:
    request = httpx.Request("POST", "https://openrouter.ai/api/v1/chat/completions")
    response = httpx.Response(429, request=request)
    exc = httpx.HTTPStatusError("too many", request=request, response=response)

    error = errors.from_exception(exc, "m")

    assert error.category == ErrorCategory.RATE_LIMITED


def test_from_exception_passes_chat_errors_through() -> None:
    original = ChatServiceError("boom", category=ErrorCategory.MALFORMED_RESPONSE)

    assert errors.from_exception(original, "m") is original


def test_from_exception_keeps_unknown_message() -> None:
    error = errors.from_exception(httpx.ConnectError("connection refused"), "m")

    assert error.category == ErrorCategory.UNKNOWN
    assert error.message == "connection refused"


def test_user_message() -> None:
    assert errors.user_message(errors.missing_choices()) == (
        "AI chat assistant error: No response from API"
    )
