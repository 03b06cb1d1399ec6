"""Adapter for OpenRouter chat completions."""

from __future__ import annotations

import logging

import httpx

from prompt_assistant import errors
from prompt_assistant.constants import (
    APP_REFERER,
    APP_TITLE,
    OPENROUTER_CHAT_URL,
    OPENROUTER_HOST,
)
from prompt_assistant.models import ChatReply, ChatRequest
from prompt_assistant.request_builder import resolve_model

logger = logging.getLogger(__name__)


class ChatService:
    """Wrapper around an OpenAI-compatible chat completions endpoint."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        *,
        endpoint: str = OPENROUTER_CHAT_URL,
        timeout: float = 30.0,
    ) -> None:
        self._client = client
        self._endpoint = endpoint
        self._timeout = timeout

    @property
    def endpoint(self) -> str:
        return self._endpoint

    def _headers(self, api_key: str) -> dict[str, str]:
        headers = {
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
        }
        if httpx.URL(self._endpoint).host == OPENROUTER_HOST:
            headers["HTTP-Referer"] = APP_REFERER
            headers["X-Title"] = APP_TITLE
        return headers

    async def complete(self, request: ChatRequest, api_key: str) -> ChatReply:
        """Send the assembled conversation and return the first choice."""

        model = resolve_model(request.model)
        payload = request.model_dump(mode="json")
        payload["model"] = model

        logger.debug(
            "Requesting chat completion",
            extra={"model": model, "message_count": len(request.messages)},
        )

        try:
            response = await self._client.post(
                self._endpoint,
                headers=self._headers(api_key),
                json=payload,
                timeout=self._timeout,
            )
            response.raise_for_status()
        except httpx.TimeoutException as exc:
            logger.warning("Chat completion timed out", exc_info=exc)
            raise errors.from_exception(exc, model) from exc
        except httpx.HTTPStatusError as exc:
            logger.error(
                "Chat completion failed",
                extra={
                    "status_code": exc.response.status_code,
                    "response_text": exc.response.text,
                },
            )
            raise errors.from_status(
                exc.response.status_code,
                model,
                detail=_error_detail(exc.response),
            ) from exc
        except httpx.HTTPError as exc:
            logger.exception("Unexpected chat HTTP error")
            raise errors.from_exception(exc, model) from exc

        try:
            data = response.json()
        except ValueError as exc:
            logger.error("Chat response is not JSON", extra={"response_text": response.text})
            raise errors.malformed("Invalid chat response payload") from exc

        if not isinstance(data, dict):
            logger.error("Malformed chat response", extra={"raw_response": data})
            raise errors.malformed("Invalid chat response payload")

        if data.get("error") is not None:
            logger.error("Chat response carries an error", extra={"raw_response": data})
            raise errors.payload_error(data["error"])

        choices = data.get("choices")
        if not choices:
            logger.error("Chat response has no choices", extra={"raw_response": data})
            raise errors.missing_choices()

        try:
            content = choices[0]["message"]["content"]
        except (KeyError, IndexError, TypeError) as exc:
            logger.error("Malformed chat response", extra={"raw_response": data})
            raise errors.malformed("Invalid chat response payload") from exc

        if not isinstance(content, str) or not content.strip():
            raise errors.malformed("Chat service returned empty content")

        logger.debug("Received chat completion", extra={"model": model})
        return ChatReply(content=content.strip())


def _error_detail(response: httpx.Response) -> str | None:
    """Pull the provider's own error message out of a failed response."""

    try:
        body = response.json()
    except ValueError:
        return response.text or None

    if isinstance(body, dict) and isinstance(body.get("error"), dict):
        return body["error"].get("message")
    return response.text or None
