"""Turns a document into a chat request and appends the reply to it."""

from __future__ import annotations

import logging
from typing import Protocol

from prompt_assistant.config import Settings
from prompt_assistant.constants import MSG_PADDING, AIProvider
from prompt_assistant.documents import DocumentStore
from prompt_assistant.exceptions import (
    EmptyDocumentError,
    MissingCredentialError,
    NoActiveDocumentError,
    UnknownPromptError,
    UnsupportedProviderError,
)
from prompt_assistant.models import ChatReply, ChatRequest
from prompt_assistant.prompts import SYSTEM_PROMPT
from prompt_assistant.request_builder import build_chat_request
from prompt_assistant.transcript import decode_transcript, encode_reply

logger = logging.getLogger(__name__)


class ChatBackend(Protocol):
    async def complete(self, request: ChatRequest, api_key: str) -> ChatReply:
        ...


class ChatOrchestrator:
    """Runs one chat, summary or custom prompt against a document."""

    def __init__(
        self,
        chat_service: ChatBackend,
        store: DocumentStore,
        *,
        system_prompt: str = SYSTEM_PROMPT,
    ) -> None:
        self._chat_service = chat_service
        self._store = store
        self._system_prompt = system_prompt

    async def respond(
        self,
        document: str,
        settings: Settings,
        *,
        summarize: bool = False,
        custom_prompt: str | None = None,
    ) -> str:
        """Continue the conversation in ``document`` and return the appended text.

        Nothing is written when any step fails.
        """

        if not document:
            raise NoActiveDocumentError("No active document")

        if settings.provider not in {provider.value for provider in AIProvider}:
            raise UnsupportedProviderError(
                f"Invalid mode '{settings.provider}' detected. "
                "Update in AI chat assistant plugin settings and select a valid mode"
            )

        if not settings.openrouter_api_key:
            raise MissingCredentialError(
                "Missing OpenRouter API key - update in AI chat assistant plugin settings"
            )

        text = await self._store.read(document)
        if not text.strip():
            raise EmptyDocumentError("First, write something in a note")

        transcript = decode_transcript(text, settings.assistant_name)
        request = build_chat_request(
            transcript,
            system_prompt=self._system_prompt,
            language=settings.language,
            model=settings.current_model,
            summarize=summarize,
            instruction=custom_prompt,
        )

        logger.info(
            "Dispatching chat request",
            extra={
                "document": document,
                "turns": len(transcript),
                "model": request.model,
                "summarize": summarize,
                "custom_prompt": custom_prompt is not None,
            },
        )
        reply = await self._chat_service.complete(request, settings.openrouter_api_key)

        appended = (
            MSG_PADDING + reply.content
            if summarize
            else encode_reply(reply.content, settings.assistant_name)
        )
        await self._store.append(document, appended)
        return appended

    async def summarize(self, document: str, settings: Settings) -> str:
        return await self.respond(document, settings, summarize=True)

    async def run_custom_prompt(self, document: str, prompt_id: str, settings: Settings) -> str:
        prompt = settings.find_prompt(prompt_id)
        if prompt is None:
            raise UnknownPromptError(f"Unknown custom prompt '{prompt_id}'")
        return await self.respond(document, settings, custom_prompt=prompt.prompt)
