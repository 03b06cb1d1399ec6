"""Assembly of the ordered message list sent to the chat endpoint."""

from __future__ import annotations

from typing import Sequence

from prompt_assistant.constants import OPENROUTER_DEFAULT_MODEL
from prompt_assistant.models import ChatRequest, Message
from prompt_assistant.prompts import summary_prompt


def language_directive(language: str) -> str:
    return f"Respond to the user in {language}.\n"


def build_messages(
    transcript: Sequence[Message],
    *,
    system_prompt: str,
    language: str,
    summarize: bool = False,
    instruction: str | None = None,
) -> list[Message]:
    """Return system message, transcript, then trailing directives.

    The summary directive comes after the whole transcript and the ad-hoc
    instruction, when given, comes last.
    """

    system = Message(role="system", content=language_directive(language) + system_prompt)
    messages = [system, *transcript]

    if summarize:
        messages.append(Message(role="user", content=summary_prompt(language)))

    if instruction:
        messages.append(Message(role="user", content=instruction))

    return messages


def resolve_model(model: str | None) -> str:
    """Fall back to the default model when no override is configured."""

    return model or OPENROUTER_DEFAULT_MODEL


def build_chat_request(
    transcript: Sequence[Message],
    *,
    system_prompt: str,
    language: str,
    model: str | None = None,
    summarize: bool = False,
    instruction: str | None = None,
) -> ChatRequest:
    messages = build_messages(
        transcript,
        system_prompt=system_prompt,
        language=language,
        summarize=summarize,
        instruction=instruction,
    )
    return ChatRequest(messages=messages, model=resolve_model(model))
