"""Pydantic models shared across application layers."""

from enum import Enum
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from prompt_assistant.constants import TEMPERATURE

Role = Literal["system", "user", "assistant"]


class Message(BaseModel):
    """One role-tagged chat message."""

    role: Role
    content: str


class ChatRequest(BaseModel):
    """Outgoing chat completion request body."""

    messages: list[Message]
    model: str
    temperature: float = TEMPERATURE

    @field_validator("messages")
    @classmethod
    def _system_message_first(cls, messages: list[Message]) -> list[Message]:
        if not messages or messages[0].role != "system":
            raise ValueError("the first message must be the system message")
        if any(message.role == "system" for message in messages[1:]):
            raise ValueError("only one system message is allowed")
        return messages


class ChatReply(BaseModel):
    """Reply text extracted from the first completion choice."""

    content: str


class ErrorCategory(str, Enum):
    """User-facing classes of chat failures."""

    INVALID_CREDENTIAL = "invalid_credential"
    ACCESS_FORBIDDEN = "access_forbidden"
    MODEL_NOT_FOUND = "model_not_found"
    RATE_LIMITED = "rate_limited"
    SERVICE_UNAVAILABLE = "service_unavailable"
    MALFORMED_RESPONSE = "malformed_response"
    UNKNOWN = "unknown"


class CustomPrompt(BaseModel):
    """Ad-hoc instruction offered next to the plain chat action."""

    id: str
    name: str
    prompt: str


class ChatCommandIn(BaseModel):
    """Incoming WebSocket payload."""

    document: str = Field(min_length=1, description="Document to continue.")
    action: Literal["chat", "summarize", "prompt"] = "chat"
    prompt_id: str | None = None


class ReplyOut(BaseModel):
    """Text appended to a document."""

    document: str
    appended: str


class PromptOut(BaseModel):
    """Custom prompt listing entry."""

    id: str
    name: str


class ErrorResponse(BaseModel):
    """Error frame returned to clients."""

    error: str
    detail: str | None = None
    category: ErrorCategory | None = None
