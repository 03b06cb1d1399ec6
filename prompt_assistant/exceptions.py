"""Custom exceptions shared across services."""

from dataclasses import dataclass

from prompt_assistant.models import ErrorCategory


@dataclass(eq=False)
class ServiceError(Exception):
    """Base exception for service layer failures."""

    message: str
    code: str = "service_error"
    status_code: int | None = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.message


@dataclass(eq=False)
class ChatServiceError(ServiceError):
    """Raised when the chat endpoint fails to return a usable reply."""

    code: str = "chat_error"
    category: ErrorCategory = ErrorCategory.UNKNOWN


@dataclass(eq=False)
class PreconditionError(ServiceError):
    """Raised before any network call when a request cannot be attempted."""

    code: str = "precondition_error"


@dataclass(eq=False)
class NoActiveDocumentError(PreconditionError):
    code: str = "no_active_document"


@dataclass(eq=False)
class DocumentNotFoundError(PreconditionError):
    code: str = "document_not_found"


@dataclass(eq=False)
class EmptyDocumentError(PreconditionError):
    code: str = "empty_document"


@dataclass(eq=False)
class UnsupportedProviderError(PreconditionError):
    code: str = "unsupported_provider"


@dataclass(eq=False)
class MissingCredentialError(PreconditionError):
    code: str = "missing_credential"


@dataclass(eq=False)
class UnknownPromptError(PreconditionError):
    code: str = "unknown_prompt"
