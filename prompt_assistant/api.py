"""HTTP routes exposing the chat actions for a document."""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from prompt_assistant.config import Settings, get_settings
from prompt_assistant.dependencies import get_orchestrator
from prompt_assistant.errors import user_message
from prompt_assistant.exceptions import (
    ChatServiceError,
    DocumentNotFoundError,
    PreconditionError,
    ServiceError,
)
from prompt_assistant.models import ErrorCategory, ErrorResponse, PromptOut, ReplyOut
from prompt_assistant.orchestrator import ChatOrchestrator

logger = logging.getLogger(__name__)

router = APIRouter()

OrchestratorDep = Annotated[ChatOrchestrator, Depends(get_orchestrator)]
SettingsDep = Annotated[Settings, Depends(get_settings)]


@router.get("/prompts")
async def list_prompts(settings: SettingsDep) -> list[PromptOut]:
    return [PromptOut(id=prompt.id, name=prompt.name) for prompt in settings.custom_prompts]


# Must stay ahead of the chat and summarize routes: the greedy document path
# would otherwise absorb "/prompts/chat".
@router.post("/documents/{document:path}/prompts/{prompt_id}")
async def custom_prompt(
    document: str,
    prompt_id: str,
    orchestrator: OrchestratorDep,
    settings: SettingsDep,
) -> ReplyOut:
    appended = await orchestrator.run_custom_prompt(document, prompt_id, settings)
    return ReplyOut(document=document, appended=appended)


@router.post("/documents/{document:path}/chat")
async def chat(document: str, orchestrator: OrchestratorDep, settings: SettingsDep) -> ReplyOut:
    appended = await orchestrator.respond(document, settings)
    return ReplyOut(document=document, appended=appended)


@router.post("/documents/{document:path}/summarize")
async def summarize(
    document: str, orchestrator: OrchestratorDep, settings: SettingsDep
) -> ReplyOut:
    appended = await orchestrator.summarize(document, settings)
    return ReplyOut(document=document, appended=appended)


def error_response(exc: ServiceError) -> ErrorResponse:
    category = exc.category if isinstance(exc, ChatServiceError) else None
    return ErrorResponse(error=exc.code, detail=exc.message, category=category)


def _status_for(exc: ServiceError) -> int:
    if isinstance(exc, DocumentNotFoundError):
        return status.HTTP_404_NOT_FOUND
    if isinstance(exc, PreconditionError):
        return status.HTTP_400_BAD_REQUEST
    if isinstance(exc, ChatServiceError):
        if exc.category == ErrorCategory.RATE_LIMITED:
            return status.HTTP_429_TOO_MANY_REQUESTS
        return status.HTTP_502_BAD_GATEWAY
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    """Render service failures as ``ErrorResponse`` bodies."""

    logger.warning(
        user_message(exc),
        extra={"path": request.url.path, "code": exc.code},
    )
    return JSONResponse(
        status_code=_status_for(exc),
        content=error_response(exc).model_dump(mode="json"),
    )
