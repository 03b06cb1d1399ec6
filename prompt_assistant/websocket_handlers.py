"""WebSocket handlers for the application."""

from __future__ import annotations

import asyncio
import logging
from contextlib import suppress
from typing import Annotated

from fastapi import Depends, WebSocket, WebSocketDisconnect, status
from starlette.websockets import WebSocketState

from prompt_assistant.config import Settings, get_settings
from prompt_assistant.dependencies import get_orchestrator
from prompt_assistant.errors import user_message
from prompt_assistant.exceptions import ServiceError
from prompt_assistant.models import ChatCommandIn, ErrorResponse, ReplyOut
from prompt_assistant.orchestrator import ChatOrchestrator

logger = logging.getLogger(__name__)


async def websocket_endpoint(
    websocket: WebSocket,
    orchestrator: Annotated[ChatOrchestrator, Depends(get_orchestrator)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> None:
    """Main WebSocket workflow: command → document chat → appended text."""

    await websocket.accept()
    should_close = True
    logger.info(
        "WebSocket connection accepted",
        extra={"client": _client_repr(websocket)},
    )

    try:
        while True:
            try:
                message = await asyncio.wait_for(
                    websocket.receive_text(),
                    timeout=settings.ws_inactivity_timeout,
                )
            except asyncio.TimeoutError:
                logger.info(
                    "WebSocket inactive; closing",
                    extra={"client": _client_repr(websocket)},
                )
                await websocket.close(code=status.WS_1000_NORMAL_CLOSURE)
                should_close = False
                break
            except WebSocketDisconnect:
                logger.info(
                    "WebSocket client disconnected",
                    extra={"client": _client_repr(websocket)},
                )
                should_close = False
                break

            try:
                command = ChatCommandIn.model_validate_json(message)
            except ValueError:
                await _send_error(
                    websocket,
                    ErrorResponse(error="invalid_payload", detail="Invalid JSON payload."),
                )
                continue

            if command.action == "prompt" and not command.prompt_id:
                await _send_error(
                    websocket,
                    ErrorResponse(
                        error="validation_error",
                        detail="prompt_id is required for the prompt action.",
                    ),
                )
                continue

            try:
                appended = await _run_command(orchestrator, command, settings)
            except ServiceError as exc:
                logger.warning(
                    user_message(exc),
                    extra={"client": _client_repr(websocket), "code": exc.code},
                )
                category = getattr(exc, "category", None)
                await _send_error(
                    websocket,
                    ErrorResponse(error=exc.code, detail=exc.message, category=category),
                )
                continue

            reply = ReplyOut(document=command.document, appended=appended)
            await websocket.send_text(reply.model_dump_json())
            logger.info(
                "Reply delivered",
                extra={
                    "client": _client_repr(websocket),
                    "document": command.document,
                    "chars": len(appended),
                },
            )
    finally:
        if should_close and websocket.application_state == WebSocketState.CONNECTED:
            with suppress(RuntimeError, WebSocketDisconnect):
                await websocket.close()
        logger.info(
            "WebSocket connection closed",
            extra={"client": _client_repr(websocket)},
        )


async def _run_command(
    orchestrator: ChatOrchestrator, command: ChatCommandIn, settings: Settings
) -> str:
    if command.action == "summarize":
        return await orchestrator.summarize(command.document, settings)
    if command.action == "prompt":
        return await orchestrator.run_custom_prompt(
            command.document, command.prompt_id or "", settings
        )
    return await orchestrator.respond(command.document, settings)


async def _send_error(websocket: WebSocket, error: ErrorResponse) -> None:
    """Send a structured error frame."""

    await websocket.send_text(error.model_dump_json())


def _client_repr(websocket: WebSocket) -> str:
    """Render the remote client for logging purposes."""

    client = websocket.client
    if client is None:
        return "unknown"
    return f"{client.host}:{client.port}"
