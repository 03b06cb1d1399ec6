"""Dependency providers for the FastAPI application."""

import httpx
from fastapi import Depends
from starlette.requests import HTTPConnection

from prompt_assistant.config import Settings, get_settings
from prompt_assistant.documents import FileDocumentStore
from prompt_assistant.orchestrator import ChatOrchestrator
from prompt_assistant.services.chat_service import ChatService


async def get_http_client(connection: HTTPConnection) -> httpx.AsyncClient:
    """Retrieve the shared AsyncClient from application state."""

    return connection.app.state.http_client  # type: ignore[return-value]


async def get_chat_service(
    client: httpx.AsyncClient = Depends(get_http_client),
    settings: Settings = Depends(get_settings),
) -> ChatService:
    """Dependency provider for ChatService."""

    return ChatService(client, timeout=settings.chat_timeout)


async def get_document_store(
    settings: Settings = Depends(get_settings),
) -> FileDocumentStore:
    return FileDocumentStore(settings.documents_dir)


async def get_orchestrator(
    chat_service: ChatService = Depends(get_chat_service),
    store: FileDocumentStore = Depends(get_document_store),
) -> ChatOrchestrator:
    """Dependency provider for ChatOrchestrator."""

    return ChatOrchestrator(chat_service, store)
