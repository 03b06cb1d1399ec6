import json
from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from starlette.websockets import WebSocketDisconnect, WebSocketState

from prompt_assistant.config import Settings
from prompt_assistant.dependencies import get_chat_service
from prompt_assistant.documents import FileDocumentStore
from prompt_assistant.models import ChatReply, ChatRequest
from prompt_assistant.orchestrator import ChatOrchestrator
from prompt_assistant.websocket_handlers import websocket_endpoint


class DummyChatService:
    async def complete(self, request: ChatRequest, api_key: str) -> ChatReply:
        return ChatReply(content=f"LLM reply to: {request.messages[-1].content}")


@pytest.fixture
def note(documents_dir: Path) -> Path:
    path = documents_dir / "journal.md"
    path.write_text("hello", encoding="utf-8")
    return path


def get_test_client(app):
    app.dependency_overrides[get_chat_service] = lambda: DummyChatService()
    return TestClient(app)


def test_websocket_happy_path(app, note: Path) -> None:
    client = get_test_client(app)

    with client.websocket_connect("/ws") as websocket:
        websocket.send_text(json.dumps({"document": "journal.md"}))
        payload = json.loads(websocket.receive_text())

    assert payload == {
        "document": "journal.md",
        "appended": "\n\n---\n\n**Assistant:** LLM reply to: hello\n\n---\n\n",
    }


def test_websocket_summarize(app, note: Path) -> None:
    client = get_test_client(app)

    with client.websocket_connect("/ws") as websocket:
        websocket.send_text(json.dumps({"document": "journal.md", "action": "summarize"}))
        payload = json.loads(websocket.receive_text())

    assert payload["appended"].startswith("\n\nLLM reply to: Summarize")


def test_websocket_invalid_json(app) -> None:
    client = get_test_client(app)

    with client.websocket_connect("/ws") as websocket:
        websocket.send_text("not-json")
        response = websocket.receive_text()

    data = json.loads(response)
    assert data["error"] == "invalid_payload"


def test_websocket_prompt_requires_id(app, note: Path) -> None:
    client = get_test_client(app)

    with client.websocket_connect("/ws") as websocket:
        websocket.send_text(json.dumps({"document": "journal.md", "action": "prompt"}))
        response = websocket.receive_text()

    data = json.loads(response)
    assert data["error"] == "validation_error"


def test_websocket_reports_service_errors_and_stays_open(app, note: Path) -> None:
    client = get_test_client(app)

    with client.websocket_connect("/ws") as websocket:
        websocket.send_text(json.dumps({"document": "missing.md"}))
        error = json.loads(websocket.receive_text())
        websocket.send_text(json.dumps({"document": "journal.md"}))
        reply = json.loads(websocket.receive_text())

    assert error["error"] == "document_not_found"
    assert reply["document"] == "journal.md"


class _ClientAddress:
    def __init__(self, host: str = "127.0.0.1", port: int = 12345) -> None:
        self.host = host
        self.port = port


class DummyWebSocket:
    """Minimal WebSocket stub to reproduce disconnect behaviour."""

    def __init__(self, messages: list[str]) -> None:
        self._messages = messages
        self.accepted = False
        self.sent_text: list[str] = []
        self.close_called = False
        self.client = _ClientAddress()
        self.application_state = WebSocketState.CONNECTED

    async def accept(self) -> None:
        self.accepted = True

    async def receive_text(self) -> str:
        if not self._messages:
            raise WebSocketDisconnect()
        item = self._messages.pop(0)
        if item == "__disconnect__":
            raise WebSocketDisconnect()
        return item

    async def send_text(self, data: str) -> None:
        self.sent_text.append(data)

    async def close(self, code: int = 1000) -> None:
        self.close_called = True
        raise AssertionError("close should not be invoked when client already disconnected")


@pytest.mark.asyncio
async def test_websocket_skips_close_after_client_disconnect(
    settings: Settings, note: Path
) -> None:
    orchestrator = ChatOrchestrator(DummyChatService(), FileDocumentStore(settings.documents_dir))
    payload = json.dumps({"document": "journal.md"})
    websocket = DummyWebSocket([payload, "__disconnect__"])

    await websocket_endpoint(websocket, orchestrator, settings)

    assert websocket.accepted
    assert len(websocket.sent_text) == 1
    assert json.loads(websocket.sent_text[0])["document"] == "journal.md"
    assert websocket.close_called is False
