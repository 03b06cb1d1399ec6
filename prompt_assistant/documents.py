"""Read/append access to the documents a conversation lives in."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Protocol

from prompt_assistant.exceptions import DocumentNotFoundError, NoActiveDocumentError

logger = logging.getLogger(__name__)


class DocumentStore(Protocol):
    """Host storage the orchestrator reads from and appends to."""

    async def read(self, name: str) -> str:
        ...

    async def append(self, name: str, text: str) -> None:
        ...


class FileDocumentStore:
    """Documents stored as UTF-8 text files below a root directory.

    Appends run on the event loop thread, so concurrent invocations land in
    the document in the order they complete.
    """

    def __init__(self, root: Path) -> None:
        self._root = root.resolve()

    @property
    def root(self) -> Path:
        return self._root

    def resolve(self, name: str) -> Path:
        if not name or not name.strip():
            raise NoActiveDocumentError("No active document")

        path = (self._root / name).resolve()
        if not path.is_relative_to(self._root) or not path.is_file():
            raise DocumentNotFoundError(f"Document '{name}' not found")
        return path

    async def read(self, name: str) -> str:
        path = self.resolve(name)
        return await asyncio.to_thread(path.read_text, encoding="utf-8")

    async def append(self, name: str, text: str) -> None:
        path = self.resolve(name)
        # Stays on the loop thread so appends land in completion order.
        with path.open("a", encoding="utf-8") as handle:
            handle.write(text)
        logger.info("Document updated", extra={"document": name, "chars": len(text)})
