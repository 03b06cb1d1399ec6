import asyncio
from pathlib import Path

import pytest

from prompt_assistant.documents import FileDocumentStore
from prompt_assistant.exceptions import DocumentNotFoundError, NoActiveDocumentError


@pytest.mark.asyncio
async def test_read_and_append(documents_dir: Path) -> None:
    (documents_dir / "daily").mkdir()
    path = documents_dir / "daily" / "today.md"
    path.write_text("start", encoding="utf-8")
    store = FileDocumentStore(documents_dir)

    await store.append("daily/today.md", " + more")

    assert await store.read("daily/today.md") == "start + more"


def test_rejects_paths_outside_root(documents_dir: Path, tmp_path: Path) -> None:
    (tmp_path / "secret.md").write_text("x", encoding="utf-8")
    store = FileDocumentStore(documents_dir)

    with pytest.raises(DocumentNotFoundError):
        store.resolve("../secret.md")


def test_rejects_blank_name(documents_dir: Path) -> None:
    with pytest.raises(NoActiveDocumentError):
        FileDocumentStore(documents_dir).resolve(" ")


@pytest.mark.asyncio
async def test_appends_land_in_call_order(documents_dir: Path) -> None:
    (documents_dir / "note.md").write_text("", encoding="utf-8")
    store = FileDocumentStore(documents_dir)

    await asyncio.gather(*(store.append("note.md", f"[{i}]") for i in range(5)))

    assert await store.read("note.md") == "[0][1][2][3][4]"
