"""Shared pytest fixtures."""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

os.environ.setdefault("OPENROUTER_API_KEY", "test-key")
os.environ.setdefault("ENVIRONMENT", "test")

from prompt_assistant.config import Settings, get_settings  # noqa: E402
from prompt_assistant.main import create_app  # noqa: E402


@pytest.fixture(autouse=True)
def configure_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure required environment variables are present during tests."""

    monkeypatch.setenv("OPENROUTER_API_KEY", "test-key")
    monkeypatch.setenv("ENVIRONMENT", "test")
    monkeypatch.delenv("SETTINGS_FILE", raising=False)
    get_settings.cache_clear()


@pytest.fixture
def documents_dir(tmp_path: Path) -> Path:
    path = tmp_path / "notes"
    path.mkdir()
    return path


@pytest.fixture
def settings(documents_dir: Path) -> Settings:
    return Settings(DOCUMENTS_DIR=documents_dir)


@pytest.fixture
def app(settings: Settings):
    app = create_app()
    app.dependency_overrides[get_settings] = lambda: settings
    return app
