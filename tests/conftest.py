"""
Pytest fixtures for the relay API.

Provider clients are replaced with fakes through FastAPI dependency
overrides, so no test talks to Groq or Gemini.
"""

import os
from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

os.environ.setdefault("GROQ_API_KEY", "test-groq-key")
os.environ.setdefault("GEMINI_API_KEY", "test-gemini-key")

from backend.src.apps.groqmate.config.config import Settings, get_gemini_client, get_groq_client, get_settings
from backend.src.apps.groqmate.main import app


def make_groq_client(reply: str = "Hello from Groq", transcript: str = "hello world"):
    completion = SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=reply))])
    return SimpleNamespace(
        chat=SimpleNamespace(completions=SimpleNamespace(create=AsyncMock(return_value=completion))),
        audio=SimpleNamespace(transcriptions=SimpleNamespace(create=AsyncMock(return_value=SimpleNamespace(text=transcript)))),
    )


def make_gemini_client(reply: str = "A small grey cat"):
    return SimpleNamespace(
        aio=SimpleNamespace(models=SimpleNamespace(generate_content=AsyncMock(return_value=SimpleNamespace(text=reply))))
    )


@pytest.fixture
def settings(tmp_path):
    return Settings(
        groq_api_key="test-groq-key",
        gemini_api_key="test-gemini-key",
        upload_dir=str(tmp_path / "uploads"),
    )


@pytest.fixture
def groq_client():
    return make_groq_client()


@pytest.fixture
def gemini_client():
    return make_gemini_client()


@pytest_asyncio.fixture
async def client(settings, groq_client, gemini_client):
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_groq_client] = lambda: groq_client
    app.dependency_overrides[get_gemini_client] = lambda: gemini_client

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as http_client:
        yield http_client

    app.dependency_overrides.clear()
