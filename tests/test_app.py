import pytest
from environs import EnvError

from backend.src.apps.groqmate.config.config import Settings


@pytest.mark.asyncio
async def test_health(client):
    response = await client.get("/api/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


@pytest.mark.asyncio
async def test_cors_allows_any_origin(client):
    response = await client.options("/api/chat", headers={
        "Origin": "http://example.com",
        "Access-Control-Request-Method": "POST",
    })

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] in ("*", "http://example.com")


@pytest.mark.asyncio
async def test_oversized_json_body_is_rejected(client, groq_client):
    body = b'{"message": "' + b"a" * (10 * 1024 * 1024) + b'"}'

    response = await client.post("/api/chat", content=body, headers={"Content-Type": "application/json"})

    assert response.status_code == 413
    assert response.json() == {"error": "Request body too large"}
    groq_client.chat.completions.create.assert_not_awaited()


class TestSettings:

    def test_defaults(self, monkeypatch):
        monkeypatch.setenv("GROQ_API_KEY", "groq")
        monkeypatch.setenv("GEMINI_API_KEY", "gemini")
        for name in ("PORT", "CODER_MODEL", "GENERAL_MODEL", "VISION_MODEL", "STT_MODEL", "MAX_JSON_BODY_BYTES"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings.from_env()

        assert settings.port == 5000
        assert settings.coder_model == "qwen-2.5-coder-32b"
        assert settings.general_model == "meta-llama/llama-4-scout-17b-16e-instruct"
        assert settings.vision_model == "gemini-1.5-flash"
        assert settings.stt_model == "whisper-large-v3"
        assert settings.max_json_body_bytes == 10 * 1024 * 1024

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("GROQ_API_KEY", "groq")
        monkeypatch.setenv("GEMINI_API_KEY", "gemini")
        monkeypatch.setenv("PORT", "8080")
        monkeypatch.setenv("FFMPEG_TIMEOUT", "30")

        settings = Settings.from_env()

        assert settings.port == 8080
        assert settings.ffmpeg_timeout == 30.0

    def test_missing_credentials_fail(self, monkeypatch):
        monkeypatch.delenv("GROQ_API_KEY", raising=False)
        monkeypatch.setenv("GEMINI_API_KEY", "gemini")

        with pytest.raises(EnvError):
            Settings.from_env()

    def test_settings_are_immutable(self):
        settings = Settings(groq_api_key="a", gemini_api_key="b")
        with pytest.raises(AttributeError):
            settings.port = 1


async def stream_body(payload: bytes, chunk_size: int = 1024 * 1024):
    for start in range(0, len(payload), chunk_size):
        yield payload[start:start + chunk_size]


@pytest.mark.asyncio
async def test_oversized_chunked_json_body_is_rejected(client, groq_client):
    body = b'{"message": "' + b"a" * (11 * 1024 * 1024) + b'"}'

    response = await client.post("/api/chat", content=stream_body(body), headers={"Content-Type": "application/json"})

    assert response.status_code == 413
    assert response.json() == {"error": "Request body too large"}
    groq_client.chat.completions.create.assert_not_awaited()


@pytest.mark.asyncio
async def test_oversized_body_without_content_type_is_rejected(client, groq_client):
    body = b'{"message": "' + b"a" * (11 * 1024 * 1024) + b'"}'

    response = await client.post("/api/chat", content=stream_body(body))

    assert response.status_code == 413
    groq_client.chat.completions.create.assert_not_awaited()


@pytest.mark.asyncio
async def test_json_body_just_under_limit_is_accepted(client, groq_client):
    filler = 10 * 1024 * 1024 - len(b'{"message": ""}') - 16
    body = b'{"message": "' + b"a" * filler + b'"}'

    response = await client.post("/api/chat", content=stream_body(body), headers={"Content-Type": "application/json"})

    assert response.status_code == 200
    groq_client.chat.completions.create.assert_awaited_once()
