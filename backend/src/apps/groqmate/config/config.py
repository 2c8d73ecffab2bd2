import logging
from dataclasses import dataclass
from functools import lru_cache

from environs import Env
from google import genai
from google.genai import types
from groq import AsyncGroq

env = Env()
env.read_env()


@dataclass(frozen=True)
class Settings:
    groq_api_key: str
    gemini_api_key: str
    host: str = "0.0.0.0"
    port: int = 5000

    coder_model: str = "qwen-2.5-coder-32b"
    general_model: str = "meta-llama/llama-4-scout-17b-16e-instruct"
    vision_model: str = "gemini-1.5-flash"
    stt_model: str = "whisper-large-v3"

    upload_dir: str = "uploads"
    public_dir: str = "public"
    max_json_body_bytes: int = 10 * 1024 * 1024

    # seconds
    provider_timeout: float = 60.0
    ffmpeg_binary: str = "ffmpeg"
    ffmpeg_timeout: float = 120.0

    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        """Read every setting once; missing API keys fail at startup."""
        return cls(
            groq_api_key=env.str("GROQ_API_KEY"),
            gemini_api_key=env.str("GEMINI_API_KEY"),
            host=env.str("HOST", cls.host),
            port=env.int("PORT", cls.port),
            coder_model=env.str("CODER_MODEL", cls.coder_model),
            general_model=env.str("GENERAL_MODEL", cls.general_model),
            vision_model=env.str("VISION_MODEL", cls.vision_model),
            stt_model=env.str("STT_MODEL", cls.stt_model),
            upload_dir=env.str("UPLOAD_DIR", cls.upload_dir),
            public_dir=env.str("PUBLIC_DIR", cls.public_dir),
            max_json_body_bytes=env.int("MAX_JSON_BODY_BYTES", cls.max_json_body_bytes),
            provider_timeout=env.float("PROVIDER_TIMEOUT", cls.provider_timeout),
            ffmpeg_binary=env.str("FFMPEG_BINARY", cls.ffmpeg_binary),
            ffmpeg_timeout=env.float("FFMPEG_TIMEOUT", cls.ffmpeg_timeout),
            log_level=env.str("LOG_LEVEL", cls.log_level),
        )


@lru_cache
def get_settings() -> Settings:
    return Settings.from_env()


@lru_cache
def get_groq_client() -> AsyncGroq:
    settings = get_settings()
    return AsyncGroq(api_key=settings.groq_api_key, timeout=settings.provider_timeout)


@lru_cache
def get_gemini_client() -> genai.Client:
    settings = get_settings()
    # HttpOptions.timeout is in milliseconds
    return genai.Client(
        api_key=settings.gemini_api_key,
        http_options=types.HttpOptions(timeout=int(settings.provider_timeout * 1000)),
    )


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
