import re
from typing import Optional

from backend.src.apps.groqmate.config.config import Settings
from backend.src.apps.groqmate.models.models import ChatProfile

CODING_PATTERN = re.compile(
    r"code|function|loop|program|syntax|bug|error|compile|algorithm|write"
    r"|java|python|c\+\+|html|css|javascript|react",
    re.IGNORECASE,
)

TOP_P = 0.95


def is_coding_query(message: Optional[str]) -> bool:
    if not message:
        return False
    return CODING_PATTERN.search(message) is not None


def build_chat_profile(message: Optional[str], language: Optional[str], settings: Settings) -> ChatProfile:
    """
    Pick the coder model for programming questions and the general
    multilingual model for everything else.
    """
    language = language or ""

    if is_coding_query(message):
        return ChatProfile(
            model=settings.coder_model,
            temperature=0.6,
            max_tokens=8192,
            top_p=TOP_P,
            system_prompt=f"You are a helpful AI coding assistant. Respond in this language: {language}.",
        )

    return ChatProfile(
        model=settings.general_model,
        temperature=1.0,
        max_tokens=1024,
        top_p=TOP_P,
        system_prompt=f"You are a helpful multilingual AI assistant. Respond in this language: {language}.",
    )
