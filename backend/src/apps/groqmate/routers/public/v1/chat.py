import logging
from typing import Annotated

from fastapi import Depends
from fastapi.responses import JSONResponse
from groq import AsyncGroq

from backend.src.apps.groqmate.config.config import Settings, get_groq_client, get_settings
from backend.src.apps.groqmate.models.models import ChatReply, ChatRequest, ErrorReply
from backend.src.apps.groqmate.services.classifier import build_chat_profile
from backend.src.apps.groqmate.services.providers import complete_chat
from . import ChatRouter

logger = logging.getLogger(__name__)


@ChatRouter.post("", response_model=ChatReply, responses={500: {"model": ErrorReply}})
async def chat_endpoint(
        request: ChatRequest,
        groq_client: Annotated[AsyncGroq, Depends(get_groq_client)],
        settings: Annotated[Settings, Depends(get_settings)],
):
    """
    Answer a single chat message.
    Coding questions go to the coder model, everything else to the general one.
    """
    message = request.message or ""
    profile = build_chat_profile(message, request.language, settings)

    try:
        reply = await complete_chat(groq_client, profile, message)
    except Exception:
        logger.exception("Groq chat request failed (model=%s)", profile.model)
        return JSONResponse(status_code=500, content={"error": "Chat failed"})

    return {"reply": reply}
