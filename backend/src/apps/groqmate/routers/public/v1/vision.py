import logging
import re
from typing import Annotated, Tuple

from fastapi import Depends
from fastapi.responses import JSONResponse
from google import genai

from backend.src.apps.groqmate.config.config import Settings, get_gemini_client, get_settings
from backend.src.apps.groqmate.models.models import ErrorReply, VisionReply, VisionRequest
from backend.src.apps.groqmate.services.providers import describe_image
from . import VisionRouter

logger = logging.getLogger(__name__)

DEFAULT_PROMPT = "Describe this image."
DEFAULT_MIME_TYPE = "image/jpeg"
MIME_PATTERN = re.compile(r"^data:(image/[a-z]+);base64")


def split_data_uri(data_uri: str) -> Tuple[str, str]:
    """Return (mime_type, base64 payload) for a "data:image/png;base64,<data>" string."""
    if "," in data_uri:
        payload = data_uri.split(",", 1)[1]
    else:
        payload = data_uri

    match = MIME_PATTERN.match(data_uri)
    mime_type = match.group(1) if match else DEFAULT_MIME_TYPE
    return mime_type, payload


@VisionRouter.post("", response_model=VisionReply, responses={400: {"model": ErrorReply}, 500: {"model": ErrorReply}})
async def vision_endpoint(
        request: VisionRequest,
        gemini_client: Annotated[genai.Client, Depends(get_gemini_client)],
        settings: Annotated[Settings, Depends(get_settings)],
):
    if not request.base64_image:
        return JSONResponse(status_code=400, content={"error": "No image provided."})

    try:
        mime_type, payload = split_data_uri(request.base64_image)
        reply = await describe_image(
            gemini_client,
            settings.vision_model,
            payload,
            mime_type,
            request.message or DEFAULT_PROMPT,
        )
    except Exception as e:
        logger.exception("Gemini Vision API error: %s", e)
        return JSONResponse(status_code=500, content={"error": "Gemini Vision processing failed"})

    return {"reply": reply}
