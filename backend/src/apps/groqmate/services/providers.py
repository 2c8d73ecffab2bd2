"""
Thin adapters over the Groq and Gemini SDKs.

Each function takes already-validated local values, calls the provider once
and returns plain text. Errors propagate to the route, which owns the
client-facing message.
"""

import base64
import os

from google import genai
from google.genai import types
from groq import AsyncGroq

from backend.src.apps.groqmate.models.models import ChatProfile


async def complete_chat(groq_client: AsyncGroq, profile: ChatProfile, message: str) -> str:
    messages_payload = [
        {
            "role": "system",
            "content": profile.system_prompt
        },
        {
            "role": "user",
            "content": message
        }
    ]

    completion = await groq_client.chat.completions.create(
        model=profile.model,
        messages=messages_payload,
        temperature=profile.temperature,
        max_completion_tokens=profile.max_tokens,
        top_p=profile.top_p,
    )
    return completion.choices[0].message.content or ""


async def describe_image(gemini_client: genai.Client, model: str, image_base64: str, mime_type: str, prompt: str) -> str:
    # Invalid base64 raises binascii.Error here, before any network call
    image_bytes = base64.b64decode(image_base64, validate=True)

    response = await gemini_client.aio.models.generate_content(
        model=model,
        contents=[
            types.Content(
                role="user",
                parts=[
                    types.Part.from_text(text=prompt),
                    types.Part.from_bytes(data=image_bytes, mime_type=mime_type),
                ],
            )
        ],
    )
    if response.text is None:
        raise ValueError("Gemini returned no text candidates")
    return response.text


async def transcribe_audio(groq_client: AsyncGroq, model: str, audio_path: str) -> str:
    with open(audio_path, "rb") as audio_file:
        transcription = await groq_client.audio.transcriptions.create(
            file=(os.path.basename(audio_path), audio_file),
            model=model,
            response_format="verbose_json",
        )

    return transcription.text
