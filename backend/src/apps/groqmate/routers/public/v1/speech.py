import logging
from typing import Annotated

from fastapi import Depends, Request
from fastapi.responses import JSONResponse
from groq import AsyncGroq
from starlette.datastructures import UploadFile

from backend.src.apps.groqmate.config.config import Settings, get_groq_client, get_settings
from backend.src.apps.groqmate.models.models import ErrorReply, TranscriptionReply
from backend.src.apps.groqmate.services.providers import transcribe_audio
from backend.src.apps.groqmate.services.transcoding import (
    TranscodingError,
    converted_path_for,
    new_upload_path,
    save_upload,
    scratch_files,
    transcode_to_webm,
)
from . import SpeechRouter

logger = logging.getLogger(__name__)


@SpeechRouter.post("", response_model=TranscriptionReply,
                   responses={400: {"model": ErrorReply}, 500: {"model": ErrorReply}})
async def speech_to_text_endpoint(
        request: Request,
        groq_client: Annotated[AsyncGroq, Depends(get_groq_client)],
        settings: Annotated[Settings, Depends(get_settings)],
):
    """
    Transcribe the recording sent as the multipart field "audio".
    The upload is converted to webm with ffmpeg before it is sent to Whisper;
    both files are removed before the response goes out.
    """
    async with request.form() as form:
        # A plain text field named "audio" counts as no file
        audio = form.get("audio")
        if not isinstance(audio, UploadFile):
            return JSONResponse(status_code=400, content={"error": "No audio file provided."})

        try:
            audio_path = new_upload_path(settings.upload_dir)
            converted_path = converted_path_for(audio_path)

            with scratch_files(audio_path, converted_path):
                await save_upload(audio, audio_path)
                await transcode_to_webm(
                    audio_path,
                    converted_path,
                    ffmpeg_binary=settings.ffmpeg_binary,
                    timeout=settings.ffmpeg_timeout,
                )
                text = await transcribe_audio(groq_client, settings.stt_model, converted_path)

        except TranscodingError as e:
            logger.error("STT conversion error: %s (stderr: %s)", e, e.stderr)
            return JSONResponse(status_code=500, content={"error": "Transcription failed"})
        except Exception:
            logger.exception("STT error")
            return JSONResponse(status_code=500, content={"error": "Transcription failed"})

    return {"text": text}
