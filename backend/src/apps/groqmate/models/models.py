from dataclasses import dataclass
from typing import Optional

from pydantic import BaseModel, Field


class ChatRequest(BaseModel):
    message: Optional[str] = ""
    language: Optional[str] = ""


class ChatReply(BaseModel):
    reply: str


class VisionRequest(BaseModel):
    base64_image: Optional[str] = Field(default=None, alias="base64Image")  # data:<mime>;base64,<payload>
    message: Optional[str] = None


class VisionReply(BaseModel):
    reply: str


class TranscriptionReply(BaseModel):
    text: str


class ErrorReply(BaseModel):
    error: str


@dataclass(frozen=True)
class ChatProfile:
    """Model and sampling parameters picked for one chat message."""
    model: str
    temperature: float
    max_tokens: int
    top_p: float
    system_prompt: str
