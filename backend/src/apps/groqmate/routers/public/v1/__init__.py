from fastapi import APIRouter

ChatRouter = APIRouter(prefix="/api/chat", tags=["Chat"])
VisionRouter = APIRouter(prefix="/api/vision", tags=["Vision"])
SpeechRouter = APIRouter(prefix="/api/stt", tags=["Speech"])
HealthRouter = APIRouter(prefix="/api/health", tags=["Health"])

from .chat import *
from .vision import *
from .speech import *
from .health import *
