import logging
import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.staticfiles import StaticFiles

from backend.src.apps.groqmate.config.config import configure_logging, get_settings
from backend.src.apps.groqmate.middleware import JSONBodyLimitMiddleware
from backend.src.apps.groqmate.routers import ChatRouter, VisionRouter, SpeechRouter, HealthRouter

logger = logging.getLogger(__name__)

settings = get_settings()
configure_logging(settings.log_level)

app = FastAPI(title="GroqMate API")

app.add_middleware(JSONBodyLimitMiddleware, max_bytes=settings.max_json_body_bytes)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(ChatRouter)
app.include_router(VisionRouter)
app.include_router(SpeechRouter)
app.include_router(HealthRouter)

# Static files go after the API routers
if os.path.isdir(settings.public_dir):
    app.mount("/", StaticFiles(directory=settings.public_dir, html=True), name="public")


def run():
    import uvicorn

    logger.info("GroqMate API running at http://%s:%s", settings.host, settings.port)
    uvicorn.run("backend.src.apps.groqmate.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
