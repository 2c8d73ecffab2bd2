import logging

from fastapi.responses import JSONResponse
from starlette.datastructures import Headers
from starlette.types import ASGIApp, Message, Receive, Scope, Send

logger = logging.getLogger(__name__)

BODY_METHODS = {"POST", "PUT", "PATCH", "DELETE"}
FORM_CONTENT_TYPES = {"multipart/form-data", "application/x-www-form-urlencoded"}


class JSONBodyLimitMiddleware:
    """
    Reject request bodies FastAPI would parse as JSON once more than
    max_bytes have been received.

    The body is counted as it arrives, so chunked requests without a
    Content-Length are limited too. Form uploads are passed through untouched.
    """

    def __init__(self, app: ASGIApp, max_bytes: int):
        self.app = app
        self.max_bytes = max_bytes

    def applies_to(self, scope: Scope) -> bool:
        if scope["type"] != "http" or scope["method"] not in BODY_METHODS:
            return False
        content_type = Headers(scope=scope).get("content-type", "")
        return content_type.split(";", 1)[0].strip().lower() not in FORM_CONTENT_TYPES

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if not self.applies_to(scope):
            await self.app(scope, receive, send)
            return

        content_length = Headers(scope=scope).get("content-length", "")
        if content_length.isdigit() and int(content_length) > self.max_bytes:
            await self.reject(scope, receive, send, int(content_length))
            return

        messages = []
        received = 0
        more_body = True
        while more_body:
            message = await receive()
            messages.append(message)
            if message["type"] != "http.request":
                break
            received += len(message.get("body", b""))
            if received > self.max_bytes:
                await self.reject(scope, receive, send, received)
                return
            more_body = message.get("more_body", False)

        async def replay() -> Message:
            if messages:
                return messages.pop(0)
            return await receive()

        await self.app(scope, replay, send)

    async def reject(self, scope: Scope, receive: Receive, send: Send, size: int) -> None:
        logger.warning("Rejected %s %s: body of at least %s bytes", scope["method"], scope["path"], size)
        response = JSONResponse(status_code=413, content={"error": "Request body too large"})
        await response(scope, receive, send)
