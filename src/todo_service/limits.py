"""Request body size limiting middleware."""

from __future__ import annotations

from fastapi import HTTPException
from starlette.datastructures import Headers
from starlette.responses import JSONResponse
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from .config import DEFAULT_MAX_BODY_BYTES
from .logging import get_logger

logger = get_logger(__name__, component="limits")

PAYLOAD_TOO_LARGE = 413


class BodySizeLimitMiddleware:
    """Reject request bodies larger than ``max_body_bytes`` with 413.

    A declared ``Content-Length`` above the limit is answered before the
    application runs. Bodies streamed without a usable length are counted as
    they are received and the chunk crossing the limit raises
    ``HTTPException(413)`` inside the handler reading it.
    """

    def __init__(self, app: ASGIApp, max_body_bytes: int = DEFAULT_MAX_BODY_BYTES) -> None:
        self.app = app
        self.max_body_bytes = max_body_bytes

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        declared = Headers(scope=scope).get("content-length")
        if declared is not None and declared.isdigit() and int(declared) > self.max_body_bytes:
            logger.debug(
                "rejecting %s %s: declared body of %s bytes exceeds %s",
                scope.get("method"),
                scope.get("path"),
                declared,
                self.max_body_bytes,
            )
            response = JSONResponse(
                {"detail": "Payload Too Large"}, status_code=PAYLOAD_TOO_LARGE
            )
            await response(scope, receive, send)
            return

        received = 0

        async def limited_receive() -> Message:
            nonlocal received
            message = await receive()
            if message["type"] == "http.request":
                received += len(message.get("body", b""))
                if received > self.max_body_bytes:
                    logger.debug(
                        "rejecting %s %s: streamed body exceeds %s bytes",
                        scope.get("method"),
                        scope.get("path"),
                        self.max_body_bytes,
                    )
                    raise HTTPException(
                        status_code=PAYLOAD_TOO_LARGE, detail="Payload Too Large"
                    )
            return message

        await self.app(scope, limited_receive, send)
