"""FastAPI application factory for the todo service."""

from __future__ import annotations

from fastapi import FastAPI, Request, Response
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import Settings, load_settings
from .limits import BodySizeLimitMiddleware
from .logging import get_logger
from .router import create_todo_router
from .store import TodoStore

logger = get_logger(__name__, component="main")


async def _decode_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.debug(f"rejecting {request.method} {request.url.path}: {exc.errors()}")
    return JSONResponse(status_code=400, content={"detail": jsonable_encoder(exc.errors())})


def create_app(settings: Settings | None = None, store: TodoStore | None = None) -> FastAPI:
    """Build the service.

    One ``TodoStore`` is created per application unless a store is passed in,
    and it is shared by every request for the lifetime of the app.
    """
    settings = settings or load_settings()
    store = store if store is not None else TodoStore()

    app = FastAPI(title="Todo Service", version="0.1.0")
    app.state.settings = settings
    app.state.store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(BodySizeLimitMiddleware, max_body_bytes=settings.max_body_bytes)
    app.add_exception_handler(RequestValidationError, _decode_error_handler)

    @app.get("/healthz")
    async def health_check():
        return Response(status_code=200)

    @app.get("/health")
    async def health_check_alt():
        return {
            "status": "healthy",
            "service": "todo-service",
            "tasks": await store.count(),
        }

    app.include_router(create_todo_router(store), prefix=settings.api_prefix)

    logger.info(
        f"todo service ready (prefix={settings.api_prefix or '/'}, "
        f"max_body_bytes={settings.max_body_bytes})"
    )
    return app
