"""Application factory and top-level wiring for the Time Words service.

This module brings together configuration, middleware, the API router and
error handling. ``create_app`` builds a fresh FastAPI instance each time it is
called so tests can construct isolated apps with their own settings.
"""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from .core.config import AppSettings, get_settings
from .core.errors import http_exception_handler, invalid_input_handler, validation_exception_handler
from .middlewares import RequestIdMiddleware
from .routers import api_timewords as api_timewords_router
from .services.timewords import InvalidInput


def create_app(settings: AppSettings | None = None) -> FastAPI:
    settings = settings or get_settings()
    app = FastAPI(title=settings.APP_NAME, debug=settings.APP_DEBUG)
    app.state.settings = settings

    # ---------- Middleware ----------
    # Starlette runs the last-added middleware first, so the request id is set
    # before CORS handling and available to every log line below it.
    if settings.ALLOWED_ORIGINS:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.ALLOWED_ORIGINS,
            allow_methods=["GET", "POST"],
            allow_headers=["*"],
            expose_headers=["X-Request-ID"],
        )
    app.add_middleware(RequestIdMiddleware)

    # ---------- Routers ----------
    app.include_router(api_timewords_router.router)

    @app.get("/health")
    async def health() -> dict[str, bool]:
        return {"ok": True}

    # ---------- Exception handling ----------
    app.add_exception_handler(InvalidInput, invalid_input_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    return app


__all__ = ["create_app"]
