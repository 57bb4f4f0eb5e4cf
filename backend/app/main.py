"""
Greetings API — FastAPI Application Factory
=============================================

What:  Creates and configures the FastAPI application instance.
Why:   Building the app is kept apart from running it (server.py), so tests
       can inject requests in-process without binding a port.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   Imported by server.py, by uvicorn (uvicorn app.main:app) and by tests.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────┐ ┌─────────────────┐                   │
    │  │ Req ID   │→│  Logging        │                   │
    │  └──────────┘ └─────────────────┘                   │
    │                                                     │
    │  Routes:                                            │
    │  ┌──────────────┐ ┌──────────────┐                  │
    │  │ GET /        │ │ GET /evening │                  │
    │  └──────────────┘ └──────────────┘                  │
    │                                                     │
    │  Exception Handlers:                                │
    │  ┌───────────────────────────────────────────────┐  │
    │  │ NotFound / HTTP 404 / HTTP 405 → 404 Not Found│  │
    │  │ Exception → 500                               │  │
    │  └───────────────────────────────────────────────┘  │
    └─────────────────────────────────────────────────────┘
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app import __version__
from app.config import settings
from app.exceptions import NotFoundError
from app.middleware.logging import RequestLoggingMiddleware
from app.middleware.request_id import (
    REQUEST_ID_HEADER,
    RequestIDMiddleware,
    request_id_var,
)
from app.routes import greetings
from app.routes.greetings import render
from app.services.greeting_service import greeting_service

logger = logging.getLogger(__name__)

# Framework-level "no match" statuses: unknown path (404) and a known path
# requested with another method (405). Both fall through to the catch-all.
UNMATCHED_STATUSES = frozenset({404, 405})


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure the root logger for the whole process.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s

    Safe to call more than once (force=True replaces earlier handlers).
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
        force=True,
    )

    # greetings.access already logs every request
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Configure logging on startup; nothing to release on shutdown."""
    setup_logging()
    logger.info("Greetings API %s starting up...", __version__)

    yield

    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Register global exception handlers.

    Handler hierarchy:
        NotFoundError                 → 404 "Not Found"
        HTTPException 404 / 405       → 404 "Not Found" (catch-all)
        HTTPException (other)         → FastAPI default rendering
        Exception (fallback)          → 500 generic JSON error
    """

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        """Service layer found no route for this (method, path)."""
        return render(greeting_service.fallback())

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        """Routing table had no match; answer with the catch-all response."""
        if exc.status_code in UNMATCHED_STATUSES:
            return render(greeting_service.fallback())
        return await http_exception_handler(request, exc)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """Stack trace is logged server-side only; the client gets a generic 500."""
        rid = request_id_var.get("")
        logger.error(
            "[%s] Unexpected error: %s",
            rid,
            str(exc),
            exc_info=True,
        )
        return JSONResponse(
            status_code=500,
            content={
                "error": "internal_server_error",
                "message": "An unexpected error occurred.",
                "request_id": rid,
            },
            # The request-ID middleware is bypassed when an exception escapes
            headers={REQUEST_ID_HEADER: rid} if rid else None,
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Only GET / and GET /evening are routable: the interactive docs, the
    OpenAPI schema and trailing-slash redirects are all switched off so that
    every other request reaches the catch-all 404.
    """
    app = FastAPI(
        title="Greetings API",
        version=__version__,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        redirect_slashes=False,
        lifespan=lifespan,
    )

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added = first to execute: RequestID → Logging → routes
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(greetings.router)

    return app


# uvicorn and the test client import `app.main:app`
app = create_app()
