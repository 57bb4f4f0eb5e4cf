"""
Greetings API — Greeting Route Handlers
=========================================

What:  Handles GET / and GET /evening.
Why:   These are the only two routes the service exposes; everything else is
       answered by the catch-all 404 handler registered in main.py.
How:   Each handler hands the request's method and path to GreetingService
       and renders the fixed RouteResult as a text body.

Content-Type:
    Bodies are sent as text/html; charset=utf-8, the same as a plain string
    body from a typical web framework's send().
"""

import logging

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from app.schemas.greeting import RouteResult
from app.services.greeting_service import greeting_service

logger = logging.getLogger(__name__)

# ── Router Configuration ──────────────────────────────────────────────────
router = APIRouter(tags=["Greetings"], redirect_slashes=False)


def render(result: RouteResult) -> HTMLResponse:
    """Turn a RouteResult into the HTTP response sent to the client."""
    logger.debug("Rendering %d response: %r", result.status_code, result.body)
    return HTMLResponse(content=result.body, status_code=result.status_code)


@router.get("/", response_class=HTMLResponse, summary="Hello world")
async def hello_world(request: Request) -> HTMLResponse:
    return render(greeting_service.resolve(request.method, request.url.path))


@router.get("/evening", response_class=HTMLResponse, summary="Good evening")
async def good_evening(request: Request) -> HTMLResponse:
    return render(greeting_service.resolve(request.method, request.url.path))
