"""
Greetings API — Middleware Tests
==================================

What:  Request ID propagation, the access log line, and the 500 path.
"""

import logging

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from app.main import create_app
from app.middleware.logging import level_for_status


class TestRequestID:

    @pytest.mark.asyncio
    async def test_generated_when_absent(self, test_client):
        response = await test_client.get("/")

        assert len(response.headers["X-Request-ID"]) == 8

    @pytest.mark.asyncio
    async def test_client_value_echoed(self, test_client):
        response = await test_client.get("/evening", headers={"X-Request-ID": "abc123"})

        assert response.headers["X-Request-ID"] == "abc123"

    @pytest.mark.asyncio
    async def test_present_on_catch_all(self, test_client):
        response = await test_client.get("/nonexistent", headers={"X-Request-ID": "nf-1"})

        assert response.status_code == 404
        assert response.headers["X-Request-ID"] == "nf-1"


class TestAccessLog:

    @pytest.mark.asyncio
    async def test_success_logged_at_info(self, test_client, caplog):
        caplog.set_level(logging.INFO, logger="greetings.access")

        await test_client.get("/evening?key=value", headers={"X-Request-ID": "log-1"})

        records = [r for r in caplog.records if r.name == "greetings.access"]
        assert len(records) == 1
        assert records[0].levelno == logging.INFO
        assert records[0].path == "/evening"
        assert records[0].status == 200
        assert records[0].request_id == "log-1"

    @pytest.mark.asyncio
    async def test_catch_all_logged_at_warning(self, test_client, caplog):
        caplog.set_level(logging.INFO, logger="greetings.access")

        await test_client.post("/")

        records = [r for r in caplog.records if r.name == "greetings.access"]
        assert len(records) == 1
        assert records[0].levelno == logging.WARNING
        assert records[0].method == "POST"
        assert records[0].status == 404

    @pytest.mark.parametrize(
        "status,level",
        [(200, logging.INFO), (302, logging.INFO), (404, logging.WARNING), (500, logging.ERROR)],
    )
    def test_level_for_status(self, status, level):
        assert level_for_status(status) == level


@pytest_asyncio.fixture
async def failing_client():
    """
    Client for an app with one extra route that raises.

    raise_app_exceptions=False lets the client see the 500 that
    ServerErrorMiddleware sends before it re-raises.
    """
    app = create_app()

    async def explode():
        raise RuntimeError("kaboom")

    app.add_api_route("/explode", explode, methods=["GET"])
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


class TestUnexpectedError:

    @pytest.mark.asyncio
    async def test_returns_generic_500(self, failing_client):
        response = await failing_client.get("/explode", headers={"X-Request-ID": "rid-9"})

        assert response.status_code == 500
        assert response.json() == {
            "error": "internal_server_error",
            "message": "An unexpected error occurred.",
            "request_id": "rid-9",
        }

    @pytest.mark.asyncio
    async def test_request_id_header_on_500(self, failing_client):
        response = await failing_client.get("/explode", headers={"X-Request-ID": "rid-9"})

        assert response.headers["X-Request-ID"] == "rid-9"

    @pytest.mark.asyncio
    async def test_access_line_logged_at_error(self, failing_client, caplog):
        caplog.set_level(logging.INFO, logger="greetings.access")

        await failing_client.get("/explode", headers={"X-Request-ID": "rid-9"})

        records = [r for r in caplog.records if r.name == "greetings.access"]
        assert len(records) == 1
        assert records[0].levelno == logging.ERROR
        assert records[0].status == 500
        assert records[0].path == "/explode"
        assert records[0].request_id == "rid-9"
