"""
Greetings API — Test Configuration (conftest.py)
==================================================

What:  Shared pytest fixtures for the entire test suite.
Why:   Endpoint tests inject requests into the ASGI app in-process, the same
       way they would against a live server but without binding a port.

Fixtures:
    ├── test_client: HTTPX AsyncClient over ASGITransport
    └── clean_env:   Removes PORT/HOST/LOG_LEVEL so Settings sees defaults
"""

import os

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport


# ══════════════════════════════════════════════════════════════════════════
# Environment Setup
# ══════════════════════════════════════════════════════════════════════════

# Applied before any app import so the settings singleton picks it up
os.environ["LOG_LEVEL"] = "WARNING"


# ══════════════════════════════════════════════════════════════════════════
# Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def clean_env(monkeypatch):
    """
    Strips the server variables from the environment for one test.

    Settings tests build their own Settings(_env_file=None) instance, so a
    developer's shell or .env file cannot leak into the assertions.
    """
    for name in ("PORT", "HOST", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest_asyncio.fixture
async def test_client():
    """
    Provides an async HTTP test client for endpoint testing.

    Usage:
        async def test_root(test_client):
            response = await test_client.get("/")
            assert response.status_code == 200
    """
    from app.main import app
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
