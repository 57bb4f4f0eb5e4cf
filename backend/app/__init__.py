"""
Greetings API — Application Package Initializer
=================================================

What: Marks the `app` directory as a Python package.
Why:  Enables module imports like `from app.config import settings`.
Who:  Used by uvicorn, pytest, and the `greetings-server` entry point.

Architecture Note:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services (Route Table)      │  ← Pure (method, path) lookup
    ├─────────────────────────────────────┤
    │          Schemas (Data)             │  ← Pydantic response contract
    └─────────────────────────────────────┘

    The application factory (main.py) builds the ASGI app without binding a
    socket; server.py is the only module that opens a listener.
"""

__version__ = "1.0.0"
