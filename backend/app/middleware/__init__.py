# Middleware package init
"""
Greetings API — Middleware Package
====================================

Middleware Chain:
    Request → [Request ID] → [Logging] → Route Handler / catch-all 404

    Request ID runs first so the access log line carries the correlation id.
"""
