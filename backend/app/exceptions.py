"""
Greetings API — Custom Exception Hierarchy
============================================

What:  Application-specific exceptions for the request router.
Why:   The service layer signals "no matching route" without knowing about
       HTTP; the global handlers in main.py turn it into the 404 response.
How:   Each exception carries a message and an optional context dict.
       Context is logged server-side and never returned to the client.

Exception Hierarchy:
    GreetingsError (base)
    └── NotFoundError   → 404 Not Found
"""

from typing import Any, Dict, Optional


class GreetingsError(Exception):
    """
    Base exception for all Greetings API errors.

    Attributes:
        message:  Human-readable error description
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class NotFoundError(GreetingsError):
    """
    Raised when no route matches the request's method and path.

    HTTP:    404 Not Found, body "Not Found"

    This is the designed fallback branch of the router rather than a fault:
    every request that is not exactly GET / or GET /evening ends here.
    """

    def __init__(
        self,
        method: str,
        path: str,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = dict(context or {})
        ctx["method"] = method
        ctx["path"] = path
        super().__init__(message=f"No route for {method} {path}", context=ctx)
        self.method = method
        self.path = path
