"""
Greetings API — Pydantic Response Schemas
===========================================

What:  The response contract produced by the route table.
Why:   Keeps the (status, body) pair a typed, immutable value that the
       service layer returns and the route layer renders.
"""

from pydantic import BaseModel, Field


class RouteResult(BaseModel):
    """
    What:  Outcome of resolving a (method, path) pair.
    Who:   Returned by GreetingService.resolve() and GreetingService.fallback().

    Frozen so that entries in the static route table can be shared across
    requests without any chance of mutation.
    """
    status_code: int = Field(description="HTTP status code (200 or 404)")
    body: str = Field(description="Plain-text response body")

    model_config = {"frozen": True}
