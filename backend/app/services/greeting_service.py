"""
Greetings API — Greeting Service (Route Table)
================================================

What:  Holds the static route table and resolves (method, path) pairs against it.
Why:   The table is the whole "business logic" of the service; keeping it out
       of the route handlers makes the lookup a pure, directly testable function.
How:   A read-only mapping keyed by (method, path). Matching is exact and
       case-sensitive on both parts; the query string is never part of `path`.

Route Table:
    GET /         → 200 "Hello world"
    GET /evening  → 200 "Good evening"
    anything else → 404 "Not Found" (raised as NotFoundError)
"""

import logging
from types import MappingProxyType
from typing import Mapping, Tuple

from app.exceptions import NotFoundError
from app.schemas.greeting import RouteResult

logger = logging.getLogger(__name__)

HELLO_WORLD = "Hello world"
GOOD_EVENING = "Good evening"
NOT_FOUND = "Not Found"

ROUTE_TABLE: Mapping[Tuple[str, str], RouteResult] = MappingProxyType({
    ("GET", "/"): RouteResult(status_code=200, body=HELLO_WORLD),
    ("GET", "/evening"): RouteResult(status_code=200, body=GOOD_EVENING),
})

NOT_FOUND_RESULT = RouteResult(status_code=404, body=NOT_FOUND)


class GreetingService:
    """
    Stateless lookup over ROUTE_TABLE.

    Responsibilities:
        - resolve(): exact (method, path) match or NotFoundError
        - fallback(): the catch-all 404 result
    """

    def __init__(self, table: Mapping[Tuple[str, str], RouteResult] = ROUTE_TABLE):
        self._table = table

    def resolve(self, method: str, path: str) -> RouteResult:
        """
        Look up the fixed response for a request.

        Args:
            method: HTTP method exactly as received (case-sensitive).
            path:   URL path without the query string.

        Raises:
            NotFoundError: when (method, path) is not in the table.
        """
        result = self._table.get((method, path))
        if result is None:
            logger.debug("No route for %s %s", method, path)
            raise NotFoundError(method=method, path=path)
        return result

    def fallback(self) -> RouteResult:
        """The catch-all response for any unmatched request."""
        return NOT_FOUND_RESULT


# Singleton instance
greeting_service = GreetingService()
