"""
Greetings API — Request Logging Middleware
============================================

What:  One access log line per HTTP request.
Why:   The route table is static, so the access log is the only record of
       what clients asked for and which requests fell through to the 404.
How:   Times the downstream call and logs method, path, status, duration,
       request id and client address on the `greetings.access` logger.

Log levels:
    5xx → ERROR, 4xx → WARNING, everything else → INFO
    (so every catch-all 404 shows up as a WARNING)
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from app.middleware.request_id import request_id_var

logger = logging.getLogger("greetings.access")


def level_for_status(status: int) -> int:
    """Map an HTTP status code to the log level of its access line."""
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs method, path, status and duration for each request.

    Must run inside RequestIDMiddleware so that request_id_var is set.
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        start_time = time.perf_counter()

        # request.client is None under in-process test transports
        client_ip = request.client.host if request.client else "unknown"
        method = request.method
        path = request.url.path
        rid = request_id_var.get("")

        try:
            response = await call_next(request)
        except Exception:
            # ServerErrorMiddleware renders the 500 outside this layer
            self._log_access(method, path, 500, start_time, rid, client_ip)
            raise

        self._log_access(method, path, response.status_code, start_time, rid, client_ip)
        return response

    @staticmethod
    def _log_access(
        method: str,
        path: str,
        status: int,
        start_time: float,
        rid: str,
        client_ip: str,
    ) -> None:
        duration_ms = (time.perf_counter() - start_time) * 1000

        logger.log(
            level_for_status(status),
            "%s %s %d %.1fms [%s] from %s",
            method,
            path,
            status,
            duration_ms,
            rid,
            client_ip,
            extra={
                "request_id": rid,
                "method": method,
                "path": path,
                "status": status,
                "duration_ms": round(duration_ms, 2),
                "client_ip": client_ip,
            },
        )
