"""
Phonebook Backend: Request Logging Middleware
================================================

What:  One access log line per HTTP request.
How:   Times the downstream call and logs method, path, status, response
       length and duration on the `phonebook.access` logger.

Example line:
    POST /api/persons 200 61b 4.2ms [a1b2c3d4] from 127.0.0.1

Request bodies are not logged: they carry names and phone numbers.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from phonebook.middleware.request_id import request_id_var

logger = logging.getLogger("phonebook.access")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs structured information about each HTTP request and response.

    Level by status:
        5xx → ERROR, 4xx → WARNING, everything else → INFO
    Health checks are skipped; container probes hit them every few seconds.
    """

    SKIPPED_PATHS = {"/health"}

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        path = request.url.path
        if path in self.SKIPPED_PATHS:
            return await call_next(request)

        start_time = time.perf_counter()
        client_ip = getattr(request.client, "host", "unknown") if request.client else "unknown"
        method = request.method
        rid = request_id_var.get("")

        response = await call_next(request)

        duration_ms = (time.perf_counter() - start_time) * 1000
        status = response.status_code
        content_length = response.headers.get("content-length", "-")

        if status >= 500:
            log_level = logging.ERROR
        elif status >= 400:
            log_level = logging.WARNING
        else:
            log_level = logging.INFO

        logger.log(
            log_level,
            "%s %s %d %sb %.1fms [%s] from %s",
            method,
            path,
            status,
            content_length,
            duration_ms,
            rid,
            client_ip,
            extra={
                "request_id": rid,
                "method": method,
                "path": path,
                "status": status,
                "content_length": content_length,
                "duration_ms": round(duration_ms, 2),
                "client_ip": client_ip,
            },
        )

        return response
