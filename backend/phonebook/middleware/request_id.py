"""
Phonebook Backend: Request ID Middleware
===========================================

What:  Assigns a short correlation ID to each incoming request and echoes it
       in the X-Request-ID response header.
How:   Uses the client's X-Request-ID when present, otherwise generates one;
       stores it in a ContextVar for loggers and exception handlers.
When:  Outermost middleware, so every log line of a request can carry the ID.
"""

import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

# Coroutine-local storage for the current request ID
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Middleware that assigns a unique ID to each request for tracing.

    Behavior:
        1. Use the client's X-Request-ID header if sent
        2. Otherwise generate the first 8 characters of a UUID4
        3. Store in ContextVar and request.state
        4. Add to response headers
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = request.headers.get("X-Request-ID") or str(uuid.uuid4())[:8]

        request_id_var.set(rid)
        request.state.request_id = rid

        response = await call_next(request)
        response.headers["X-Request-ID"] = rid
        return response
