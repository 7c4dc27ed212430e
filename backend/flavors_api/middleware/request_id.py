"""
Acme Flavors Backend: Request ID Middleware
===========================================

What:  Tags each incoming request with a short id and echoes it back.
Why:   Lets an operator match an error body ("request_id") to the log lines
       written while that request was handled.
How:   Reuses the client's X-Request-ID header when present, otherwise
       generates one; stores it in a ContextVar and in request.state.
"""

import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

# Coroutine-local: concurrent requests on one thread each see their own id
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Assigns a correlation id to each request and adds X-Request-ID to the response."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        # 8 hex chars are enough to correlate within one process's logs
        rid = request.headers.get("X-Request-ID", uuid.uuid4().hex[:8])

        request_id_var.set(rid)
        request.state.request_id = rid

        response = await call_next(request)
        response.headers["X-Request-ID"] = rid
        return response
