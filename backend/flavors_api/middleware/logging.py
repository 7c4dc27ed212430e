"""
Acme Flavors Backend: Request Logging Middleware
================================================

What:  One access-log line per HTTP request.
Why:   Development-style visibility into traffic: method, path, status and
       response time, with the request id for correlation.
How:   Times the downstream call and logs on the `flavors.access` logger.

Example line:
    2026-01-15T12:00:00 [INFO] flavors.access: GET /api/flavors 200 3.4ms [1a2b3c4d]

Request bodies are never logged.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from flavors_api.middleware.request_id import request_id_var

logger = logging.getLogger("flavors.access")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs method, path, status and duration of each request.

    Log level follows the status code:
        5xx → ERROR, 4xx → WARNING, everything else → INFO
    /health is skipped; probes would drown out real traffic.
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        start_time = time.perf_counter()
        path = request.url.path

        if path == "/health":
            return await call_next(request)

        response = await call_next(request)

        duration_ms = (time.perf_counter() - start_time) * 1000
        status = response.status_code
        if status >= 500:
            log_level = logging.ERROR
        elif status >= 400:
            log_level = logging.WARNING
        else:
            log_level = logging.INFO

        rid = request_id_var.get("")
        logger.log(
            log_level,
            "%s %s %d %.1fms [%s]",
            request.method,
            path,
            status,
            duration_ms,
            rid,
            extra={
                "request_id": rid,
                "method": request.method,
                "path": path,
                "status": status,
                "duration_ms": round(duration_ms, 2),
            },
        )

        return response
