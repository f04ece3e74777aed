"""
Sample API: Access Log Middleware
===================================

What:  One access-log record per HTTP request on the `sample_api.access` logger.
How:   After the downstream app answers, the record is built from the matched
       route template (e.g. `/agents/{agent_id}`), so every request against
       one endpoint aggregates under one key. The concrete agent id, if any,
       is attached separately.

Record fields (passed as `extra`):
    request_id, method, route, path, status, duration_ms, agent_id

Log levels follow the status class:
    5xx → ERROR, 4xx → WARNING, everything else → INFO

Request bodies are never logged. /health is not logged at all.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from sample_api.middleware.request_id import request_id_var

logger = logging.getLogger("sample_api.access")

UNLOGGED_PATHS = frozenset({"/health"})


def level_for_status(status: int) -> int:
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs each request with its route, outcome and latency."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in UNLOGGED_PATHS:
            return await call_next(request)

        started = time.perf_counter()
        response = await call_next(request)
        duration_ms = round((time.perf_counter() - started) * 1000, 2)

        # The router records the matched route in the scope; unmatched paths keep the raw path
        route = getattr(request.scope.get("route"), "path", request.url.path)
        agent_id = request.scope.get("path_params", {}).get("agent_id")

        logger.log(
            level_for_status(response.status_code),
            "%s %s -> %d (%.1fms) rid=%s",
            request.method,
            route,
            response.status_code,
            duration_ms,
            request_id_var.get(""),
            extra={
                "request_id": request_id_var.get(""),
                "method": request.method,
                "route": route,
                "path": request.url.path,
                "status": response.status_code,
                "duration_ms": duration_ms,
                "agent_id": agent_id,
            },
        )
        return response
