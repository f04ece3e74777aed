"""
Sample API: Request ID Middleware
===================================

What:  Gives every request a correlation ID and returns it in X-Request-ID.
How:   A client-supplied X-Request-ID is reused when it is a short token of
       letters, digits, dots, dashes or underscores; anything else is replaced
       by eight hex characters of a fresh UUID. The ID is stored in a
       ContextVar (for loggers and exception handlers) and on request.state.
"""

import re
import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

REQUEST_ID_HEADER = "X-Request-ID"

_ACCEPTED_ID = re.compile(r"^[A-Za-z0-9._-]{1,64}$")

# Coroutine-local: concurrent requests on one event loop each see their own ID
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


def resolve_request_id(supplied: str | None) -> str:
    """Return the client's ID if it is a safe token, otherwise a new one."""
    if supplied and _ACCEPTED_ID.match(supplied):
        return supplied
    return uuid.uuid4().hex[:8]


class RequestIDMiddleware(BaseHTTPMiddleware):

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        request_id = resolve_request_id(request.headers.get(REQUEST_ID_HEADER))
        request_id_var.set(request_id)
        request.state.request_id = request_id

        response = await call_next(request)

        response.headers[REQUEST_ID_HEADER] = request_id
        return response
