"""
Palindrome API — Request Context Middleware
============================================

What:  Gives every request a correlation ID and writes one access line.
How:   The ID (client's X-Request-ID or a fresh short hex) lives in a
       ContextVar. RequestIDLogFilter copies it onto every log record, so the
       WordStore and exception handler lines of a request share the ID with
       its access line. The ID is echoed in the X-Request-ID response header.

Access line format:
    DELETE /words/{word_id} -> 200 in 3.1ms

The route template is logged instead of the raw URL: submitted words travel
in the query string and ids in the path, and neither belongs in access logs.
Operation outcomes (saved, deleted, storage failure) are logged by the store
and the exception handlers, so the access line stays at INFO.
"""

import logging
import time
import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

REQUEST_ID_HEADER = "X-Request-ID"

request_id_var: ContextVar[str] = ContextVar("request_id", default="")

access_logger = logging.getLogger("palindrome_api.access")


class RequestIDLogFilter(logging.Filter):
    """Adds `request_id` to every record ("-" outside a request)."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_var.get() or "-"
        return True


def _route_template(request: Request) -> str:
    route = request.scope.get("route")
    return getattr(route, "path", None) or "<unmatched>"


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Sets the request ID for the duration of a request and logs its outcome."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex[:8]
        request_id_var.set(rid)
        started = time.perf_counter()

        response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = rid

        template = _route_template(request)
        if template != "/health":
            access_logger.info(
                "%s %s -> %d in %.1fms",
                request.method,
                template,
                response.status_code,
                (time.perf_counter() - started) * 1000,
            )
        return response
