"""ASGI middleware turning unhandled exceptions into a generic error envelope."""

from __future__ import annotations

import logging

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from shopgraph.api.errors import error_response

logger = logging.getLogger(__name__)

UNEXPECTED_ERROR = "An unexpected error occurred. Please try again later."


class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    """Reports any exception escaping a route as HTTP 500 without leaking details."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        try:
            return await call_next(request)
        except Exception:
            logger.exception("Unhandled exception")
            return error_response(500, UNEXPECTED_ERROR)
