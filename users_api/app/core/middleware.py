"""
Middleware for the Users API.

``RequirePathMiddleware`` rejects requests that arrive without a URL
before any routing takes place.  ``RequestLoggingMiddleware`` writes
one log line per request with its status and duration.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.types import ASGIApp, Receive, Scope, Send

from .errors import InvalidRequestError, error_response


logger = logging.getLogger(__name__)


class RequirePathMiddleware:
    """Answer 400 ``Invalid request`` when the request has no URL path."""

    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http" and not scope.get("path"):
            error = InvalidRequestError()
            logger.info("Rejected %s request without a URL", scope.get("method", "?"))
            response = error_response(error.status_code, error.message)
            await response(scope, receive, send)
            return
        await self.app(scope, receive, send)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        start_time = time.time()
        response = await call_next(request)
        duration_ms = int((time.time() - start_time) * 1000)
        logger.info(
            "%s %s -> %s (%d ms)",
            request.method,
            request.url.path,
            response.status_code,
            duration_ms,
        )
        return response
