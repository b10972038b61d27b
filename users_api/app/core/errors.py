"""
Error taxonomy and exception handlers.

Every failure the service reports is a client input problem with a
fixed status code and a JSON body of the form ``{"error": "<message>"}``.
Services and endpoints raise one of the ``APIError`` subclasses below;
``register_exception_handlers`` installs handlers on the FastAPI app
that render them.  Routing failures raised by Starlette itself (no
matching path, or a path served only for other methods) are reported
as ``Route not found``.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException


logger = logging.getLogger(__name__)


class APIError(Exception):
    """Base class for errors rendered as ``{"error": message}``."""

    status_code: int = status.HTTP_400_BAD_REQUEST
    message: str = "Bad request"

    def __init__(self, message: Optional[str] = None, status_code: Optional[int] = None) -> None:
        if message is not None:
            self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class InvalidRequestError(APIError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Invalid request"


class InvalidJSONError(APIError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Invalid JSON"


class UserNotFoundError(APIError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "User not found"


class RouteNotFoundError(APIError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Route not found"


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
    return error_response(exc.status_code, exc.message)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Translate Starlette routing errors into the service's error bodies.

    Starlette raises 404 when no route matches the path and 405 when
    the path exists but not for the request method.  Both are
    reported as ``Route not found``.
    """
    if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
        error = RouteNotFoundError()
        return error_response(error.status_code, error.message)
    return error_response(exc.status_code, str(exc.detail))


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error while serving %s %s", request.method, request.url.path)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the service's exception handlers to ``app``."""
    app.add_exception_handler(APIError, api_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
