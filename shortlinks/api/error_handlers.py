"""
Exception Handlers

Renders every error response in the same JSON shape:

    {"error": "<HTTP reason phrase>", "message": "<detail>" | ["<detail>", ...]}

- Validation errors (bad body, malformed id) become 400 with a list of
  field complaints instead of FastAPI's default 422
- HTTPExceptions (raised by endpoints, or by routing for unknown paths)
  keep their status and detail
- Rate limit and unexpected errors get the same envelope
"""

import logging
from http import HTTPStatus
from typing import Optional, Union

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from shortlinks.core.validators import format_validation_errors

logger = logging.getLogger(__name__)


def error_response(
    status_code: int,
    message: Union[str, list[str]],
    headers: Optional[dict[str, str]] = None
) -> JSONResponse:
    """Build an error response with the reason phrase of the status code."""
    return JSONResponse(
        status_code=status_code,
        content={"error": HTTPStatus(status_code).phrase, "message": message},
        headers=headers,
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    message = exc.detail if exc.detail is not None else HTTPStatus(exc.status_code).phrase
    return error_response(exc.status_code, message, headers=getattr(exc, "headers", None))


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    messages = format_validation_errors(exc.errors())
    logger.debug(f"Rejected {request.method} {request.url.path}: {messages}")
    return error_response(status.HTTP_400_BAD_REQUEST, messages)


async def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    logger.warning(f"Rate limit exceeded on {request.method} {request.url.path}: {exc.detail}")
    return error_response(status.HTTP_429_TOO_MANY_REQUESTS, f"Rate limit exceeded: {exc.detail}")


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {str(exc)}", exc_info=exc)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, HTTPStatus.INTERNAL_SERVER_ERROR.phrase)


def add_exception_handlers(app: FastAPI) -> None:
    """
    Register the error handlers on a FastAPI app.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
