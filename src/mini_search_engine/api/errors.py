"""Exception handlers mapping engine errors to JSON responses."""

from __future__ import annotations

import logging

from starlette.exceptions import HTTPException
from starlette.requests import Request
from starlette.responses import JSONResponse

from mini_search_engine.domain.exceptions import NotFoundError, ValidationError


logger = logging.getLogger(__name__)


class InvalidRequestBodyError(Exception):
    """The request body is not JSON or does not match the request schema."""


def _original_url(request: Request) -> str:
    url = request.url.path
    if request.url.query:
        url = f"{url}?{request.url.query}"
    return url


async def validation_error_handler(request: Request, exc: Exception) -> JSONResponse:
    return JSONResponse({"error": str(exc) or "Invalid input"}, status_code=400)


async def invalid_body_handler(request: Request, exc: Exception) -> JSONResponse:
    return JSONResponse({"error": "Invalid request body", "message": str(exc)}, status_code=400)


async def not_found_handler(request: Request, exc: Exception) -> JSONResponse:
    return JSONResponse({"error": "Article not found"}, status_code=404)


async def http_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Unmatched routes and methods are reported as unknown endpoints."""
    status_code = getattr(exc, "status_code", 500)
    if status_code in (404, 405):
        return JSONResponse(
            {"error": "Endpoint not found", "message": f"Cannot {request.method} {_original_url(request)}"},
            status_code=404,
        )
    return JSONResponse(
        {"error": getattr(exc, "detail", str(exc))},
        status_code=status_code,
        headers=getattr(exc, "headers", None),
    )


async def server_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled error on %s %s: %s", request.method, request.url.path, exc, exc_info=exc)
    return JSONResponse({"error": "Something went wrong!", "message": str(exc)}, status_code=500)


EXCEPTION_HANDLERS = {
    ValidationError: validation_error_handler,
    InvalidRequestBodyError: invalid_body_handler,
    NotFoundError: not_found_handler,
    HTTPException: http_exception_handler,
    Exception: server_error_handler,
}
