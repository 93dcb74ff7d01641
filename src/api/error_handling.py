#
# SPDX-License-Identifier: AGPL-3.0-only
# Copyright (c) 2026 m2-eng
# Author: m2-eng
# Co-Author: GitHub Copilot
# License: GNU Affero General Public License v3.0 (AGPL-3.0-only)
# Purpose: Central error handling for the API.
#
"""
Central error handling for the API.

Every error response has the shape {"error": <message>}. Domain errors keep
their own message and status; store and unexpected errors become a generic
500 without internal detail.
"""

import asyncio
import logging
import time
from functools import wraps
from typing import Any, Callable

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from auth.errors import AuthError, StoreError, TooManyAttemptsError

logger = logging.getLogger("uvicorn.error")

INTERNAL_ERROR_MESSAGE = "Internal server error"


def handle_auth_errors(operation_name: str = "auth operation"):
    """
    Decorator for API endpoints calling into AuthService.

    Domain errors pass through unchanged to the exception handlers. Store
    errors and anything unexpected are logged with the operation name and
    re-raised as StoreError.

    Verwendung:
        @router.post("/login")
        @handle_auth_errors("user login")
        def login(...):
            ...
    """
    def log_and_wrap(exc: Exception) -> StoreError:
        if isinstance(exc, StoreError):
            logger.error("Store error during %s: %s", operation_name, exc)
            return exc
        logger.exception("Unexpected error during %s: %s", operation_name, exc)
        return StoreError(f"Unexpected error during {operation_name}")

    def decorator(func: Callable) -> Callable:
        @wraps(func)
        async def async_wrapper(*args, **kwargs) -> Any:
            try:
                return await func(*args, **kwargs)
            except (AuthError, StarletteHTTPException):
                raise
            except Exception as exc:
                wrapped = log_and_wrap(exc)
                if wrapped is exc:
                    raise
                raise wrapped from exc

        @wraps(func)
        def sync_wrapper(*args, **kwargs) -> Any:
            try:
                return func(*args, **kwargs)
            except (AuthError, StarletteHTTPException):
                raise
            except Exception as exc:
                wrapped = log_and_wrap(exc)
                if wrapped is exc:
                    raise
                raise wrapped from exc

        if asyncio.iscoroutinefunction(func):
            return async_wrapper
        return sync_wrapper

    return decorator


def _error_response(status_code: int, message: str, headers: dict = None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message}, headers=headers)


async def auth_error_handler(request: Request, exc: AuthError) -> JSONResponse:
    headers = None
    if isinstance(exc, TooManyAttemptsError):
        headers = {"Retry-After": str(exc.retry_after)}
    return _error_response(exc.status_code, exc.message, headers)


async def store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
    logger.error("Store error on %s %s", request.method, request.url.path)
    return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    missing = [str(err["loc"][-1]) for err in exc.errors() if err.get("type") == "missing" and err.get("loc")]
    if missing:
        message = f"Missing required fields: {', '.join(missing)}"
    else:
        message = "Invalid request body"
    return _error_response(status.HTTP_400_BAD_REQUEST, message)


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return _error_response(exc.status_code, str(exc.detail), getattr(exc, "headers", None))


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AuthError, auth_error_handler)
    app.add_exception_handler(StoreError, store_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)


def register_request_logging(app: FastAPI) -> None:
    """Logs one line per request: method, path, status and duration."""

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info("%s %s -> %s (%.1f ms)", request.method, request.url.path, response.status_code, elapsed_ms)
        return response
