"""HTTP error mapping.

Failures are translated to responses in exactly one place: the exception
handlers registered by `install_error_handlers`. Route handlers let
exceptions propagate.

- unmatched route            -> 404 `{"ok": false, "error": "Not Found"}`
- document store failure     -> 500 `{"ok": false, "error": "..."}`
- anything else unhandled    -> 500 `{"ok": false, "error": "..."}`

Request validation keeps FastAPI's default 422 payload.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError
from starlette.exceptions import HTTPException as StarletteHTTPException

from .schemas import ErrorOut

logger = logging.getLogger(__name__)


def error_response(status: int, error: str) -> JSONResponse:
    return JSONResponse(status_code=status, content=ErrorOut(error=error).model_dump())


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render HTTP errors (including the router's 404) in the service's error shape."""
    response = error_response(exc.status_code, str(exc.detail))
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def database_exception_handler(request: Request, exc: PyMongoError) -> JSONResponse:
    logger.error("document store error on %s %s: %s", request.method, request.url.path, exc)
    return error_response(500, f"database error: {exc}")


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all: log with traceback, answer 500 without internals."""
    logger.exception("unhandled error on %s %s", request.method, request.url.path)
    return error_response(500, "internal server error")


def install_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(PyMongoError, database_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
