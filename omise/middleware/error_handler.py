"""FastAPI exception handlers for the donation app.

Client calls return results rather than raising; a route that opts into
``Result.unwrap()`` gets a ``ResultError`` on failure, which is turned into
the same JSON envelope as every other response: { success, data, error, meta }.
"""

from __future__ import annotations

import logging
import traceback

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from omise.api.errors import ErrorKind, OmiseError, ResultError

logger = logging.getLogger(__name__)

_STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.API: 400,
    ErrorKind.TRANSPORT: 503,
    ErrorKind.MALFORMED_RESPONSE: 502,
    ErrorKind.DECODE: 502,
    ErrorKind.ENCODING: 500,
}


def status_for_error(error: OmiseError) -> int:
    """HTTP status the app answers with when an Omise call failed."""
    return _STATUS_BY_KIND.get(error.kind, 500)


def error_meta(error: OmiseError) -> dict:
    return {"kind": error.kind.value, "code": error.code}


def _envelope(
    status_code: int,
    error: str,
    meta: dict | None = None,
) -> JSONResponse:
    """Build a JSON envelope error response."""
    return JSONResponse(
        status_code=status_code,
        content={
            "success": False,
            "data": None,
            "error": error,
            "meta": meta,
        },
    )


async def _result_error_handler(_request: Request, exc: ResultError) -> JSONResponse:
    """Handle a failed Omise call that a route unwrapped."""
    return _envelope(status_for_error(exc.error), exc.error.message, meta=error_meta(exc.error))


async def _validation_error_handler(
    _request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle FastAPI / Pydantic RequestValidationError (422)."""
    field_errors = [
        {
            "field": " -> ".join(str(loc) for loc in err["loc"]),
            "message": err["msg"],
            "type": err["type"],
        }
        for err in exc.errors()
    ]
    return _envelope(
        status_code=422,
        error="Validation error",
        meta={"fields": field_errors},
    )


async def _unhandled_error_handler(_request: Request, exc: Exception) -> JSONResponse:
    """Catch-all for unhandled exceptions: log the traceback and answer 500."""
    logger.error(
        "Unhandled exception: %s\n%s",
        exc,
        traceback.format_exc(),
    )
    return _envelope(status_code=500, error="Internal server error")


def register_error_handlers(app: FastAPI) -> None:
    """Wire up all exception handlers on the FastAPI application."""
    app.add_exception_handler(ResultError, _result_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, _validation_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, _unhandled_error_handler)  # type: ignore[arg-type]
