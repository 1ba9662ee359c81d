"""Error Handlers — map demo faults and bad queries onto JSON envelopes.

Invariants:
    - NullSafeError → its own http_status and to_response() envelope
    - A fault raised mid-demo keeps the lines already produced (error.printed_lines)
    - Server-side faults (status >= 500) log at ERROR, client faults at WARNING
    - Bad query values → 400 with one entry per rejected parameter
    - Anything else → 500 without internal details

Design Decisions:
    - Envelope built from the error itself: the route never formats failures
    - ProbeIndexError is 500: a probe outside the array is a settings problem, not the caller's
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from nullsafe.core.errors import ErrorCategory, ErrorSeverity, NullSafeError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    app.add_exception_handler(NullSafeError, _handle_nullsafe_error)
    app.add_exception_handler(RequestValidationError, _handle_invalid_query)
    app.add_exception_handler(Exception, _handle_unexpected)


async def _handle_nullsafe_error(request: Request, exc: NullSafeError):
    level = logging.ERROR if exc.http_status >= 500 else logging.WARNING
    logger.log(
        level,
        f"{type(exc).__name__}: {exc.message}",
        extra={
            "error_code": exc.code,
            "index": exc.context.index,
            "path": request.url.path,
        },
    )
    return JSONResponse(
        status_code=exc.http_status, content=build_error_body(exc),
    )


def build_error_body(exc: NullSafeError) -> dict:
    """REST envelope plus any demo output produced before the fault."""
    body = exc.to_response()
    if exc.context.printed_lines is not None:
        body["error"]["printed_lines"] = list(exc.context.printed_lines)
    return body


async def _handle_invalid_query(request: Request, exc: RequestValidationError):
    rejected = [
        {
            "parameter": str(e["loc"][-1]),
            "location": str(e["loc"][0]),
            "received": e.get("input"),
            "message": e["msg"],
        }
        for e in exc.errors()
    ]
    logger.warning(
        f"Rejected {', '.join(r['parameter'] for r in rejected)} on {request.url.path}",
        extra={"path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error": {
                "code": "VALIDATION_ERROR",
                "message": "Invalid demo query",
                "category": ErrorCategory.VALIDATION.value,
                "severity": ErrorSeverity.ERROR.value,
                "details": rejected,
            },
        },
    )


async def _handle_unexpected(request: Request, exc: Exception):
    logger.error(
        f"Unhandled {type(exc).__name__} on {request.url.path}",
        exc_info=exc,
        extra={"path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": {
                "code": "INTERNAL_ERROR",
                "message": "The demo failed unexpectedly",
                "category": ErrorCategory.INTERNAL.value,
                "severity": ErrorSeverity.CRITICAL.value,
            },
        },
    )
