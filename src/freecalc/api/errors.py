"""Exception handlers that turn failures into the freecalc error envelope.

Registered by :func:`freecalc.api.main.create_app`, most specific first:

- ``CustomCalculatorError``: formula rejections (400 ``FORMULA_REJECTED``)
  and incomplete execute requests (400 ``INVALID_REQUEST``)
- ``FreecalcHttpError``: explicit application errors
- Starlette ``HTTPException``: routing 404/405 and ``HTTPException`` raised
  by routes
- ``RequestValidationError``: body and query failures, field names only
- ``Exception``: anything else, as a generic 500
"""

import logging
from typing import Any

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from freecalc.api.error_model import (
    get_error_code_for_status,
    make_error_response,
    resolve_request_id,
)
from freecalc.services.custom_calculator import CustomCalculatorError

logger = logging.getLogger(__name__)

# location prefixes FastAPI adds that mean nothing to a client
_LOCATION_ROOTS = frozenset({"body", "query", "path"})


class FreecalcHttpError(Exception):
    """Application error rendered verbatim into the envelope.

    Attributes:
        status_code: HTTP status to answer with.
        code: Machine-readable error code.
        message: Human-readable message.
        details: Optional structured context.
    """

    def __init__(
        self,
        status_code: int,
        code: str,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.code = code
        self.message = message
        self.details = details


async def custom_calculator_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Map a failed formula execution to a 400.

    A rejection by the sandbox carries a ``reason_code`` (and, for bad
    inputs, the ``field``); without one the request itself was incomplete.
    """
    assert isinstance(exc, CustomCalculatorError)

    if exc.reason_code is None:
        return make_error_response(
            request, code="INVALID_REQUEST", message=exc.reason, http_status=400
        )

    logger.info(
        "Formula rejected: %s",
        exc.reason_code,
        extra={"request_id": resolve_request_id(request), "field": exc.field},
    )
    details: dict[str, Any] = {"reason_code": str(exc.reason_code)}
    if exc.field is not None:
        details["field"] = exc.field
    return make_error_response(
        request,
        code="FORMULA_REJECTED",
        message=str(exc),
        http_status=400,
        details=details,
    )


async def freecalc_http_error_handler(request: Request, exc: Exception) -> JSONResponse:
    assert isinstance(exc, FreecalcHttpError)
    return make_error_response(
        request,
        code=exc.code,
        message=exc.message,
        http_status=exc.status_code,
        details=exc.details,
    )


async def http_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Render routing and route-raised HTTP exceptions."""
    assert isinstance(exc, StarletteHTTPException)
    return make_error_response(
        request,
        code=get_error_code_for_status(exc.status_code),
        message=str(exc.detail or f"HTTP {exc.status_code}"),
        http_status=exc.status_code,
    )


def _field_path(location: tuple[Any, ...]) -> str:
    parts = [str(part) for part in location if part not in _LOCATION_ROOTS]
    return ".".join(parts) or "request"


async def request_validation_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Report which fields failed validation.

    Submitted values can hold user data, so only the field path and the
    validator's message are returned.
    """
    assert isinstance(exc, RequestValidationError)

    errors = [
        {"field": _field_path(tuple(error.get("loc", ()))), "message": error.get("msg", "Invalid")}
        for error in exc.errors()
    ]
    return make_error_response(
        request,
        code="REQUEST_VALIDATION_FAILED",
        message="Request validation failed",
        http_status=422,
        details={"errors": errors} if errors else None,
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log the failure and answer with a 500 that reveals nothing."""
    logger.exception(
        "Unhandled exception: %s",
        type(exc).__name__,
        extra={"request_id": resolve_request_id(request)},
    )
    return make_error_response(
        request,
        code="INTERNAL_ERROR",
        message="An internal error occurred",
        http_status=500,
    )
