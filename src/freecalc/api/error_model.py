"""Error envelope shared by every failing freecalc endpoint.

Every error body has the same four keys, ``code``, ``message``, ``details``
and ``request_id``, and the response always carries ``X-Request-Id`` so a
client can quote it back.
"""

from __future__ import annotations

import uuid
from typing import Any, Final

from fastapi import Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from freecalc.api.middleware.request_id import REQUEST_ID_HEADER

HTTP_STATUS_TO_CODE: Final[dict[int, str]] = {
    400: "BAD_REQUEST",
    404: "NOT_FOUND",
    405: "METHOD_NOT_ALLOWED",
    413: "PAYLOAD_TOO_LARGE",
    415: "UNSUPPORTED_MEDIA_TYPE",
    422: "UNPROCESSABLE_ENTITY",
    500: "INTERNAL_ERROR",
}


class ErrorResponse(BaseModel):
    """Error envelope, also published in the OpenAPI document."""

    code: str
    message: str
    details: dict[str, Any] | None = None
    request_id: str


def get_error_code_for_status(status_code: int) -> str:
    """Error code for a bare HTTP status; ``ERROR`` when unmapped."""
    return HTTP_STATUS_TO_CODE.get(status_code, "ERROR")


def resolve_request_id(request: Request) -> str:
    # The middleware normally sets state; the header and a fresh id cover
    # errors raised before it ran.
    state_id = getattr(request.state, "request_id", None)
    if state_id is not None:
        return str(state_id)
    return request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())


def make_error_response(
    request: Request,
    *,
    code: str,
    message: str,
    http_status: int,
    details: dict[str, Any] | None = None,
) -> JSONResponse:
    """Render an :class:`ErrorResponse` with the request's correlation id.

    Args:
        request: Incoming request, used for the request id.
        code: Machine-readable code such as ``FORMULA_REJECTED``.
        message: Human-readable message; never contains submitted values.
        http_status: Response status.
        details: Structured context such as ``reason_code`` and ``field``.
    """
    envelope = ErrorResponse(
        code=code,
        message=message,
        details=details,
        request_id=resolve_request_id(request),
    )
    return JSONResponse(
        status_code=http_status,
        content=envelope.model_dump(),
        headers={REQUEST_ID_HEADER: envelope.request_id},
    )
