"""Maps parts finder errors onto HTTP responses.

Every error body has the ``ErrorResponse`` shape: ``detail``, ``code`` and,
for uploads or requests that failed several checks, ``errors``.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from parts_finder.domain.errors import DomainError, TransportError

logger = logging.getLogger(__name__)

# Literal 422: starlette renamed the constant between releases
HTTP_UNPROCESSABLE = 422

STATUS_BY_ERROR_CODE: dict[str, int] = {
    "VALIDATION_ERROR": HTTP_UNPROCESSABLE,
    "NOT_FOUND": status.HTTP_404_NOT_FOUND,
}

# Where FastAPI says a bad input came from; clients only need the field name
_INPUT_LOCATIONS = frozenset({"body", "query", "path"})


def _request_context(request: Request) -> dict[str, Any]:
    context: dict[str, Any] = {"path": request.url.path, "method": request.method}
    session_id = request.path_params.get("session_id")
    if session_id is not None:
        context["session_id"] = session_id
    return context


def _error_body(detail: str, code: str, errors: list[Any] | None = None) -> dict[str, Any]:
    body: dict[str, Any] = {"detail": detail, "code": code}
    if errors:
        body["errors"] = errors
    return body


async def handle_catalog_unavailable(request: Request, exc: TransportError) -> JSONResponse:
    """A search the catalog service could not answer: 502 Bad Gateway.

    The filter keeps its previous results in this case, so the client can go
    on showing them next to the error.
    """
    logger.error(
        "Catalog service unavailable",
        extra={
            "resource": exc.resource,
            "upstream_status": exc.status_code,
            "reason": exc.context.get("reason"),
            **_request_context(request),
        },
    )
    return JSONResponse(
        status_code=status.HTTP_502_BAD_GATEWAY,
        content=_error_body(exc.message, exc.error_code),
    )


async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
    """Rejected selections, unknown sessions or options and invalid uploads.

    The status comes from ``STATUS_BY_ERROR_CODE``; unmapped codes are 400.
    """
    status_code = STATUS_BY_ERROR_CODE.get(exc.error_code, status.HTTP_400_BAD_REQUEST)

    logger.info(
        "Request rejected",
        extra={
            "error_code": exc.error_code,
            "error_message": exc.message,
            "status_code": status_code,
            **_request_context(request),
        },
    )

    return JSONResponse(
        status_code=status_code,
        content=_error_body(exc.message, exc.error_code, exc.to_dict().get("errors")),
    )


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Malformed input caught by FastAPI, e.g. ``level=engine`` or ``page=abc``."""
    errors = [
        {
            "field": ".".join(str(loc) for loc in error["loc"] if loc not in _INPUT_LOCATIONS),
            "message": error["msg"],
            "code": error["type"],
        }
        for error in exc.errors()
    ]

    logger.info("Invalid request parameters", extra={"errors": errors, **_request_context(request)})

    return JSONResponse(
        status_code=HTTP_UNPROCESSABLE,
        content=_error_body("Invalid request parameters", "VALIDATION_ERROR", errors),
    )


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    """Anything else is a bug: 500, with the traceback in the log only."""
    logger.error(
        "Unexpected error occurred",
        exc_info=exc,
        extra={
            "error_type": type(exc).__name__,
            "error_message": str(exc),
            **_request_context(request),
        },
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_body("An unexpected error occurred", "INTERNAL_ERROR"),
    )


def register_exception_handlers(app: FastAPI) -> None:
    # TransportError is matched before its DomainError base
    app.add_exception_handler(TransportError, handle_catalog_unavailable)  # type: ignore[arg-type]
    app.add_exception_handler(DomainError, handle_domain_error)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, handle_unexpected_error)
