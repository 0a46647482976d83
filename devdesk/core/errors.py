from __future__ import annotations

import logging
from http import HTTPStatus
from typing import Any

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette import status
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class ErrorEnvelope(JSONResponse):
    """JSON error body shared by every failure: ``{"error": message, ...}``."""

    def __init__(
        self,
        *,
        status_code: int,
        message: str,
        details: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> None:
        payload: dict[str, Any] = {"error": message}
        if details:
            payload.update(details)
        super().__init__(payload, status_code=status_code, headers=headers)


class StorageFault(Exception):
    """A storage operation failed; carries a caller-facing message."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


def _status_phrase(status_code: int) -> str:
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return "Error"


def _describe_validation_errors(errors: list[dict[str, Any]]) -> str:
    parts: list[str] = []
    for err in errors:
        loc = [str(item) for item in err.get("loc", ()) if item not in ("body", "query", "path")]
        msg = err.get("msg") or "invalid value"
        parts.append(f"{'.'.join(loc)}: {msg}" if loc else msg)
    return "; ".join(parts) or "Invalid request"


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    detail = exc.detail
    message = detail if isinstance(detail, str) and detail else _status_phrase(exc.status_code)
    details = detail if isinstance(detail, dict) else None
    headers = getattr(exc, "headers", None)
    return ErrorEnvelope(status_code=exc.status_code, message=message, details=details, headers=headers)


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return ErrorEnvelope(
        status_code=status.HTTP_400_BAD_REQUEST,
        message=_describe_validation_errors(list(exc.errors())),
    )


async def storage_fault_handler(request: Request, exc: StorageFault):
    logger.error(
        "storage.fault",
        exc_info=exc.__cause__ or exc,
        extra={"extra_data": {"path": request.url.path, "method": request.method}},
    )
    return ErrorEnvelope(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, message=exc.message)


async def sqlalchemy_error_handler(request: Request, exc: SQLAlchemyError):
    logger.error(
        "storage.fault",
        exc_info=exc,
        extra={"extra_data": {"path": request.url.path, "method": request.method}},
    )
    return ErrorEnvelope(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, message=str(exc))


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error(
        "request.failed",
        exc_info=exc,
        extra={"extra_data": {"path": request.url.path, "method": request.method}},
    )
    return ErrorEnvelope(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        message=str(exc) or _status_phrase(status.HTTP_500_INTERNAL_SERVER_ERROR),
    )


def api_route_not_found(path: str) -> ErrorEnvelope:
    return ErrorEnvelope(
        status_code=status.HTTP_404_NOT_FOUND,
        message="API route not found",
        details={"path": path},
    )


def register_exception_handlers(app) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StorageFault, storage_fault_handler)
    app.add_exception_handler(SQLAlchemyError, sqlalchemy_error_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
