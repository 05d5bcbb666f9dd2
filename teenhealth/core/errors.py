"""Error kinds raised by the service layer and how they render over HTTP.

Services never return ad-hoc ``{"status": 500}`` dicts. They raise a
``ServiceError`` subclass; the handler registered in ``teenhealth.main``
turns it into ``{"status", "error", "message"}`` with the kind's status code.
"""
import logging
from enum import Enum
from typing import Any, Dict, Optional

from fastapi import Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class ErrorKind(str, Enum):
    BAD_REQUEST = "bad_request"
    CONFLICT = "conflict"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    INTERNAL = "internal"
    UNAVAILABLE = "unavailable"

    @property
    def status_code(self) -> int:
        return _STATUS_CODES[self]


_STATUS_CODES = {
    ErrorKind.BAD_REQUEST: 400,
    # Duplicate registration keeps the 400 the site has always answered with
    ErrorKind.CONFLICT: 400,
    ErrorKind.UNAUTHORIZED: 401,
    ErrorKind.FORBIDDEN: 403,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.INTERNAL: 500,
    ErrorKind.UNAVAILABLE: 503,
}


class ServiceError(Exception):
    kind = ErrorKind.INTERNAL
    default_message = "Internal server error"

    def __init__(self, message: Optional[str] = None, context: Optional[Dict[str, Any]] = None):
        self.message = message or self.default_message
        # Logged, never returned to the client
        self.context = context or {}
        super().__init__(self.message)

    @property
    def status_code(self) -> int:
        return self.kind.status_code

    def to_dict(self) -> Dict[str, Any]:
        return {"status": self.status_code, "error": self.kind.value, "message": self.message}


class BadRequestError(ServiceError):
    kind = ErrorKind.BAD_REQUEST
    default_message = "Bad request"


class ConflictError(ServiceError):
    kind = ErrorKind.CONFLICT
    default_message = "Resource already exists"


class UnauthorizedError(ServiceError):
    kind = ErrorKind.UNAUTHORIZED
    default_message = "User not logged in"


class ForbiddenError(ServiceError):
    kind = ErrorKind.FORBIDDEN
    default_message = "Not authorized"


class NotFoundError(ServiceError):
    kind = ErrorKind.NOT_FOUND
    default_message = "Not found"


class InternalError(ServiceError):
    kind = ErrorKind.INTERNAL


class UnavailableError(ServiceError):
    kind = ErrorKind.UNAVAILABLE
    default_message = "Service temporarily unavailable"


async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    if exc.kind in (ErrorKind.INTERNAL, ErrorKind.UNAVAILABLE):
        logger.error(
            "%s %s failed: %s %s",
            request.method,
            request.url.path,
            exc.message,
            exc.context,
            exc_info=exc.__cause__,
        )
    else:
        logger.info("%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc.message)
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content=InternalError().to_dict())
