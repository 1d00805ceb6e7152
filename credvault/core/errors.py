# credvault/core/errors.py

"""Error taxonomy and the handlers that turn it into JSON responses."""

import logging
from typing import Dict, List, Optional
from uuid import uuid4

from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.requests import Request

from credvault.core.logging import LOGGER_NAME, get_request_id


class AppError(Exception):
    code = "app_error"
    status_code = 500

    def __init__(self, message: str, *, code: Optional[str] = None, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if code:
            self.code = code
        if status_code:
            self.status_code = status_code

    def payload(self) -> dict:
        return {"message": self.message}


class ValidationError(AppError, ValueError):
    """Client input broke one or more field rules."""

    code = "validation_error"
    status_code = 400

    def __init__(self, errors: List[Dict[str, str]], message: str = "Validation failed"):
        super().__init__(message)
        self.errors = errors

    def payload(self) -> dict:
        return {"errors": self.errors}


class DuplicateAccountError(AppError):
    # A conflict, reported as 400 to match the client contract.
    code = "duplicate_account"
    status_code = 400


class NotFoundError(AppError, LookupError):
    code = "not_found"
    status_code = 404


class AuthenticationError(AppError):
    code = "authentication_failed"
    status_code = 401


class StoreError(AppError):
    code = "store_error"
    status_code = 500


class RateLimitError(AppError):
    code = "rate_limited"
    status_code = 429


GENERIC_ERROR_MESSAGE = "Internal Server Error"


def field_error(path: str, msg: str) -> Dict[str, str]:
    return {"type": "field", "path": path, "msg": msg, "location": "body"}


def _extract_request_id(request: Request) -> str:
    return getattr(request.state, "request_id", None) or get_request_id() or str(uuid4())


def _respond(status_code: int, content: dict, rid: str) -> JSONResponse:
    response = JSONResponse(status_code=status_code, content=content)
    response.headers["x-request-id"] = rid
    return response


async def app_error_handler(request: Request, exc: AppError):
    rid = _extract_request_id(request)
    logger = logging.getLogger(LOGGER_NAME)

    if exc.status_code >= 500:
        # Internal detail stays in the log, never in the body.
        logger.error(
            "app.error %s",
            exc.message,
            exc_info=exc,
            extra={"request_id": rid, "error_code": exc.code, "status": exc.status_code},
        )
        return _respond(exc.status_code, {"message": GENERIC_ERROR_MESSAGE}, rid)

    logger.warning(
        "app.error %s",
        exc.message,
        extra={"request_id": rid, "error_code": exc.code, "status": exc.status_code},
    )
    return _respond(exc.status_code, exc.payload(), rid)


async def request_validation_handler(request: Request, exc: RequestValidationError):
    rid = _extract_request_id(request)
    errors = []
    for err in exc.errors():
        loc = [str(part) for part in err.get("loc", ()) if part != "body"]
        errors.append(field_error(".".join(loc) or "body", err.get("msg", "Invalid value")))

    logging.getLogger(LOGGER_NAME).warning(
        "request.invalid",
        extra={"request_id": rid, "error_code": ValidationError.code, "status": 400},
    )
    return _respond(400, {"errors": errors}, rid)


async def unhandled_exception_handler(request: Request, exc: Exception):
    rid = _extract_request_id(request)
    logging.getLogger(LOGGER_NAME).error(
        "unhandled.exception",
        exc_info=exc,
        extra={"request_id": rid, "error_code": "internal_error", "status": 500},
    )
    return _respond(500, {"message": GENERIC_ERROR_MESSAGE}, rid)
