"""
Exception handlers for the API.

Centralizes the mapping from domain exceptions to HTTP responses so every
route renders failures the same way: {"message": ..., "timestamp": ...}.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Iterable
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
import logging

from dtos.response.user_response import ErrorResponse
from exceptions import (
    ApplicationError,
    DuplicateEmailError,
    UserNotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)


def error_response(status_code: int, message: str) -> JSONResponse:
    """Build the standard error envelope."""
    # UTC like the stored timestamps, serialised with its offset
    body = ErrorResponse(message=message, timestamp=datetime.now(timezone.utc))
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


def _field_name(loc: Iterable[Any]) -> str:
    # ("body", "age") -> "age"; ("path", "user_id") -> "user_id"; ("body",) -> "body"
    parts = [str(part) for part in loc]
    if len(parts) > 1 and parts[0] in ("body", "path", "query"):
        parts = parts[1:]
    return ".".join(parts)


def _error_text(error: Dict[str, Any]) -> str:
    if error.get("type") == "json_invalid":
        return "request body is not valid JSON"
    # Messages raised from field validators arrive as "Value error, <text>"
    return error.get("msg", "invalid value").removeprefix("Value error, ")


def format_validation_errors(errors: Iterable[Dict[str, Any]]) -> str:
    """
    Aggregate field violations into one message.

    Each violation becomes "<field> - <message>;" and the fragments are
    concatenated in the order pydantic reported them.
    """
    return "".join(f"{_field_name(err.get('loc', ()))} - {_error_text(err)};" for err in errors)


def register_exception_handlers(app: FastAPI) -> None:
    """
    Install the domain exception handlers on an application.

    NotFound maps to 404; validation and duplicate-email failures map to 400.
    Anything not listed here propagates and surfaces as a 500.
    """

    @app.exception_handler(UserNotFoundError)
    async def handle_not_found(request: Request, exc: UserNotFoundError):
        logger.warning(f"{request.method} {request.url.path} - Not found: {exc.message}")
        return error_response(exc.status_code, exc.message)

    @app.exception_handler(DuplicateEmailError)
    async def handle_duplicate_email(request: Request, exc: DuplicateEmailError):
        logger.warning(f"{request.method} {request.url.path} - Duplicate email: {exc.details.get('email')}")
        return error_response(exc.status_code, exc.message)

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        logger.warning(f"{request.method} {request.url.path} - Validation error: {exc.message}")
        return error_response(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        converted = ValidationError(
            format_validation_errors(errors),
            invalid_fields={_field_name(err.get("loc", ())): _error_text(err) for err in errors},
        )
        return await handle_validation_error(request, converted)

    @app.exception_handler(ApplicationError)
    async def handle_application_error(request: Request, exc: ApplicationError):
        logger.error(f"{request.method} {request.url.path} - Application error: {exc.message}", exc_info=exc)
        return error_response(exc.status_code, exc.message)
