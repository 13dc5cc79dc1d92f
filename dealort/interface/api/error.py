"""Exception handlers rendering failures as RPC error envelopes."""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from dealort.domain.error import (
    BusinessRuleViolationError,
    NotAuthorizedError,
    NotFoundError,
    UnauthenticatedError,
    ValidationError,
)
from dealort.interface.error import RPCError
from dealort.util.deadline import RequestTimeoutError

INTERNAL_MESSAGE = "Internal server error"

# Domain error -> (code, status). Lookup walks the exception's MRO.
DOMAIN_ERROR_CODES: dict[type[Exception], tuple[str, int]] = {
    UnauthenticatedError: ("UNAUTHORIZED", status.HTTP_401_UNAUTHORIZED),
    NotAuthorizedError: ("FORBIDDEN", status.HTTP_403_FORBIDDEN),
    NotFoundError: ("NOT_FOUND", status.HTTP_404_NOT_FOUND),
    BusinessRuleViolationError: ("CONFLICT", status.HTTP_409_CONFLICT),
    ValidationError: ("BAD_REQUEST", status.HTTP_400_BAD_REQUEST),
}


def error_envelope(
    code: str, status_code: int, message: str, defined: bool = False
) -> JSONResponse:
    """Build the JSON error response shared by every procedure."""
    return JSONResponse(
        status_code=status_code,
        content={
            "defined": defined,
            "code": code,
            "status": status_code,
            "message": message,
        },
    )


def code_for(exc: Exception) -> tuple[str, int] | None:
    for cls in type(exc).__mro__:
        if cls in DOMAIN_ERROR_CODES:
            return DOMAIN_ERROR_CODES[cls]
    return None


async def handle_rpc_error(request: Request, exc: RPCError) -> JSONResponse:
    if exc.code == "TIMEOUT":
        logfire.warn(
            "RPC timeout", path=request.url.path, message=exc.message
        )
    return error_envelope(exc.code, exc.status, exc.message, defined=exc.defined)


async def handle_domain_error(request: Request, exc: Exception) -> JSONResponse:
    mapped = code_for(exc)
    if mapped is None:
        return await handle_unexpected_error(request, exc)
    code, status_code = mapped
    return error_envelope(code, status_code, str(exc))


async def handle_timeout(request: Request, exc: RequestTimeoutError) -> JSONResponse:
    return error_envelope("TIMEOUT", status.HTTP_504_GATEWAY_TIMEOUT, exc.message)


async def handle_request_validation(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = exc.errors()
    message = errors[0].get("msg", "Invalid input") if errors else "Invalid input"
    return error_envelope("BAD_REQUEST", status.HTTP_400_BAD_REQUEST, message)


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    """Report an unexpected failure and hide its details from the client."""
    logfire.error(
        "Unhandled error in {path}",
        path=request.url.path,
        error=str(exc),
        error_type=type(exc).__name__,
        _exc_info=exc,
    )
    return error_envelope(
        "INTERNAL_SERVER_ERROR",
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        INTERNAL_MESSAGE,
    )


def register_error_handlers(app: FastAPI) -> None:
    """Attach all error handlers to the application."""
    app.add_exception_handler(RPCError, handle_rpc_error)
    app.add_exception_handler(RequestTimeoutError, handle_timeout)
    app.add_exception_handler(RequestValidationError, handle_request_validation)
    for error_type in DOMAIN_ERROR_CODES:
        app.add_exception_handler(error_type, handle_domain_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
