"""Interface layer error responses.

Every failure leaves the API as ``{"status": false, ...}``. Credential and
quota failures carry ``error``; input and payment failures carry ``message``.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from adgate.adapter.error import (
    UpstreamError,
    UpstreamRejectedError,
    UpstreamUnreachableError,
)
from adgate.domain.error import (
    ConsistencyError,
    DomainError,
    InvalidCredentialError,
    LimitReachedError,
    NotAuthorizedError,
    NotFoundError,
    SharedIdentityError,
    ValidationError,
)

logger = logging.getLogger(__name__)

MALFORMED_INPUT_MESSAGE = "Missing or invalid parameters"
UPSTREAM_UNREACHABLE_MESSAGE = "Failed to process request via payment API."
INTERNAL_ERROR = "Internal error"


def error_body(status_code: int, error: str) -> JSONResponse:
    """Failure response keyed by ``error``."""
    return JSONResponse(
        status_code=status_code, content={"status": False, "error": error}
    )


def message_body(status_code: int, message: str) -> JSONResponse:
    """Failure response keyed by ``message``."""
    return JSONResponse(
        status_code=status_code, content={"status": False, "message": message}
    )


def failure_response(exc: Exception) -> JSONResponse:
    """Map a domain or adapter error to its normalized response.

    Args:
        exc: Error raised while serving the request

    Returns:
        JSON response with the matching status code
    """
    match exc:
        case InvalidCredentialError():
            # The reason stays in the logs; clients only learn it was rejected
            return error_body(status.HTTP_401_UNAUTHORIZED, "Invalid credential")
        case LimitReachedError():
            return error_body(status.HTTP_400_BAD_REQUEST, str(exc))
        case SharedIdentityError():
            return error_body(status.HTTP_403_FORBIDDEN, str(exc))
        case NotFoundError(resource="ApiKey") | NotAuthorizedError():
            return error_body(status.HTTP_404_NOT_FOUND, "API key not found")
        case NotFoundError():
            return error_body(status.HTTP_404_NOT_FOUND, f"{exc.resource} not found")
        case ValidationError():
            return message_body(status.HTTP_400_BAD_REQUEST, MALFORMED_INPUT_MESSAGE)
        case UpstreamUnreachableError():
            return message_body(
                status.HTTP_500_INTERNAL_SERVER_ERROR, UPSTREAM_UNREACHABLE_MESSAGE
            )
        case UpstreamRejectedError():
            return message_body(status.HTTP_400_BAD_REQUEST, str(exc))
        case ConsistencyError():
            logger.error(f"Consistency error: {exc}")
            return error_body(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR)
        case _:
            logger.exception("Unhandled error", exc_info=exc)
            return error_body(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR)


async def handle_known_error(request: Request, exc: Exception) -> JSONResponse:
    """Exception handler for domain and upstream errors."""
    logger.info(
        f"{request.method} {request.url.path} failed: {type(exc).__name__}"
    )
    return failure_response(exc)


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Unparsable or mistyped bodies are malformed input, not 422s."""
    logger.info(f"{request.method} {request.url.path} rejected: invalid body")
    return message_body(status.HTTP_400_BAD_REQUEST, MALFORMED_INPUT_MESSAGE)


def register_error_handlers(app: FastAPI) -> None:
    """Install the normalized failure responses on the application.

    Args:
        app: FastAPI application
    """
    app.add_exception_handler(DomainError, handle_known_error)
    app.add_exception_handler(UpstreamError, handle_known_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
