"""HTTP error mapping shared by every router.

Every failure leaves the API as ``{"error": "<short message>"}``; validation
failures also carry ``details``.
"""

from contextlib import contextmanager

import structlog
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from protean.exceptions import ObjectNotFoundError, ValidationError

from shared.errors import InternalError, InvalidTransitionError, SneakerHubError

logger = structlog.get_logger(__name__)

# Errors that already describe a caller-facing outcome
_EXPECTED_ERRORS = (ValidationError, ObjectNotFoundError, SneakerHubError)


@contextmanager
def operation_boundary(failure_message: str):
    """Surface unexpected failures inside the block as ``InternalError``.

    Domain errors pass through untouched. Anything else (a store outage, a
    driver error) is chained so the cause reaches the logs but not the caller.
    """
    try:
        yield
    except _EXPECTED_ERRORS:
        raise
    except Exception as exc:
        raise InternalError(failure_message) from exc


def first_message(messages) -> str:
    """Pick the first human-readable message out of a protean error payload."""
    if isinstance(messages, dict):
        for value in messages.values():
            if isinstance(value, list | tuple) and value:
                return str(value[0])
            if value:
                return str(value)
        return "Invalid request"
    if isinstance(messages, list | tuple) and messages:
        return str(messages[0])
    return str(messages) if messages else "Invalid request"


async def _handle_invalid_transition(request: Request, exc: InvalidTransitionError):
    logger.info(
        "transition_rejected",
        path=request.url.path,
        current_status=exc.current_status,
    )
    return JSONResponse(status_code=400, content={"error": exc.message})


async def _handle_validation_error(request: Request, exc: ValidationError):
    logger.info("validation_failed", path=request.url.path, messages=exc.messages)
    return JSONResponse(
        status_code=400,
        content={"error": first_message(exc.messages), "details": jsonable_encoder(exc.messages)},
    )


async def _handle_request_validation_error(request: Request, exc: RequestValidationError):
    logger.info("payload_rejected", path=request.url.path)
    return JSONResponse(
        status_code=400,
        content={"error": "Invalid request payload", "details": jsonable_encoder(exc.errors())},
    )


async def _handle_not_found(request: Request, exc: ObjectNotFoundError):
    logger.info("object_not_found", path=request.url.path)
    return JSONResponse(status_code=404, content={"error": first_message(getattr(exc, "messages", str(exc)))})


async def _handle_application_error(request: Request, exc: SneakerHubError):
    if exc.status_code >= 500:
        logger.error("request_failed", path=request.url.path, error=exc.message, exc_info=exc.__cause__)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


def register_error_handlers(app: FastAPI) -> None:
    """Attach the error-to-response mapping to a FastAPI application."""
    app.add_exception_handler(InvalidTransitionError, _handle_invalid_transition)
    app.add_exception_handler(ValidationError, _handle_validation_error)
    app.add_exception_handler(RequestValidationError, _handle_request_validation_error)
    app.add_exception_handler(ObjectNotFoundError, _handle_not_found)
    app.add_exception_handler(SneakerHubError, _handle_application_error)
