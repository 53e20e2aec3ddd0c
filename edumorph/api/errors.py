"""
API error handling and exception mapping.

Converts domain errors into HTTP responses. Generation failures keep the
learner's input untouched on the client side, so the detail tells them to
resubmit.
"""

from datetime import datetime, timezone

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from edumorph.api.schemas.base import ErrorResponse
from edumorph.domain.exceptions import (
    EduMorphError,
    GenerationFailed,
    MilestoneNotFound,
    NotFoundError,
)
from edumorph.infra.config.logging_config import get_logger

logger = get_logger("api.errors")


def _error(status_code: int, error: str, detail: str) -> JSONResponse:
    body = ErrorResponse(error=error, detail=detail, timestamp=datetime.now(timezone.utc))
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


async def generation_failed_handler(request: Request, exc: GenerationFailed) -> JSONResponse:
    """Map a failed feature call to 502: the upstream model did not deliver."""
    logger.warning(
        "api.generation_failed",
        feature=exc.feature,
        cause=type(exc.cause).__name__,
        error=str(exc.cause),
    )
    return _error(
        status.HTTP_502_BAD_GATEWAY,
        "GENERATION_FAILED",
        f"Failed to generate {exc.feature}. Please try again.",
    )


async def domain_error_handler(request: Request, exc: EduMorphError) -> JSONResponse:
    logger.warning("api.domain_error", error_type=type(exc).__name__, error=str(exc))

    if isinstance(exc, (NotFoundError, MilestoneNotFound)):
        return _error(status.HTTP_404_NOT_FOUND, "NOT_FOUND", str(exc))
    return _error(status.HTTP_400_BAD_REQUEST, "DOMAIN_ERROR", str(exc))


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle request validation errors."""
    formatted_errors = []
    for error in exc.errors():
        location = " -> ".join(str(loc) for loc in error["loc"])
        formatted_errors.append(f"{location}: {error['msg']}")

    logger.warning("api.validation_error", errors=formatted_errors)
    return _error(
        status.HTTP_422_UNPROCESSABLE_ENTITY,
        "VALIDATION_ERROR",
        "Validation failed: " + "; ".join(formatted_errors),
    )


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    logger.warning("api.http_exception", status_code=exc.status_code, detail=exc.detail)
    response = _error(exc.status_code, f"HTTP_{exc.status_code}", str(exc.detail))
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions."""
    logger.exception("api.unexpected_error", error_type=type(exc).__name__, error=str(exc))
    return _error(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "INTERNAL_SERVER_ERROR",
        "An unexpected error occurred. Please try again later.",
    )


def setup_error_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the application."""
    app.add_exception_handler(GenerationFailed, generation_failed_handler)
    app.add_exception_handler(EduMorphError, domain_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
