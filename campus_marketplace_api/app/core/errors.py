"""
Domain errors and their HTTP representation.

Services raise the typed errors defined here; ``register_error_handlers``
installs FastAPI exception handlers that turn them into JSON responses
of the form ``{"error": <kind>, "detail": <message>}``.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


logger = logging.getLogger(__name__)


class DomainError(Exception):
    """Base class for errors that map onto a client-visible status."""

    error = "error"
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail


class NotFoundError(DomainError):
    """A username did not resolve to a user record."""

    error = "not_found"
    status_code = status.HTTP_404_NOT_FOUND


class ValidationError(DomainError):
    """A request parameter or body was missing or empty."""

    error = "validation_error"
    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY


class ConflictError(DomainError):
    """A unique constraint (e.g. username) would be violated."""

    error = "conflict"
    status_code = status.HTTP_409_CONFLICT


def error_body(error: str, detail: str) -> dict:
    return {"error": error, "detail": detail}


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    logger.info("%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc.detail)
    return JSONResponse(status_code=exc.status_code, content=error_body(exc.error, exc.detail))


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Reshape FastAPI's validation errors (e.g. a missing query parameter)."""
    problems = []
    for err in exc.errors():
        location = ".".join(str(part) for part in err.get("loc", ()))
        problems.append(f"{location}: {err.get('msg')}")
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=error_body(ValidationError.error, "; ".join(problems)),
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainError, domain_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
