"""
Error taxonomy shared by the services and the HTTP layer.

Services raise these; ``register_exception_handlers`` turns them into
``{"error": ...}`` JSON bodies so the UI can display the message as-is.
"""
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

logger = logging.getLogger(__name__)


class ClubError(Exception):
    status_code = 400

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationError(ClubError):
    """Missing field or invalid status/assignment combination."""
    status_code = 400


class NotFoundError(ClubError):
    """Referenced document does not exist (404 for the target, 400 for a reference)."""
    status_code = 404


class DependencyError(ClubError):
    """The document store or object storage failed."""
    status_code = 500

    def __init__(self, message: str, details: str | None = None):
        super().__init__(message)
        self.details = details


def register_exception_handlers(app: FastAPI):

    @app.exception_handler(ClubError)
    async def club_error_handler(request: Request, exc: ClubError):
        if isinstance(exc, DependencyError):
            logger.error(f"[API] {request.method} {request.url.path} failed: {exc.message} ({exc.details})")
            return JSONResponse(
                status_code=exc.status_code,
                content={"error": exc.message, "details": exc.details},
            )
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        message = errors[0].get("msg", "Invalid request") if errors else "Invalid request"
        return JSONResponse(status_code=400, content={"error": message})

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception(f"[API] Unhandled error on {request.method} {request.url.path}")
        return JSONResponse(
            status_code=500,
            content={"error": "Internal server error", "details": str(exc)},
        )
