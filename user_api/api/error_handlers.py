"""
Global exception handlers.

Every error leaves the service in one of three shapes:
    - 422 {"errors": [{"field", "message", "location"}]} for invalid input
    - {"error": "<message>"} for HTTP errors raised by controllers (404, 500)
    - 500 {"error": "Server error"} for anything unhandled, details only in logs
"""

# Standard library imports
import logging

# External package imports
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

# Local application imports
from ..application.exceptions import UserValidationError
from ..application.validation.user_validation import violations_from_errors

logger = logging.getLogger(__name__)

UNPROCESSABLE_STATUS = 422


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_user_validation_handler(app)
    _register_request_validation_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _register_user_validation_handler(app: FastAPI) -> None:

    @app.exception_handler(UserValidationError)
    async def user_validation_error_handler(request: Request, exc: UserValidationError):
        return JSONResponse(
            status_code=UNPROCESSABLE_STATUS,
            content={"errors": [violation.to_dict() for violation in exc.violations]},
        )


def _register_request_validation_handler(app: FastAPI) -> None:
    """Failures from request DTOs and path parameters"""

    @app.exception_handler(RequestValidationError)
    async def request_validation_error_handler(request: Request, exc: RequestValidationError):
        violations = violations_from_errors(exc.errors())
        logger.warning(f"Rejected request on {request.method} {request.url.path}: {[v.field for v in violations]}")
        return JSONResponse(
            status_code=UNPROCESSABLE_STATUS,
            content={"errors": [violation.to_dict() for violation in violations]},
        )


def _register_http_error_handler(app: FastAPI) -> None:

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all; internal details stay in the logs."""
        logger.error(
            f"Unhandled exception on {request.method} {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Server error"},
        )


