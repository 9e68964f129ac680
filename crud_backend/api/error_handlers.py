"""
Global exception handlers.

- UserServiceError -> status and body chosen by the error itself
- RequestValidationError -> 400 with field-level errors
- Exception (catch-all) -> 500 with the raw error text
"""
import logging
from typing import Any, Dict, List

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ..domain.exceptions import PersistenceError, UserServiceError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_user_service_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_user_service_error_handler(app: FastAPI) -> None:

    @app.exception_handler(UserServiceError)
    async def user_service_error_handler(request: Request, exc: UserServiceError):
        if isinstance(exc, PersistenceError):
            logger.error(
                f"Database error on {request.method} {request.url.path}: {exc.detail}",
                exc_info=exc.cause or exc,
            )
        else:
            logger.info(f"{request.method} {request.url.path} -> {exc.http_status}: {exc.message}")
        return JSONResponse(status_code=exc.http_status, content=exc.to_response())


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        """Malformed bodies are reported like field validation failures."""
        logger.warning(f"Validation error on {request.url.path}: {exc.errors()}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "message": "Validation failed.",
                "errors": _build_field_errors(exc.errors()),
            },
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        logger.error(
            f"Unhandled exception on {request.method} {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": "Server error", "error": str(exc)},
        )


def _build_field_errors(errors: List[Dict[str, Any]]) -> List[Dict[str, str]]:
    field_errors = []
    for error in errors:
        location = [str(part) for part in error.get("loc", ()) if part != "body"]
        field_errors.append({
            "field": ".".join(location) or "body",
            "message": error.get("msg", "Invalid value"),
        })
    return field_errors
