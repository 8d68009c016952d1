"""
Exception handlers mapping catalog errors to HTTP responses.

Every error body has the shape {"type": ..., "message": ...}. Validation
failures return a list of such bodies, one per offending field.
"""

from logging import getLogger

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from movie_catalog.core.exceptions import (
    CatalogError,
    MovieAlreadyExists,
    MovieNotFound,
    SuggestionUnavailable,
)

logger = getLogger(__name__)

STATUS_BY_ERROR = {
    MovieNotFound: status.HTTP_404_NOT_FOUND,
    MovieAlreadyExists: status.HTTP_400_BAD_REQUEST,
    SuggestionUnavailable: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def error_body(kind: str, message: str) -> dict:
    return {"type": kind, "message": message}


def register_exception_handlers(app: FastAPI):
    @app.exception_handler(CatalogError)
    async def catalog_error_handler(_: Request, exc: CatalogError):
        status_code = STATUS_BY_ERROR.get(type(exc), status.HTTP_500_INTERNAL_SERVER_ERROR)
        logger.warning("%s %s: %s", status_code, exc.kind, exc.message)
        return JSONResponse(status_code=status_code, content=error_body(exc.kind, exc.message))

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(_: Request, exc: RequestValidationError):
        errors = [
            error_body(str(err["loc"][-1]) if err.get("loc") else "request", err["msg"])
            for err in exc.errors()
        ]
        logger.warning("400 validation failed: %s", errors)
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=errors)

    @app.exception_handler(Exception)
    async def generic_exception_handler(_: Request, exc: Exception):
        logger.exception("Unhandled error")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_body("unknown-error", str(exc)),
        )
