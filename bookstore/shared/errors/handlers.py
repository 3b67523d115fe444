"""
Centralized error handlers for FastAPI.

Domain errors carry the status they should surface as. A single handler
walks an ordered chain of responders; the first one that recognizes the
status writes the response, and a catch-all covers everything else.
No stack traces or internal details are exposed to clients.
"""

import logging
from typing import Any, Callable, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from bookstore.domain.catalog.errors import BookValidationError, CatalogDomainError

logger = logging.getLogger(__name__)

HTTP_400 = 400
HTTP_404 = 404
HTTP_500 = 500

NOT_FOUND_MESSAGE = "Resource not found!"
INTERNAL_ERROR_MESSAGE = "Internal server error"

Responder = Callable[[CatalogDomainError], Optional[JSONResponse]]


def _error_response(status_code: int, error: str, detail: Any = None) -> JSONResponse:
    """Build a consistent JSON error response."""
    body: dict[str, Any] = {"error": error}
    if detail:
        body["detail"] = detail
    return JSONResponse(status_code=status_code, content=body)


def respond_bad_request(exc: CatalogDomainError) -> Optional[JSONResponse]:
    """Render 400 errors with their message and any validation details."""
    if exc.status_code != HTTP_400:
        return None
    logger.warning("Bad request: %s", exc.message)
    return _error_response(HTTP_400, exc.message, getattr(exc, "errors", None))


def respond_not_found(exc: CatalogDomainError) -> Optional[JSONResponse]:
    """Render 404 errors with a fixed body."""
    if exc.status_code != HTTP_404:
        return None
    logger.warning("Not found: %s", exc.message)
    return _error_response(HTTP_404, NOT_FOUND_MESSAGE)


def respond_generic(exc: CatalogDomainError) -> JSONResponse:
    """Catch-all: render the error's own status (default 500) and message."""
    status_code = exc.status_code or HTTP_500
    logger.error("Unhandled catalog error (%d): %s", status_code, exc.message)
    return _error_response(status_code, exc.message)


RESPONDER_CHAIN: tuple[Responder, ...] = (respond_bad_request, respond_not_found)


def render_domain_error(exc: CatalogDomainError) -> JSONResponse:
    """Pass exc down the responder chain and return the first response."""
    for responder in RESPONDER_CHAIN:
        response = responder(exc)
        if response is not None:
            return response
    return respond_generic(exc)


def _validation_problems(exc: RequestValidationError) -> list[dict[str, str]]:
    problems = []
    for error in exc.errors():
        location = [str(part) for part in error.get("loc", ()) if part != "body"]
        problems.append(
            {"field": ".".join(location) or "body", "message": error.get("msg", "")}
        )
    return problems


def register_error_handlers(app: FastAPI) -> None:
    """Register the responder chain on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(CatalogDomainError)
    async def handle_catalog_domain(
        _request: Request, exc: CatalogDomainError
    ) -> JSONResponse:
        """Route catalog errors through the responder chain."""
        return render_domain_error(exc)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        _request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Render malformed request bodies as 400, like domain validation."""
        return render_domain_error(BookValidationError(_validation_problems(exc)))

    @app.exception_handler(Exception)
    async def handle_unexpected(
        _request: Request, exc: Exception
    ) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return _error_response(HTTP_500, INTERNAL_ERROR_MESSAGE)
