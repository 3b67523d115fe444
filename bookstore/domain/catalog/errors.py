"""
Domain-specific errors for the catalog bounded context.

All errors raised from the domain layer must be defined here.
Each error carries the HTTP status it is meant to surface as, and is
rendered by the responder chain at the interface layer.
No framework imports allowed.
"""

from typing import Optional


class CatalogDomainError(Exception):
    """Base error for all catalog domain errors.

    Attributes:
        message: Human-readable description of the failure.
        status_code: Status the responder chain should render.
    """

    status_code: int = 500

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class BookValidationError(CatalogDomainError):
    """Raised when a payload breaks the declared field rules."""

    status_code = 400

    def __init__(self, errors: list[dict[str, str]]) -> None:
        super().__init__("; ".join(e["message"] for e in errors) or "Invalid payload")
        self.errors = errors


class DuplicateBookError(CatalogDomainError):
    """Raised when a create payload names an asin already in the catalog."""

    status_code = 400

    def __init__(self, asin: str) -> None:
        super().__init__("Book already in db")
        self.asin = asin


class BookNotFoundError(CatalogDomainError):
    """Raised when no book carries the requested asin."""

    status_code = 404

    def __init__(self, asin: str) -> None:
        super().__init__(f"Book not found: {asin}")
        self.asin = asin


class StorageError(CatalogDomainError):
    """Raised when the persisted catalog cannot be read or written."""

    status_code = 500

    def __init__(self, reason: str) -> None:
        super().__init__("An error occurred while accessing the catalog file")
        self.reason = reason
