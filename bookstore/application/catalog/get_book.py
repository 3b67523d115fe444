"""
Use case: Fetch a single book by asin.

Input: GetBookQuery (asin)
Output: Book
Side effects: None (read-only query).
Failure cases: BookNotFoundError, StorageError.
"""

import logging

from bookstore.application.catalog.dtos import GetBookQuery
from bookstore.domain.catalog.entities import Book, find_book
from bookstore.domain.catalog.errors import BookNotFoundError
from bookstore.domain.catalog.ports import BookStore

logger = logging.getLogger(__name__)


class GetBookUseCase:
    def __init__(self, store: BookStore) -> None:
        self._store = store

    def execute(self, query: GetBookQuery) -> Book:
        """Return the book with the requested asin.

        Raises:
            BookNotFoundError: If no book matches.
        """
        logger.info("Fetching book asin=%s", query.asin)
        book = find_book(self._store.load(), query.asin)
        if book is None:
            raise BookNotFoundError(query.asin)
        return book
