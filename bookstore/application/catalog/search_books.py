"""
Use case: Search books by a title fragment.

Input: SearchBooksQuery (optional title fragment)
Output: list[Book]
Side effects: None (read-only query).
Failure cases: StorageError.
"""

import logging

from bookstore.application.catalog.dtos import SearchBooksQuery
from bookstore.domain.catalog.entities import Book
from bookstore.domain.catalog.ports import BookStore

logger = logging.getLogger(__name__)


class SearchBooksUseCase:
    """Orchestrates a case-sensitive substring search over titles."""

    def __init__(self, store: BookStore) -> None:
        self._store = store

    def execute(self, query: SearchBooksQuery) -> list[Book]:
        logger.info("Searching books: title=%r", query.title)
        books = self._store.load()
        if not query.title:
            return books
        return [
            book
            for book in books
            if book.title is not None and query.title in book.title
        ]
