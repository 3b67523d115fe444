"""
Use case: List books, optionally narrowed to one category.

Input: ListBooksQuery (optional category)
Output: list[Book]
Side effects: None (read-only query).
Failure cases: StorageError.
"""

import logging

from bookstore.application.catalog.dtos import ListBooksQuery
from bookstore.domain.catalog.entities import Book
from bookstore.domain.catalog.ports import BookStore

logger = logging.getLogger(__name__)


class ListBooksUseCase:
    """Orchestrates listing the catalog.

    Books lacking a category never match a category filter.
    """

    def __init__(self, store: BookStore) -> None:
        self._store = store

    def execute(self, query: ListBooksQuery) -> list[Book]:
        """Run the list books use case.

        Args:
            query: Optional exact category filter.

        Returns:
            Matching books in stored order.
        """
        logger.info("Listing books: category=%s", query.category)
        books = self._store.load()
        if not query.category:
            return books
        return [book for book in books if book.category == query.category]
