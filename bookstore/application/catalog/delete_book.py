"""
Use case: Remove a book from the catalog.

Input: DeleteBookCommand (asin)
Output: None
Side effects: One full collection read; one write when the book exists.
Failure cases: BookNotFoundError, StorageError.
"""

import logging

from bookstore.application.catalog.dtos import DeleteBookCommand
from bookstore.domain.catalog.entities import find_book
from bookstore.domain.catalog.errors import BookNotFoundError
from bookstore.domain.catalog.ports import BookStore

logger = logging.getLogger(__name__)


class DeleteBookUseCase:
    def __init__(self, store: BookStore) -> None:
        self._store = store

    def execute(self, command: DeleteBookCommand) -> None:
        """Delete the book with the given asin.

        Raises:
            BookNotFoundError: If no book matches. Storage is left untouched.
        """
        with self._store.locked():
            books = self._store.load()
            if find_book(books, command.asin) is None:
                raise BookNotFoundError(command.asin)
            self._store.save([book for book in books if book.asin != command.asin])

        logger.info("Deleted book asin=%s", command.asin)
