"""
Use case: Patch an existing book.

Input: UpdateBookCommand (asin, partial fields)
Output: list[Book] (the full updated collection)
Side effects: One full collection read and one full collection write.
Failure cases: BookValidationError, BookNotFoundError, StorageError.
"""

import logging

from bookstore.application.catalog.dtos import UpdateBookCommand
from bookstore.domain.catalog.entities import Book, index_of_book
from bookstore.domain.catalog.errors import BookNotFoundError
from bookstore.domain.catalog.ports import BookStore
from bookstore.domain.catalog.rules import check_patch, ensure_valid

logger = logging.getLogger(__name__)


class UpdateBookUseCase:
    """Orchestrates a shallow-merge update of one book."""

    def __init__(self, store: BookStore) -> None:
        self._store = store

    def execute(self, command: UpdateBookCommand) -> list[Book]:
        """Run the update book use case.

        Returns:
            The whole collection after the update, in stored order.

        Raises:
            BookValidationError: If the patch breaks the update rules.
            BookNotFoundError: If no book carries the asin.
        """
        ensure_valid(check_patch(command.asin, command.patch))

        with self._store.locked():
            books = self._store.load()
            index = index_of_book(books, command.asin)
            if index == -1:
                raise BookNotFoundError(command.asin)

            updated = [
                *books[:index],
                books[index].merged(command.patch),
                *books[index + 1:],
            ]
            self._store.save(updated)

        logger.info(
            "Updated book asin=%s fields=%s", command.asin, sorted(command.patch)
        )
        return updated
