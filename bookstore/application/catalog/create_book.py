"""
Use case: Add a new book to the catalog.

Input: CreateBookCommand (client-supplied fields)
Output: CreateBookResult (generated asin)
Side effects: One full collection read and one full collection write.
Failure cases: BookValidationError, DuplicateBookError, StorageError.
"""

import logging

from bookstore.application.catalog.dtos import CreateBookCommand, CreateBookResult
from bookstore.domain.catalog.entities import ASIN_KEY, Book, find_book, generate_id
from bookstore.domain.catalog.errors import DuplicateBookError
from bookstore.domain.catalog.ports import BookStore
from bookstore.domain.catalog.rules import check_new_book, ensure_valid

logger = logging.getLogger(__name__)


class CreateBookUseCase:
    """Orchestrates book creation.

    Validates the payload, rejects a client-supplied asin that is
    already taken, then appends the book under a freshly generated asin.
    """

    def __init__(self, store: BookStore) -> None:
        self._store = store

    def execute(self, command: CreateBookCommand) -> CreateBookResult:
        """Run the create book use case.

        Args:
            command: The new book's fields.

        Returns:
            The asin assigned to the stored book.

        Raises:
            BookValidationError: If the payload breaks the create rules.
            DuplicateBookError: If the payload's asin already exists.
        """
        payload = command.payload
        ensure_valid(check_new_book(payload))

        with self._store.locked():
            books = self._store.load()
            requested = payload.get(ASIN_KEY)
            if requested is not None and find_book(books, str(requested)) is not None:
                logger.warning("Rejected duplicate asin=%s", requested)
                raise DuplicateBookError(str(requested))

            book = Book.from_dict({**payload, ASIN_KEY: generate_id()})
            books.append(book)
            self._store.save(books)

        logger.info("Created book asin=%s", book.asin)
        return CreateBookResult(asin=book.asin)
