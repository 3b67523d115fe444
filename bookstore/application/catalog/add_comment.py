"""
Use case: Attach a comment to a book.

Input: AddCommentCommand (asin, username, comment)
Output: StatusMessage
Side effects: One full collection read and one full collection write.
Failure cases: BookValidationError, BookNotFoundError, StorageError.
"""

import logging

from bookstore.application.catalog.dtos import (
    COMMENT_ADDED,
    AddCommentCommand,
    StatusMessage,
)
from bookstore.domain.catalog.entities import Comment, find_book
from bookstore.domain.catalog.errors import BookNotFoundError
from bookstore.domain.catalog.ports import BookStore
from bookstore.domain.catalog.rules import check_comment, ensure_valid

logger = logging.getLogger(__name__)


class AddCommentUseCase:
    """Orchestrates adding a comment.

    Field rules are checked before storage is touched, and a missing
    book is a BookNotFoundError rather than a silent no-op.
    """

    def __init__(self, store: BookStore) -> None:
        self._store = store

    def execute(self, command: AddCommentCommand) -> StatusMessage:
        """Run the add comment use case.

        Raises:
            BookValidationError: If username or comment is shorter than 3.
            BookNotFoundError: If no book carries the asin.
        """
        ensure_valid(check_comment(command.username, command.comment))

        with self._store.locked():
            books = self._store.load()
            book = find_book(books, command.asin)
            if book is None:
                raise BookNotFoundError(command.asin)

            comment = Comment.new(command.username, command.comment)
            book.add_comment(comment)
            self._store.save(books)

        logger.info("Added comment id=%s to asin=%s", comment.id, command.asin)
        return StatusMessage(message=COMMENT_ADDED, changed=True)
