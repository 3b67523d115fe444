"""
Use case: Remove one comment from a book.

Input: RemoveCommentCommand (asin, comment_id)
Output: StatusMessage
Side effects: One full collection read; one write when the comment exists.
Failure cases: StorageError. Missing book, missing comment sequence and
unknown comment id are each reported as a distinct informational message.
"""

import logging

from bookstore.application.catalog.dtos import (
    BOOK_NOT_FOUND,
    COMMENT_NOT_FOUND,
    COMMENT_REMOVED,
    NO_COMMENTS_FOR_ASIN,
    RemoveCommentCommand,
    StatusMessage,
)
from bookstore.domain.catalog.entities import find_book
from bookstore.domain.catalog.ports import BookStore

logger = logging.getLogger(__name__)


class RemoveCommentUseCase:
    """Orchestrates removing exactly one comment by its id.

    All other comments of the book keep their content and order.
    """

    def __init__(self, store: BookStore) -> None:
        self._store = store

    def execute(self, command: RemoveCommentCommand) -> StatusMessage:
        with self._store.locked():
            books = self._store.load()
            book = find_book(books, command.asin)
            if book is None:
                return StatusMessage(message=BOOK_NOT_FOUND)
            if not book.comments:
                return StatusMessage(message=NO_COMMENTS_FOR_ASIN)
            if book.find_comment(command.comment_id) is None:
                logger.warning(
                    "Comment id=%s not found on asin=%s",
                    command.comment_id,
                    command.asin,
                )
                return StatusMessage(message=COMMENT_NOT_FOUND)

            book.remove_comment(command.comment_id)
            self._store.save(books)

        logger.info("Removed comment id=%s from asin=%s", command.comment_id, command.asin)
        return StatusMessage(message=COMMENT_REMOVED, changed=True)
