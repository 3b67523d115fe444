"""
Use case: List the comments of a book.

Input: ListCommentsQuery (asin)
Output: CommentsResult
Side effects: None (read-only query).
Failure cases: StorageError. A missing book or an empty comment
sequence is reported as an informational message, not an error.
"""

import logging

from bookstore.application.catalog.dtos import (
    BOOK_NOT_FOUND,
    NO_COMMENTS_FOR_BOOK,
    CommentsResult,
    ListCommentsQuery,
)
from bookstore.domain.catalog.entities import find_book
from bookstore.domain.catalog.ports import BookStore

logger = logging.getLogger(__name__)


class ListCommentsUseCase:
    def __init__(self, store: BookStore) -> None:
        self._store = store

    def execute(self, query: ListCommentsQuery) -> CommentsResult:
        logger.info("Listing comments for asin=%s", query.asin)
        book = find_book(self._store.load(), query.asin)
        if book is None:
            return CommentsResult(message=BOOK_NOT_FOUND)
        if not book.comments:
            return CommentsResult(message=NO_COMMENTS_FOR_BOOK)
        return CommentsResult(comments=list(book.comments))
