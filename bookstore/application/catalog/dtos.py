"""
Data Transfer Objects for the catalog application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass, field
from typing import Any, Optional

from bookstore.domain.catalog.entities import Comment

COMMENT_ADDED = "Comment successfully added"
COMMENT_REMOVED = "Comment successfully removed"
BOOK_NOT_FOUND = "No book with that asin found"
NO_COMMENTS_FOR_BOOK = "No comments found for that book"
NO_COMMENTS_FOR_ASIN = "No comments found for the provided asin"
COMMENT_NOT_FOUND = "Comment with that ID does not exist within the provided asin"


@dataclass(frozen=True)
class ListBooksQuery:
    """Input DTO for listing books.

    Attributes:
        category: Exact category to keep. None returns everything.
    """

    category: Optional[str] = None


@dataclass(frozen=True)
class SearchBooksQuery:
    """Input DTO for searching books by title.

    Attributes:
        title: Case-sensitive fragment of the title. Empty or None
            returns everything.
    """

    title: Optional[str] = None


@dataclass(frozen=True)
class GetBookQuery:
    asin: str


@dataclass(frozen=True)
class CreateBookCommand:
    """Input DTO for creating a book.

    Attributes:
        payload: The client-supplied fields. An asin in here is only
            used for the duplicate check; the stored asin is generated.
    """

    payload: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class CreateBookResult:
    asin: str


@dataclass(frozen=True)
class UpdateBookCommand:
    asin: str
    patch: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class DeleteBookCommand:
    asin: str


@dataclass(frozen=True)
class AddCommentCommand:
    asin: str
    username: str
    comment: str


@dataclass(frozen=True)
class ListCommentsQuery:
    asin: str


@dataclass(frozen=True)
class CommentsResult:
    """Output DTO for listing comments.

    Exactly one of comments or message is set.
    """

    comments: Optional[list[Comment]] = None
    message: Optional[str] = None


@dataclass(frozen=True)
class RemoveCommentCommand:
    asin: str
    comment_id: str


@dataclass(frozen=True)
class StatusMessage:
    """Output DTO for informational outcomes.

    Attributes:
        message: Text shown to the client.
        changed: Whether the stored collection was modified.
    """

    message: str
    changed: bool = False
