"""
Domain entities for the catalog bounded context.

Entities represent core business objects with identity and lifecycle.
They contain no framework imports and no IO operations.

A Book is identified by its asin and otherwise carries an open bag of
client-supplied attributes. The well-known ones (title, category) are
exposed as typed properties over that bag so the persisted attribute
order survives a load/save cycle untouched.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Optional
from uuid import uuid4

ASIN_KEY = "asin"
COMMENTS_KEY = "comments"
RESERVED_KEYS = frozenset({ASIN_KEY, COMMENTS_KEY})


def generate_id() -> str:
    """Return a fresh globally-unique identifier."""
    return str(uuid4())


def _parse_timestamp(text: str) -> Optional[datetime]:
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        return None


COMMENT_KEYS = ("_id", "username", "comment", "_createdDate")


@dataclass(frozen=True)
class Comment:
    """A reader comment owned by exactly one book.

    created_date keeps the persisted timestamp text verbatim, and extra
    holds any further keys the stored comment carries, so loading and
    saving a catalog never rewrites existing comments.
    """

    id: str
    username: str
    comment: str
    created_date: Optional[str] = None
    extra: dict[str, Any] = field(default_factory=dict)

    @property
    def created_at(self) -> Optional[datetime]:
        """The creation time, or None when absent or unparseable."""
        if self.created_date is None:
            return None
        return _parse_timestamp(self.created_date)

    @classmethod
    def new(cls, username: str, comment: str) -> "Comment":
        """Create a comment with a fresh id, stamped with the current UTC time."""
        return cls(
            id=generate_id(),
            username=username,
            comment=comment,
            created_date=datetime.now(timezone.utc).isoformat(),
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Comment":
        created = data.get("_createdDate")
        return cls(
            id=str(data["_id"]),
            username=data.get("username", ""),
            comment=data.get("comment", ""),
            created_date=None if created is None else str(created),
            extra={k: v for k, v in data.items() if k not in COMMENT_KEYS},
        )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "_id": self.id,
            "username": self.username,
            "comment": self.comment,
        }
        if self.created_date is not None:
            data["_createdDate"] = self.created_date
        data.update(self.extra)
        return data


@dataclass
class Book:
    """A catalog entry.

    Attributes:
        asin: Unique identifier within the collection.
        attributes: Open, ordered bag of client-supplied fields
            (title, category, price, ...). Never holds asin or comments.
        comments: Nested comments, or None until the first one is added.
    """

    asin: str
    attributes: dict[str, Any] = field(default_factory=dict)
    comments: Optional[list[Comment]] = None

    @property
    def title(self) -> Optional[str]:
        value = self.attributes.get("title")
        return value if isinstance(value, str) else None

    @property
    def category(self) -> Optional[str]:
        value = self.attributes.get("category")
        return value if isinstance(value, str) else None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Book":
        """Build a Book from its persisted JSON object."""
        raw_comments = data.get(COMMENTS_KEY)
        comments = None
        if raw_comments is not None:
            comments = [Comment.from_dict(c) for c in raw_comments]
        return cls(
            asin=str(data.get(ASIN_KEY, "")),
            attributes={k: v for k, v in data.items() if k not in RESERVED_KEYS},
            comments=comments,
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the persisted JSON object: asin, attributes, then comments."""
        data: dict[str, Any] = {ASIN_KEY: self.asin, **self.attributes}
        if self.comments is not None:
            data[COMMENTS_KEY] = [c.to_dict() for c in self.comments]
        return data

    def merged(self, patch: dict[str, Any]) -> "Book":
        """Shallow-merge patch over this book's attributes.

        Patch values win on overlapping keys; everything else is kept.
        Identity (asin) and comments are never taken from the patch.
        """
        attributes = dict(self.attributes)
        attributes.update({k: v for k, v in patch.items() if k not in RESERVED_KEYS})
        comments = list(self.comments) if self.comments is not None else None
        return Book(asin=self.asin, attributes=attributes, comments=comments)

    def find_comment(self, comment_id: str) -> Optional[Comment]:
        for comment in self.comments or []:
            if comment.id == comment_id:
                return comment
        return None

    def add_comment(self, comment: Comment) -> None:
        """Append a comment, creating the sequence if absent."""
        if self.comments is None:
            self.comments = [comment]
        else:
            self.comments = [*self.comments, comment]

    def remove_comment(self, comment_id: str) -> None:
        self.comments = [c for c in self.comments or [] if c.id != comment_id]


def find_book(books: list[Book], asin: str) -> Optional[Book]:
    """Return the first book whose asin matches, or None."""
    return next((book for book in books if book.asin == asin), None)


def index_of_book(books: list[Book], asin: str) -> int:
    """Return the position of the book with this asin, or -1."""
    for index, book in enumerate(books):
        if book.asin == asin:
            return index
    return -1
