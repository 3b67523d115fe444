"""
Tests for the catalog domain layer.

Tests entities, validation rules and error classes in isolation.
No external dependencies or IO required.
"""

from datetime import datetime, timezone

import pytest

from bookstore.domain.catalog.entities import Book, Comment, find_book, index_of_book
from bookstore.domain.catalog.errors import (
    BookNotFoundError,
    BookValidationError,
    CatalogDomainError,
    DuplicateBookError,
    StorageError,
)
from bookstore.domain.catalog.rules import (
    COMMENT_TOO_SHORT,
    USERNAME_TOO_SHORT,
    check_comment,
    check_new_book,
    check_patch,
    ensure_valid,
)


def _comment(comment_id: str, text: str = "Great read") -> Comment:
    return Comment(
        id=comment_id,
        username="reader",
        comment=text,
        created_date="2024-01-01T00:00:00+00:00",
    )


class TestBookEntity:
    """Tests for Book conversion and merge behaviour."""

    def test_from_dict_splits_known_and_open_fields(self) -> None:
        book = Book.from_dict(
            {"asin": "a1", "title": "Dune", "category": "scifi", "pages": 412}
        )
        assert book.asin == "a1"
        assert book.title == "Dune"
        assert book.category == "scifi"
        assert book.attributes == {"title": "Dune", "category": "scifi", "pages": 412}
        assert book.comments is None

    def test_to_dict_keeps_attribute_order_and_omits_absent_comments(self) -> None:
        raw = {"asin": "a1", "img": "x.png", "title": "Dune", "price": 3}
        assert list(Book.from_dict(raw).to_dict()) == ["asin", "img", "title", "price"]
        assert "comments" not in Book.from_dict(raw).to_dict()

    def test_non_string_title_is_not_exposed(self) -> None:
        assert Book.from_dict({"asin": "a1", "title": 42}).title is None

    def test_merged_overrides_only_patch_fields(self) -> None:
        book = Book.from_dict({"asin": "a1", "title": "Dune", "category": "scifi"})
        merged = book.merged({"title": "Dune Messiah", "pages": 256})
        assert merged.attributes == {
            "title": "Dune Messiah",
            "category": "scifi",
            "pages": 256,
        }
        assert book.title == "Dune"

    def test_merged_never_changes_identity_or_comments(self) -> None:
        book = Book(asin="a1", attributes={"title": "Dune"}, comments=[_comment("c1")])
        merged = book.merged({"asin": "other", "comments": []})
        assert merged.asin == "a1"
        assert merged.comments == [_comment("c1")]

    def test_add_comment_creates_sequence(self) -> None:
        book = Book(asin="a1")
        book.add_comment(_comment("c1"))
        book.add_comment(_comment("c2"))
        assert [c.id for c in book.comments] == ["c1", "c2"]

    def test_remove_comment_keeps_others_in_order(self) -> None:
        book = Book(asin="a1", comments=[_comment("c1"), _comment("c2"), _comment("c3")])
        book.remove_comment("c2")
        assert [c.id for c in book.comments] == ["c1", "c3"]

    def test_find_helpers(self) -> None:
        books = [Book(asin="a1"), Book(asin="a2")]
        assert find_book(books, "a2") is books[1]
        assert find_book(books, "zz") is None
        assert index_of_book(books, "a2") == 1
        assert index_of_book(books, "zz") == -1


class TestCommentEntity:
    """Tests for the Comment entity."""

    def test_new_comment_gets_unique_id_and_utc_timestamp(self) -> None:
        first = Comment.new("alice", "Loved it")
        second = Comment.new("alice", "Loved it")
        assert first.id != second.id
        assert first.created_at.tzinfo is not None

    def test_from_dict_accepts_zulu_timestamps(self) -> None:
        comment = Comment.from_dict(
            {
                "_id": "c1",
                "username": "alice",
                "comment": "Loved it",
                "_createdDate": "2021-03-01T10:00:00.000Z",
            }
        )
        assert comment.created_at == datetime(2021, 3, 1, 10, 0, tzinfo=timezone.utc)

    def test_to_dict_uses_persisted_keys(self) -> None:
        data = _comment("c1").to_dict()
        assert set(data) == {"_id", "username", "comment", "_createdDate"}
        assert Comment.from_dict(data) == _comment("c1")

    def test_stored_timestamp_text_is_kept_verbatim(self) -> None:
        raw = {
            "_id": "c1",
            "username": "alice",
            "comment": "Loved it",
            "_createdDate": "2021-03-01T10:00:00.000Z",
        }
        assert Comment.from_dict(raw).to_dict() == raw

    def test_extra_comment_keys_survive(self) -> None:
        raw = {"_id": "c1", "username": "alice", "comment": "Loved it", "likes": 4}
        assert Comment.from_dict(raw).to_dict()["likes"] == 4

    def test_missing_timestamp_is_tolerated(self) -> None:
        comment = Comment.from_dict({"_id": "c1", "username": "alice", "comment": "Hi!"})
        assert comment.created_at is None
        assert "_createdDate" not in comment.to_dict()

    def test_unparseable_timestamp_is_none(self) -> None:
        comment = Comment.from_dict(
            {"_id": "c1", "username": "a", "comment": "b", "_createdDate": "yesterday"}
        )
        assert comment.created_at is None
        assert comment.to_dict()["_createdDate"] == "yesterday"


class TestValidationRules:
    """Tests for create, update and comment payload rules."""

    def test_create_requires_title(self) -> None:
        problems = check_new_book({"category": "scifi"})
        assert [p["field"] for p in problems] == ["title"]

    def test_create_accepts_open_attributes(self) -> None:
        assert check_new_book({"title": "Dune", "pages": 412, "asin": "x"}) == []

    def test_create_rejects_negative_price_and_comments(self) -> None:
        problems = check_new_book({"title": "Dune", "price": -1, "comments": []})
        assert {p["field"] for p in problems} == {"price", "comments"}

    def test_patch_must_not_be_empty(self) -> None:
        assert check_patch("a1", {})[0]["field"] == "body"

    def test_patch_rejects_different_asin_but_allows_same(self) -> None:
        assert check_patch("a1", {"asin": "a2"})[0]["field"] == "asin"
        assert check_patch("a1", {"asin": "a1", "title": "New"}) == []

    def test_patch_rejects_blank_title(self) -> None:
        assert check_patch("a1", {"title": "  "})[0]["field"] == "title"

    @pytest.mark.parametrize(
        "username, comment, expected",
        [
            ("al", "Loved it", [USERNAME_TOO_SHORT]),
            ("alice", "ok", [COMMENT_TOO_SHORT]),
            ("al", "ok", [COMMENT_TOO_SHORT, USERNAME_TOO_SHORT]),
            ("ali", "abc", []),
        ],
    )
    def test_comment_minimum_lengths(self, username, comment, expected) -> None:
        assert [p["message"] for p in check_comment(username, comment)] == expected

    def test_ensure_valid_raises_with_details(self) -> None:
        with pytest.raises(BookValidationError) as exc_info:
            ensure_valid(check_comment("a", "b"))
        assert exc_info.value.status_code == 400
        assert len(exc_info.value.errors) == 2

    def test_ensure_valid_passes_silently(self) -> None:
        ensure_valid([])


class TestDomainErrors:
    """Tests for domain error classes."""

    def test_statuses(self) -> None:
        assert BookValidationError([]).status_code == 400
        assert DuplicateBookError("a1").status_code == 400
        assert BookNotFoundError("a1").status_code == 404
        assert StorageError("disk full").status_code == 500

    def test_duplicate_message(self) -> None:
        assert DuplicateBookError("a1").message == "Book already in db"

    def test_not_found_carries_asin(self) -> None:
        error = BookNotFoundError("a1")
        assert error.asin == "a1"
        assert "a1" in str(error)

    def test_status_override_on_base_error(self) -> None:
        error = CatalogDomainError("teapot", status_code=418)
        assert error.status_code == 418
        assert CatalogDomainError("boom").status_code == 500

    def test_storage_error_hides_reason_from_message(self) -> None:
        error = StorageError("/secret/path unreadable")
        assert "/secret" not in error.message
        assert error.reason == "/secret/path unreadable"
