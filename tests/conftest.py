"""
Shared fixtures for the catalog test suite.

Provides a throwaway JSON catalog on disk, an in-memory BookStore
fake for use-case tests, and a TestClient bound to a fresh app.
"""

import copy
import json
import threading
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from bookstore.core.config import Settings
from bookstore.domain.catalog.entities import Book
from bookstore.domain.catalog.ports import BookStore
from bookstore.main import create_app

SEED_BOOKS = [
    {"asin": "b-001", "title": "Dune", "category": "scifi", "price": 10.99},
    {"asin": "b-002", "title": "Foundation", "category": "scifi", "price": 8.99},
    {"asin": "b-003", "title": "The Way of Kings", "category": "fantasy"},
    {
        "asin": "b-004",
        "title": "Hyperion",
        "comments": [
            {
                "_id": "c-1",
                "username": "alice",
                "comment": "Loved it",
                "_createdDate": "2021-03-01T10:00:00.000Z",
            },
            {
                "_id": "c-2",
                "username": "bob",
                "comment": "Too long",
                "_createdDate": "2021-03-02T11:30:00+00:00",
            },
        ],
    },
]


class InMemoryBookStore(BookStore):
    """BookStore fake that hands out copies, as a file-backed store would."""

    def __init__(self, books: list[dict]) -> None:
        self._books = [Book.from_dict(copy.deepcopy(b)) for b in books]
        self._lock = threading.RLock()
        self.saves = 0

    def load(self) -> list[Book]:
        return copy.deepcopy(self._books)

    def save(self, books: list[Book]) -> None:
        self.saves += 1
        self._books = copy.deepcopy(books)

    def locked(self):
        return self._lock


@pytest.fixture
def memory_store() -> InMemoryBookStore:
    return InMemoryBookStore(SEED_BOOKS)


@pytest.fixture
def books_file(tmp_path: Path) -> Path:
    """A catalog document seeded with SEED_BOOKS."""
    path = tmp_path / "books.json"
    path.write_text(json.dumps(SEED_BOOKS), encoding="utf-8")
    return path


@pytest.fixture
def test_settings(books_file: Path) -> Settings:
    return Settings(
        books_path=books_file,
        rate_limit_default="1000/minute",
        cors_origins=["http://localhost:3000"],
    )


@pytest.fixture
def client(test_settings: Settings):
    with TestClient(create_app(test_settings)) as test_client:
        yield test_client
