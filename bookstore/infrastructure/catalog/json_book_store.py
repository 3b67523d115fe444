"""
Adapter: Book collection persisted as a single JSON document.

Implements the BookStore port.
The document's top-level value is the array of books. Every load
re-reads the file (no caching); every save rewrites it through a
temporary file and an atomic rename.
"""

import json
import logging
import os
import tempfile
import threading
from contextlib import AbstractContextManager
from pathlib import Path
from typing import Union

from bookstore.domain.catalog.entities import Book
from bookstore.domain.catalog.errors import StorageError
from bookstore.domain.catalog.ports import BookStore

logger = logging.getLogger(__name__)


class JsonBookStore(BookStore):
    """Concrete adapter for the file-backed book collection.

    Args:
        path: Location of the JSON document.
    """

    def __init__(self, path: Union[str, Path]) -> None:
        self._path = Path(path)
        self._lock = threading.RLock()

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> list[Book]:
        """Read and parse the whole collection.

        Returns:
            Books in stored order.

        Raises:
            StorageError: If the file is missing, unreadable, not valid
                JSON, or its top-level value is not an array.
        """
        try:
            with self._path.open("r", encoding="utf-8") as handle:
                raw = json.load(handle)
        except (OSError, ValueError) as exc:
            logger.error("Failed to read catalog %s: %s", self._path, exc)
            raise StorageError(f"cannot read {self._path.name}") from exc

        if not isinstance(raw, list):
            logger.error("Catalog %s is not a JSON array", self._path)
            raise StorageError(f"{self._path.name} does not hold a list of books")

        try:
            return [Book.from_dict(item) for item in raw]
        except (AttributeError, KeyError, TypeError, ValueError) as exc:
            logger.error("Malformed book entry in %s: %s", self._path, exc)
            raise StorageError(f"malformed entry in {self._path.name}") from exc

    def save(self, books: list[Book]) -> None:
        """Overwrite the document with books.

        Raises:
            StorageError: If the temporary file cannot be written or renamed.
                The previous document is left untouched in that case.
        """
        payload = [book.to_dict() for book in books]
        directory = self._path.parent
        tmp_name = None
        try:
            directory.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=directory,
                prefix=f".{self._path.name}.",
                suffix=".tmp",
                delete=False,
            ) as handle:
                tmp_name = handle.name
                json.dump(payload, handle, ensure_ascii=False, indent=2)
                handle.flush()
                os.fsync(handle.fileno())
            os.replace(tmp_name, self._path)
        except (OSError, TypeError, ValueError) as exc:
            logger.error("Failed to write catalog %s: %s", self._path, exc)
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise StorageError(f"cannot write {self._path.name}") from exc

        logger.debug("Wrote %d books to %s", len(books), self._path)

    def locked(self) -> AbstractContextManager[None]:
        """Hold the store's writer lock for a read-modify-write span."""
        return self._lock
