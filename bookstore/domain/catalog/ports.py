"""
Port interfaces (ABCs) for the catalog bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager

from bookstore.domain.catalog.entities import Book


class BookStore(ABC):
    """Port for loading and overwriting the whole book collection.

    The collection is the unit of persistence: it is read fully,
    mutated in memory, and written back fully.
    """

    @abstractmethod
    def load(self) -> list[Book]:
        """Return every book, in stored order.

        Raises:
            StorageError: If the document cannot be read or parsed.
        """
        raise NotImplementedError

    @abstractmethod
    def save(self, books: list[Book]) -> None:
        """Replace the stored collection with books.

        Raises:
            StorageError: If the document cannot be written.
        """
        raise NotImplementedError

    @abstractmethod
    def locked(self) -> AbstractContextManager[None]:
        """Return a context manager serializing read-modify-write spans."""
        raise NotImplementedError
