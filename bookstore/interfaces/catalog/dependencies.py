"""
Dependency injection for the catalog bounded context.

Provides FastAPI dependency functions that wire the application's
BookStore into use cases via constructor injection. The store lives
on app.state so every request shares the same writer lock.
"""

from fastapi import Depends, Request

from bookstore.application.catalog.add_comment import AddCommentUseCase
from bookstore.application.catalog.create_book import CreateBookUseCase
from bookstore.application.catalog.delete_book import DeleteBookUseCase
from bookstore.application.catalog.get_book import GetBookUseCase
from bookstore.application.catalog.list_books import ListBooksUseCase
from bookstore.application.catalog.list_comments import ListCommentsUseCase
from bookstore.application.catalog.remove_comment import RemoveCommentUseCase
from bookstore.application.catalog.search_books import SearchBooksUseCase
from bookstore.application.catalog.update_book import UpdateBookUseCase
from bookstore.domain.catalog.ports import BookStore


def get_book_store(request: Request) -> BookStore:
    """Return the store configured by the composition root."""
    return request.app.state.book_store


def get_list_books_use_case(
    store: BookStore = Depends(get_book_store),
) -> ListBooksUseCase:
    return ListBooksUseCase(store=store)


def get_search_books_use_case(
    store: BookStore = Depends(get_book_store),
) -> SearchBooksUseCase:
    return SearchBooksUseCase(store=store)


def get_get_book_use_case(
    store: BookStore = Depends(get_book_store),
) -> GetBookUseCase:
    return GetBookUseCase(store=store)


def get_create_book_use_case(
    store: BookStore = Depends(get_book_store),
) -> CreateBookUseCase:
    return CreateBookUseCase(store=store)


def get_update_book_use_case(
    store: BookStore = Depends(get_book_store),
) -> UpdateBookUseCase:
    return UpdateBookUseCase(store=store)


def get_delete_book_use_case(
    store: BookStore = Depends(get_book_store),
) -> DeleteBookUseCase:
    return DeleteBookUseCase(store=store)


def get_add_comment_use_case(
    store: BookStore = Depends(get_book_store),
) -> AddCommentUseCase:
    return AddCommentUseCase(store=store)


def get_list_comments_use_case(
    store: BookStore = Depends(get_book_store),
) -> ListCommentsUseCase:
    return ListCommentsUseCase(store=store)


def get_remove_comment_use_case(
    store: BookStore = Depends(get_book_store),
) -> RemoveCommentUseCase:
    return RemoveCommentUseCase(store=store)
