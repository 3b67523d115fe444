"""
FastAPI router for the catalog bounded context.

All routes delegate to use cases. No business logic here.
Book bodies are returned in their persisted layout (asin, open
attributes, comments) rather than through a response model, so
attributes the catalog does not know about round-trip unchanged.
Error mapping is handled by the centralized responder chain.
"""

from typing import Any, Optional, Union

from fastapi import APIRouter, Depends, Response, status

from bookstore.application.catalog.add_comment import AddCommentUseCase
from bookstore.application.catalog.create_book import CreateBookUseCase
from bookstore.application.catalog.delete_book import DeleteBookUseCase
from bookstore.application.catalog.dtos import (
    AddCommentCommand,
    CreateBookCommand,
    DeleteBookCommand,
    GetBookQuery,
    ListBooksQuery,
    ListCommentsQuery,
    RemoveCommentCommand,
    SearchBooksQuery,
    UpdateBookCommand,
)
from bookstore.application.catalog.get_book import GetBookUseCase
from bookstore.application.catalog.list_books import ListBooksUseCase
from bookstore.application.catalog.list_comments import ListCommentsUseCase
from bookstore.application.catalog.remove_comment import RemoveCommentUseCase
from bookstore.application.catalog.search_books import SearchBooksUseCase
from bookstore.application.catalog.update_book import UpdateBookUseCase
from bookstore.domain.catalog.entities import Book
from bookstore.interfaces.catalog.dependencies import (
    get_add_comment_use_case,
    get_create_book_use_case,
    get_delete_book_use_case,
    get_get_book_use_case,
    get_list_books_use_case,
    get_list_comments_use_case,
    get_remove_comment_use_case,
    get_search_books_use_case,
    get_update_book_use_case,
)
from bookstore.interfaces.catalog.schemas import (
    AddCommentRequest,
    BookItem,
    CommentItem,
    CreateBookRequest,
    ErrorResponse,
    MessageResponse,
    SearchBooksRequest,
    UpdateBookRequest,
)

router = APIRouter(prefix="/books", tags=["books"])

BAD_REQUEST = {400: {"model": ErrorResponse}}
NOT_FOUND = {404: {"model": ErrorResponse}}


def _books_body(books: list[Book]) -> list[dict[str, Any]]:
    return [book.to_dict() for book in books]


@router.post(
    "/search",
    response_model=None,
    responses={200: {"model": list[BookItem]}},
    summary="Search books by title",
    description="Case-sensitive substring match on title; no title returns all books.",
)
def search_books(
    request: Optional[SearchBooksRequest] = None,
    use_case: SearchBooksUseCase = Depends(get_search_books_use_case),
) -> list[dict[str, Any]]:
    query = SearchBooksQuery(title=request.title if request else None)
    return _books_body(use_case.execute(query))


@router.get(
    "",
    response_model=None,
    responses={200: {"model": list[BookItem]}},
    summary="List books",
    description="Return every book, or only those whose category matches exactly.",
)
def list_books(
    category: Optional[str] = None,
    use_case: ListBooksUseCase = Depends(get_list_books_use_case),
) -> list[dict[str, Any]]:
    return _books_body(use_case.execute(ListBooksQuery(category=category)))


@router.get(
    "/{asin}",
    response_model=None,
    responses={200: {"model": BookItem}, **NOT_FOUND},
    summary="Get a book",
)
def get_book(
    asin: str,
    use_case: GetBookUseCase = Depends(get_get_book_use_case),
) -> dict[str, Any]:
    return use_case.execute(GetBookQuery(asin=asin)).to_dict()


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_class=Response,
    responses=BAD_REQUEST,
    summary="Create a book",
    description="Store a new book under a generated asin, exposed in the Location header.",
)
def create_book(
    request: CreateBookRequest,
    use_case: CreateBookUseCase = Depends(get_create_book_use_case),
) -> Response:
    result = use_case.execute(CreateBookCommand(payload=request.to_payload()))
    return Response(
        status_code=status.HTTP_201_CREATED,
        headers={"Location": f"{router.prefix}/{result.asin}"},
    )


@router.put(
    "/{asin}",
    response_model=None,
    responses={200: {"model": list[BookItem]}, **BAD_REQUEST, **NOT_FOUND},
    summary="Update a book",
    description="Shallow-merge the body over the book and return the whole collection.",
)
def update_book(
    asin: str,
    request: UpdateBookRequest,
    use_case: UpdateBookUseCase = Depends(get_update_book_use_case),
) -> list[dict[str, Any]]:
    command = UpdateBookCommand(asin=asin, patch=request.to_payload())
    return _books_body(use_case.execute(command))


@router.delete(
    "/{asin}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=NOT_FOUND,
    summary="Delete a book",
)
def delete_book(
    asin: str,
    use_case: DeleteBookUseCase = Depends(get_delete_book_use_case),
) -> Response:
    use_case.execute(DeleteBookCommand(asin=asin))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/{asin}/comments",
    response_model=MessageResponse,
    responses={**BAD_REQUEST, **NOT_FOUND},
    summary="Comment on a book",
)
def add_comment(
    asin: str,
    request: AddCommentRequest,
    use_case: AddCommentUseCase = Depends(get_add_comment_use_case),
) -> MessageResponse:
    command = AddCommentCommand(
        asin=asin, username=request.username, comment=request.comment
    )
    return MessageResponse(message=use_case.execute(command).message)


@router.get(
    "/{asin}/comments",
    response_model=None,
    responses={200: {"model": list[CommentItem]}},
    summary="List a book's comments",
    description="Unknown books and books without comments yield a message, not an error.",
)
def list_comments(
    asin: str,
    use_case: ListCommentsUseCase = Depends(get_list_comments_use_case),
) -> Union[list[dict[str, Any]], dict[str, str]]:
    result = use_case.execute(ListCommentsQuery(asin=asin))
    if result.comments is None:
        return MessageResponse(message=result.message or "").model_dump()
    return [comment.to_dict() for comment in result.comments]


@router.delete(
    "/{asin}/comments/{comment_id}",
    response_model=MessageResponse,
    summary="Remove a comment",
)
def remove_comment(
    asin: str,
    comment_id: str,
    use_case: RemoveCommentUseCase = Depends(get_remove_comment_use_case),
) -> MessageResponse:
    result = use_case.execute(RemoveCommentCommand(asin=asin, comment_id=comment_id))
    return MessageResponse(message=result.message)
