"""
Pydantic schemas for catalog API request/response validation.

Books are an open attribute bag, so book schemas allow extra fields;
only the well-known ones are typed and constrained here, in strict mode
so a value is either accepted as sent or rejected, never coerced. The
body handed to use cases is the client's own, key order included.
Comment length rules live in the domain so their messages stay
consistent whether or not a request went through HTTP.
No business logic belongs here.
"""

from typing import Annotated, Any, Optional

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, model_validator

NonNegativeNumber = Annotated[float, Field(ge=0)]


class _OpenPayload(BaseModel):
    """Base for request bodies that accept arbitrary extra attributes."""

    model_config = ConfigDict(extra="allow", strict=True)

    _body: dict[str, Any] = PrivateAttr(default_factory=dict)

    @model_validator(mode="wrap")
    @classmethod
    def _keep_body(cls, data: Any, handler: Any) -> "_OpenPayload":
        model = handler(data)
        if isinstance(data, dict):
            model._body = dict(data)
        return model

    def to_payload(self) -> dict[str, Any]:
        """Return the body exactly as the client sent it."""
        return dict(self._body)


class CreateBookRequest(_OpenPayload):
    """Request schema for creating a book.

    Attributes:
        title: Required, non-empty.
        category: Optional, non-empty when given.
        price: Optional, non-negative int or float.
        img: Optional cover image URL.
        asin: Optional; only checked against existing books, never stored.
    """

    title: str = Field(..., min_length=1, description="Book title")
    category: Optional[str] = Field(default=None, min_length=1)
    price: Optional[NonNegativeNumber] = None
    img: Optional[str] = None
    asin: Optional[str] = None


class UpdateBookRequest(_OpenPayload):
    """Request schema for patching a book. Every field is optional."""

    title: Optional[str] = Field(default=None, min_length=1)
    category: Optional[str] = Field(default=None, min_length=1)
    price: Optional[NonNegativeNumber] = None
    img: Optional[str] = None
    asin: Optional[str] = None


class SearchBooksRequest(BaseModel):
    """Request schema for title search. Missing title returns everything."""

    title: Optional[str] = None


class AddCommentRequest(BaseModel):
    username: str
    comment: str


class CommentItem(BaseModel):
    """A single comment in the response, keyed as it is persisted."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="_id")
    username: str
    comment: str
    created_date: Optional[str] = Field(default=None, alias="_createdDate")


class BookItem(BaseModel):
    """A single book in the response: asin, its attributes, its comments."""

    model_config = ConfigDict(extra="allow")

    asin: str
    comments: Optional[list[CommentItem]] = None


class MessageResponse(BaseModel):
    """Informational outcome returned with a 200 status."""

    message: str


class ErrorResponse(BaseModel):
    """Body of every error response."""

    error: str
    detail: Optional[Any] = None


class HealthResponse(BaseModel):
    status: str
    version: str
