"""
Validation rules for catalog payloads.

Pure functions returning a list of {field, message} problems.
An empty list means the payload is acceptable.
"""

from typing import Any

from bookstore.domain.catalog.entities import ASIN_KEY, COMMENTS_KEY
from bookstore.domain.catalog.errors import BookValidationError

COMMENT_MIN_LENGTH = 3
USERNAME_TOO_SHORT = "Username is too short!"
COMMENT_TOO_SHORT = "Comment is too short!"


def _problem(field_name: str, message: str) -> dict[str, str]:
    return {"field": field_name, "message": message}


def _check_text(payload: dict[str, Any], key: str, required: bool) -> list[dict[str, str]]:
    if key not in payload:
        return [_problem(key, f"{key} is required")] if required else []
    value = payload[key]
    if not isinstance(value, str) or not value.strip():
        return [_problem(key, f"{key} must be a non-empty string")]
    return []


def _check_price(payload: dict[str, Any]) -> list[dict[str, str]]:
    if "price" not in payload:
        return []
    price = payload["price"]
    if isinstance(price, bool) or not isinstance(price, (int, float)) or price < 0:
        return [_problem("price", "price must be a number >= 0")]
    return []


def check_new_book(payload: dict[str, Any]) -> list[dict[str, str]]:
    """Rules for a create payload: title required, known fields well-formed."""
    problems = _check_text(payload, "title", required=True)
    problems += _check_text(payload, "category", required=False)
    problems += _check_price(payload)
    if COMMENTS_KEY in payload:
        problems.append(_problem(COMMENTS_KEY, "comments cannot be set on create"))
    return problems


def check_patch(asin: str, patch: dict[str, Any]) -> list[dict[str, str]]:
    """Rules for an update payload addressed to the book with this asin."""
    if not patch:
        return [_problem("body", "update payload must contain at least one field")]
    problems = _check_text(patch, "title", required=False)
    problems += _check_text(patch, "category", required=False)
    problems += _check_price(patch)
    if ASIN_KEY in patch and patch[ASIN_KEY] != asin:
        problems.append(_problem(ASIN_KEY, "asin cannot be changed"))
    if COMMENTS_KEY in patch:
        problems.append(_problem(COMMENTS_KEY, "comments cannot be patched"))
    return problems


def check_comment(username: Any, comment: Any) -> list[dict[str, str]]:
    problems = []
    if not isinstance(comment, str) or len(comment) < COMMENT_MIN_LENGTH:
        problems.append(_problem("comment", COMMENT_TOO_SHORT))
    if not isinstance(username, str) or len(username) < COMMENT_MIN_LENGTH:
        problems.append(_problem("username", USERNAME_TOO_SHORT))
    return problems


def ensure_valid(problems: list[dict[str, str]]) -> None:
    """Raise BookValidationError if any rule was broken."""
    if problems:
        raise BookValidationError(problems)
