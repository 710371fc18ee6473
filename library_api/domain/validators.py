"""
Field-level validation for candidate books.

Rules are an explicit ordered list evaluated against the candidate. Every
rule runs; all failures are collected so a client sees every problem with
its request in a single response.
"""

import re
from typing import Callable, List, NamedTuple

from .entities import Book
from .value_objects import ValidationError

# Largest page count the PageCount column accepts (32-bit signed).
MAX_PAGE_COUNT = 2**31 - 1

# 10 digits, optionally followed by 3 more, with hyphens or spaces anywhere.
ISBN_PATTERN = re.compile(r"(?=(?:\D*\d){10}(?:(?:\D*\d){3})?\Z)[\d\- ]+")


class Rule(NamedTuple):
    property_name: str
    error_message: str
    is_valid: Callable[[Book], bool]


def is_isbn(value: object) -> bool:
    """Check that a value has the shape of an ISBN-10 or ISBN-13 (no checksum)."""
    return isinstance(value, str) and ISBN_PATTERN.fullmatch(value) is not None


def _not_empty(value: object) -> bool:
    return isinstance(value, str) and bool(value.strip())


BOOK_RULES: tuple[Rule, ...] = (
    Rule("Isbn", "Value was not a valid ISBN-13", lambda b: is_isbn(b.isbn)),
    Rule("Title", "Title cannot be empty", lambda b: _not_empty(b.title)),
    Rule("Author", "Author cannot be empty", lambda b: _not_empty(b.author)),
    Rule(
        "ShortDescription",
        "Short Description cannot be empty",
        lambda b: _not_empty(b.short_description),
    ),
    Rule(
        "PageCount",
        "Invalid PageCount value",
        lambda b: b.page_count is not None and 0 < b.page_count <= MAX_PAGE_COUNT,
    ),
    Rule(
        "ReleaseDate",
        "ReleaseDate must be specified",
        lambda b: b.release_date is not None,
    ),
)


def validate_book(book: Book) -> List[ValidationError]:
    """
    Validate a candidate book against every rule.

    Args:
        book: The candidate book (may have missing fields)

    Returns:
        One ValidationError per failed rule, in rule order. An empty list
        means the book is valid.
    """
    return [
        ValidationError(property_name=rule.property_name, error_message=rule.error_message)
        for rule in BOOK_RULES
        if not rule.is_valid(book)
    ]
