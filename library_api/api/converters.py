"""
Converters between domain entities/value objects and API schemas.

This module centralizes all conversion logic between the domain layer
and the API layer, maintaining clean separation of concerns.
"""

from dataclasses import asdict
from typing import Iterable, List

from library_api.domain import entities as domain
from library_api.domain import value_objects as domain_vo
from library_api.api import schemas as api


def domain_book_to_api(book: domain.Book) -> api.Book:
    """
    Convert a domain Book entity to an API Book model.

    Args:
        book: Domain Book entity

    Returns:
        API Book model
    """
    book_dict = asdict(book)
    return api.Book(**book_dict)


def api_book_to_domain(book: api.Book) -> domain.Book:
    """
    Convert an API Book model (request body) to a candidate domain Book.

    The result is not validated; run it through validate_book first.
    """
    return domain.Book(
        isbn=book.isbn,
        title=book.title,
        author=book.author,
        short_description=book.short_description,
        page_count=book.page_count,
        release_date=book.release_date,
    )


def domain_errors_to_api(errors: Iterable[domain_vo.ValidationError]) -> List[api.ValidationError]:
    """Convert domain ValidationErrors to their API models."""
    return [
        api.ValidationError(
            property_name=error.property_name,
            error_message=error.error_message,
        )
        for error in errors
    ]
