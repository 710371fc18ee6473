"""
API endpoints for book management.

This module defines the FastAPI routes for creating, reading, searching,
updating and deleting books. It handles HTTP concerns (status codes,
headers, wire format) and delegates business rules to the BookService.

Validation always runs before any existence or uniqueness check. Duplicate
ISBNs and missing books are returned as ordinary responses, never raised.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status

from library_api.api import schemas as api
from library_api.api.converters import api_book_to_domain, domain_book_to_api
from library_api.api.dependencies import get_book_service, require_api_key
from library_api.api.errors import duplicate_isbn_problem, validation_problem
from library_api.domain.services import BookService
from library_api.domain.validators import validate_book

BASE_ROUTE = "/books"
TAG = "Books"

router = APIRouter(tags=[TAG])

_VALIDATION_RESPONSE = {
    status.HTTP_400_BAD_REQUEST: {
        "model": List[api.ValidationError],
        "description": "Validation failed",
    }
}


@router.post(
    BASE_ROUTE,
    name="CreateBook",
    operation_id="CreateBook",
    response_model=api.Book,
    status_code=status.HTTP_201_CREATED,
    responses=_VALIDATION_RESPONSE,
    dependencies=[Depends(require_api_key)],
)
def create_book(
    book: api.Book,
    response: Response,
    service: BookService = Depends(get_book_service),
):
    """
    Add a book to the catalog.

    Returns:
        201 with the created book and a Location header

    Raises:
        400: Validation errors, or the ISBN already exists
    """
    candidate = api_book_to_domain(book)

    errors = validate_book(candidate)
    if errors:
        return validation_problem(errors)

    if not service.create(candidate):
        return duplicate_isbn_problem()

    response.headers["Location"] = f"{BASE_ROUTE}/{candidate.isbn}"
    return domain_book_to_api(candidate)


@router.get(
    BASE_ROUTE,
    name="GetBooks",
    operation_id="GetBooks",
    response_model=List[api.Book],
)
def get_books(
    search_term: Optional[str] = Query(default=None, alias="searchTerm"),
    service: BookService = Depends(get_book_service),
) -> List[api.Book]:
    """
    List every book ordered by title, or search titles when searchTerm is given.
    """
    if search_term is not None and search_term.strip():
        books = service.search_by_title(search_term)
    else:
        books = service.get_all()

    return [domain_book_to_api(book) for book in books]


@router.get(
    f"{BASE_ROUTE}/{{isbn}}",
    name="GetBook",
    operation_id="GetBook",
    response_model=api.Book,
    responses={status.HTTP_404_NOT_FOUND: {"description": "Book not found"}},
)
def get_book(
    isbn: str,
    service: BookService = Depends(get_book_service),
):
    """Get a book by its ISBN."""
    book = service.get_by_isbn(isbn)
    if book is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)

    return domain_book_to_api(book)


@router.put(
    f"{BASE_ROUTE}/{{isbn}}",
    name="UpdateBook",
    operation_id="UpdateBook",
    response_model=api.Book,
    responses={
        **_VALIDATION_RESPONSE,
        status.HTTP_404_NOT_FOUND: {"description": "Book not found"},
    },
    dependencies=[Depends(require_api_key)],
)
def update_book(
    isbn: str,
    book: api.Book,
    service: BookService = Depends(get_book_service),
):
    """
    Replace every field of a book except its ISBN.

    The ISBN in the path always wins over any ISBN in the body.

    Raises:
        400: Validation errors
        404: Book not found
    """
    candidate = api_book_to_domain(book).with_isbn(isbn)

    errors = validate_book(candidate)
    if errors:
        return validation_problem(errors)

    if not service.update(candidate):
        return Response(status_code=status.HTTP_404_NOT_FOUND)

    return domain_book_to_api(candidate)


@router.delete(
    f"{BASE_ROUTE}/{{isbn}}",
    name="DeleteBook",
    operation_id="DeleteBook",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={status.HTTP_404_NOT_FOUND: {"description": "Book not found"}},
    dependencies=[Depends(require_api_key)],
)
def delete_book(
    isbn: str,
    service: BookService = Depends(get_book_service),
) -> Response:
    """Delete a book by its ISBN."""
    if not service.delete(isbn):
        return Response(status_code=status.HTTP_404_NOT_FOUND)

    return Response(status_code=status.HTTP_204_NO_CONTENT)
