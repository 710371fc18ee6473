"""
Domain layer - Core business logic and entities.

This layer contains the Book entity, validation rules, the catalog service,
and defines the ports (interfaces) that the infrastructure layer must
implement.

It has NO dependencies on external frameworks, databases, or APIs.
"""

from .entities import Book
from .value_objects import ValidationError, AuthenticatedPrincipal
from .validators import validate_book
from .services import BookService

__all__ = [
    # Entities
    "Book",
    # Value Objects
    "ValidationError",
    "AuthenticatedPrincipal",
    # Rules and services
    "validate_book",
    "BookService",
]
