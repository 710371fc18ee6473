"""
Domain entities for the library catalog.

Entities are objects with a unique identity that runs through time and
different representations. A Book is identified by its ISBN.
"""

from dataclasses import dataclass, replace
from datetime import date
from typing import Optional


@dataclass
class Book:
    """
    Represents a book in the catalog.

    Fields are optional at construction time because a Book may be a
    candidate that has not been validated yet (e.g. a request body).
    Only books that pass the validator are ever persisted.
    """

    isbn: Optional[str]
    """ISBN-10 or ISBN-13, digits with optional hyphens/spaces. Primary key."""

    title: Optional[str] = None
    """Book title"""

    author: Optional[str] = None
    """Author name"""

    short_description: Optional[str] = None
    """Short summary of the book"""

    page_count: Optional[int] = None
    """Number of pages (must be > 0 to be valid)"""

    release_date: Optional[date] = None
    """Release date (presence only, no range checks)"""

    def with_isbn(self, isbn: str) -> "Book":
        """Return a copy of this book carrying the given ISBN."""
        return replace(self, isbn=isbn)
