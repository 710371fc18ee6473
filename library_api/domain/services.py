"""
Domain services for the library catalog.

Services orchestrate domain logic that doesn't naturally belong to a single
entity. They depend only on domain entities and port protocols (never on
concrete implementations).
"""

import logging
from typing import List, Optional

from .entities import Book
from .ports import BookRepository

logger = logging.getLogger(__name__)


class BookService:
    """
    Business rules around the book repository.

    Duplicate and missing books are ordinary outcomes here, reported as
    False rather than raised, so the API layer can pick the status code.

    The existence check and the write are two separate statements. Two
    concurrent creates for the same ISBN can both pass the check; the
    repository's primary key rejects the second insert.
    """

    def __init__(self, repository: BookRepository) -> None:
        """
        Initialize the service with its repository.

        Args:
            repository: Persistence gateway for books
        """
        self._repository = repository

    def create(self, book: Book) -> bool:
        """
        Create a book unless one with the same ISBN already exists.

        Returns:
            True if created, False if the ISBN is already in the catalog
        """
        existing = self._repository.get_by_isbn(book.isbn)
        if existing is not None:
            logger.info(f"Book with isbn={book.isbn} already exists, skipping create")
            return False

        return self._repository.create(book)

    def update(self, book: Book) -> bool:
        """
        Update an existing book.

        Returns:
            True if updated, False if no book has this ISBN
        """
        existing = self._repository.get_by_isbn(book.isbn)
        if existing is None:
            logger.info(f"Book with isbn={book.isbn} not found, skipping update")
            return False

        return self._repository.update(book)

    def get_by_isbn(self, isbn: str) -> Optional[Book]:
        return self._repository.get_by_isbn(isbn)

    def get_all(self) -> List[Book]:
        return self._repository.get_all()

    def search_by_title(self, search_term: str) -> List[Book]:
        return self._repository.search_by_title(search_term)

    def delete(self, isbn: str) -> bool:
        return self._repository.delete(isbn)
