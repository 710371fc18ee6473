"""
Port interfaces (protocols) for the domain layer.

Ports define the contracts between the domain and infrastructure layers.
They are implemented by adapters in the infrastructure layer, allowing
the domain to remain independent of technical details.
"""

from typing import List, Optional, Protocol

from .entities import Book


class BookRepository(Protocol):
    """
    Port for persisting and retrieving books keyed by ISBN.

    It abstracts away the persistence mechanism (SQLite, PostgreSQL, etc.).
    Implementations must release any connection they acquire on every
    exit path, including errors.
    """

    def create(self, book: Book) -> bool:
        """
        Insert a new book.

        Args:
            book: A validated book

        Returns:
            True if a row was inserted, False if the ISBN is already taken

        Raises:
            RuntimeError: If a database error occurs
        """
        ...

    def get_by_isbn(self, isbn: str) -> Optional[Book]:
        """
        Retrieve a book by its ISBN.

        Returns:
            The Book if found, None otherwise
        """
        ...

    def get_all(self) -> List[Book]:
        """
        Retrieve every book in the catalog, ordered by title ascending.
        """
        ...

    def search_by_title(self, search_term: str) -> List[Book]:
        """
        Retrieve books whose title contains the term (case-insensitive).
        """
        ...

    def update(self, book: Book) -> bool:
        """
        Overwrite all non-key fields of the book with the same ISBN.

        Returns:
            True if a row was updated, False if no book has this ISBN
        """
        ...

    def delete(self, isbn: str) -> bool:
        """
        Delete a book from the catalog.

        Returns:
            True if the book was deleted, False if not found
        """
        ...
