"""
SQLite implementation of the BookRepository port.

This adapter persists Book entities to the Books table, one connection per
statement, handling serialization/deserialization and relying on the Isbn
primary key to reject duplicate rows.
"""

import logging
import sqlite3
from contextlib import closing
from datetime import date, datetime
from typing import List, Optional

from library_api.domain.entities import Book
from library_api.domain.ports import BookRepository
from library_api.infrastructure.db.connection import SqliteConnectionFactory

logger = logging.getLogger(__name__)

_COLUMNS = "Isbn, Title, Author, ShortDescription, PageCount, ReleaseDate"

_DUPLICATE_KEY_ERRORS = ("SQLITE_CONSTRAINT_PRIMARYKEY", "SQLITE_CONSTRAINT_UNIQUE")


class SqliteBookRepository(BookRepository):
    """
    Connections are never shared between calls. Each public method opens one,
    runs a single statement inside a transaction and closes it, whether the
    statement succeeds or raises.
    """

    def __init__(self, connection_factory: SqliteConnectionFactory) -> None:
        self._connection_factory = connection_factory

    def _book_to_row(self, book: Book) -> dict:
        """Convert a Book entity to a database row dict."""
        return {
            "isbn": book.isbn,
            "title": book.title,
            "author": book.author,
            "short_description": book.short_description,
            "page_count": book.page_count,
            "release_date": book.release_date.isoformat() if book.release_date else None,
        }

    def _parse_date_safe(self, date_str: Optional[str]) -> Optional[date]:
        """Parse a stored date, accepting both 'YYYY-MM-DD' and full ISO datetimes."""
        if not date_str:
            return None

        try:
            return date.fromisoformat(date_str)
        except ValueError:
            pass

        try:
            return datetime.fromisoformat(date_str).date()
        except ValueError:
            return None

    def _row_to_book(self, row: sqlite3.Row) -> Book:
        """Convert a database row to a Book entity."""
        return Book(
            isbn=row["Isbn"],
            title=row["Title"],
            author=row["Author"],
            short_description=row["ShortDescription"],
            page_count=row["PageCount"],
            release_date=self._parse_date_safe(row["ReleaseDate"]),
        )

    def create(self, book: Book) -> bool:
        """Insert a book. Returns False if the ISBN is already taken."""
        try:
            with closing(self._connection_factory.create_connection()) as conn:
                with conn:
                    cursor = conn.execute(f"""
                        INSERT INTO Books ({_COLUMNS})
                        VALUES (:isbn, :title, :author, :short_description,
                                :page_count, :release_date)
                    """, self._book_to_row(book))
                    return cursor.rowcount > 0

        except sqlite3.IntegrityError as e:
            # Lost a race with a concurrent create of the same ISBN.
            if e.sqlite_errorname in _DUPLICATE_KEY_ERRORS:
                logger.warning(f"Insert of isbn={book.isbn} rejected by primary key: {e}")
                return False
            raise ValueError(f"Book violates catalog constraints: {e}") from e
        except sqlite3.Error as e:
            raise RuntimeError(f"Database error while creating book: {e}") from e

    def get_by_isbn(self, isbn: str) -> Optional[Book]:
        """Retrieve a book by its ISBN."""
        try:
            with closing(self._connection_factory.create_connection()) as conn:
                row = conn.execute(
                    f"SELECT {_COLUMNS} FROM Books WHERE Isbn = ? LIMIT 1",
                    (isbn,)
                ).fetchone()
        except sqlite3.Error as e:
            raise RuntimeError(f"Database error while reading book: {e}") from e

        if row is None:
            return None

        return self._row_to_book(row)

    def get_all(self) -> List[Book]:
        """Retrieve all books ordered by title."""
        try:
            with closing(self._connection_factory.create_connection()) as conn:
                rows = conn.execute(
                    f"SELECT {_COLUMNS} FROM Books ORDER BY Title"
                ).fetchall()
        except sqlite3.Error as e:
            raise RuntimeError(f"Database error while listing books: {e}") from e

        return [self._row_to_book(row) for row in rows]

    def search_by_title(self, search_term: str) -> List[Book]:
        """Retrieve books whose title contains the term, ignoring case (Unicode-aware)."""
        try:
            with closing(self._connection_factory.create_connection()) as conn:
                rows = conn.execute(
                    f"SELECT {_COLUMNS} FROM Books WHERE instr(casefold(Title), ?) > 0",
                    (search_term.casefold(),)
                ).fetchall()
        except sqlite3.Error as e:
            raise RuntimeError(f"Database error while searching books: {e}") from e

        return [self._row_to_book(row) for row in rows]

    def update(self, book: Book) -> bool:
        """Overwrite the non-key fields of a book. Returns True if a row changed."""
        try:
            with closing(self._connection_factory.create_connection()) as conn:
                with conn:
                    cursor = conn.execute("""
                        UPDATE Books SET
                            Title = :title,
                            Author = :author,
                            ShortDescription = :short_description,
                            PageCount = :page_count,
                            ReleaseDate = :release_date
                        WHERE Isbn = :isbn
                    """, self._book_to_row(book))
                    return cursor.rowcount > 0

        except sqlite3.IntegrityError as e:
            raise ValueError(f"Book violates catalog constraints: {e}") from e
        except sqlite3.Error as e:
            raise RuntimeError(f"Database error while updating book: {e}") from e

    def delete(self, isbn: str) -> bool:
        """Delete a book from the catalog. Returns True if deleted."""
        try:
            with closing(self._connection_factory.create_connection()) as conn:
                with conn:
                    cursor = conn.execute(
                        "DELETE FROM Books WHERE Isbn = ?",
                        (isbn,)
                    )
                    return cursor.rowcount > 0

        except sqlite3.Error as e:
            raise RuntimeError(f"Database error while deleting book: {e}") from e
