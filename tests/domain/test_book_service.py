"""
Tests for BookService.

Uses a fake in-memory repository with spy tracking so the tests can check
not only the results but also whether the service touched storage.
"""

import pytest
from datetime import date
from typing import Dict, List, Optional

from library_api.domain.entities import Book
from library_api.domain.services import BookService


# =============================================================================
# Fake implementations for testing
# =============================================================================


class FakeBookRepository:
    """Fake book repository with spy capabilities."""

    def __init__(self, initial_books: Optional[List[Book]] = None):
        self._books: Dict[str, Book] = {}
        for book in initial_books or []:
            self._books[book.isbn] = book

        # Spy tracking
        self.create_calls: List[Book] = []
        self.update_calls: List[Book] = []
        self.delete_calls: List[str] = []
        self.search_calls: List[str] = []

    def create(self, book: Book) -> bool:
        self.create_calls.append(book)
        if book.isbn in self._books:
            return False
        self._books[book.isbn] = book
        return True

    def get_by_isbn(self, isbn: str) -> Optional[Book]:
        return self._books.get(isbn)

    def get_all(self) -> List[Book]:
        return sorted(self._books.values(), key=lambda b: b.title)

    def search_by_title(self, search_term: str) -> List[Book]:
        self.search_calls.append(search_term)
        return [b for b in self._books.values() if search_term.lower() in b.title.lower()]

    def update(self, book: Book) -> bool:
        self.update_calls.append(book)
        if book.isbn not in self._books:
            return False
        self._books[book.isbn] = book
        return True

    def delete(self, isbn: str) -> bool:
        self.delete_calls.append(isbn)
        return self._books.pop(isbn, None) is not None


# =============================================================================
# Fixtures
# =============================================================================


def make_book(isbn: str = "9876543210123", title: str = "Test Book") -> Book:
    return Book(
        isbn=isbn,
        title=title,
        author="Test Author",
        short_description="This is a test book",
        page_count=100,
        release_date=date(2000, 1, 1),
    )


@pytest.fixture
def repository():
    return FakeBookRepository()


@pytest.fixture
def service(repository):
    return BookService(repository)


# =============================================================================
# Create
# =============================================================================


class TestCreate:
    def test_creates_book_when_isbn_is_new(self, service, repository):
        # Arrange
        book = make_book()

        # Act
        result = service.create(book)

        # Assert
        assert result is True
        assert repository.get_by_isbn(book.isbn) == book

    def test_duplicate_returns_false_without_writing(self, service, repository):
        """A second create for the same ISBN must not reach the repository."""
        # Arrange
        book = make_book()
        service.create(book)

        # Act
        result = service.create(make_book(title="Another Title"))

        # Assert
        assert result is False
        assert len(repository.create_calls) == 1
        assert repository.get_by_isbn(book.isbn).title == "Test Book"


# =============================================================================
# Update
# =============================================================================


class TestUpdate:
    def test_updates_existing_book(self):
        # Arrange
        service = BookService(FakeBookRepository([make_book()]))
        changed = make_book(title="Renamed")

        # Act
        result = service.update(changed)

        # Assert
        assert result is True
        assert service.get_by_isbn(changed.isbn).title == "Renamed"

    def test_missing_book_returns_false_without_writing(self, service, repository):
        """Updating an unknown ISBN must not reach the repository."""
        result = service.update(make_book())

        assert result is False
        assert repository.update_calls == []


# =============================================================================
# Pass-through operations
# =============================================================================


class TestPassThrough:
    def test_get_all_returns_empty_list_when_no_books(self, service):
        assert service.get_all() == []

    def test_get_all_returns_books(self):
        books = [make_book("1111111111", "Banana"), make_book("2222222222", "Apple")]
        service = BookService(FakeBookRepository(books))

        result = service.get_all()

        assert [b.title for b in result] == ["Apple", "Banana"]

    def test_get_by_isbn_returns_none_when_missing(self, service):
        assert service.get_by_isbn("0000000000") is None

    def test_search_by_title_delegates_term(self, repository):
        service = BookService(repository)
        repository.create(make_book(title="Test Book"))

        result = service.search_by_title("Test")

        assert [b.title for b in result] == ["Test Book"]
        assert repository.search_calls == ["Test"]

    def test_delete_returns_true_then_false(self, repository):
        book = make_book()
        repository.create(book)
        service = BookService(repository)

        assert service.delete(book.isbn) is True
        assert service.delete(book.isbn) is False
        assert repository.delete_calls == [book.isbn, book.isbn]
