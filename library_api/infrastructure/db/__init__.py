# Database infrastructure package
"""
SQLite persistence adapters.

This package contains:
- SqliteConnectionFactory: opens one connection per repository call
- DatabaseInitializer: creates the Books table at startup
- SqliteBookRepository: BookRepository implementation over the Books table
"""

from .connection import SqliteConnectionFactory, DatabaseInitializer
from .sqlite_book_repository import SqliteBookRepository

__all__ = [
    "SqliteConnectionFactory",
    "DatabaseInitializer",
    "SqliteBookRepository",
]
