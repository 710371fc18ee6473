"""
SQLite connection handling and schema initialization.

Every repository operation opens its own connection through the factory
and closes it when the statement is done. There is no pooling beyond what
SQLite itself provides.
"""

import logging
import sqlite3
from contextlib import closing
from pathlib import Path
from typing import Union

logger = logging.getLogger(__name__)


def _casefold(value):
    """Unicode-aware lower-casing for SQL comparisons (SQLite LOWER is ASCII only)."""
    return value.casefold() if isinstance(value, str) else value


class SqliteConnectionFactory:
    """
    Opens connections to a SQLite database.

    Accepts a filesystem path or a ``file:`` URI (e.g. a shared-cache
    in-memory database ``file:library?mode=memory&cache=shared``).
    """

    def __init__(self, database: Union[str, Path]) -> None:
        self._database = str(database)
        self._is_uri = self._database.startswith("file:")
        if not self._is_uri:
            Path(self._database).parent.mkdir(parents=True, exist_ok=True)

    @property
    def database(self) -> str:
        return self._database

    def create_connection(self) -> sqlite3.Connection:
        """Get a database connection with row factory."""
        conn = sqlite3.connect(self._database, uri=self._is_uri)
        conn.row_factory = sqlite3.Row # access columns by name
        conn.create_function("casefold", 1, _casefold, deterministic=True)
        return conn


class DatabaseInitializer:
    """Creates the Books table if it doesn't exist."""

    def __init__(self, connection_factory: SqliteConnectionFactory) -> None:
        self._connection_factory = connection_factory

    def initialize(self) -> None:
        with closing(self._connection_factory.create_connection()) as conn:
            with conn:
                conn.execute("""
                    CREATE TABLE IF NOT EXISTS Books (
                        Isbn TEXT PRIMARY KEY,
                        Title TEXT NOT NULL,
                        Author TEXT NOT NULL,
                        ShortDescription TEXT NOT NULL,
                        PageCount INTEGER,
                        ReleaseDate TEXT NOT NULL
                    )
                """)

        logger.info(f"Database schema ready at {self._connection_factory.database}")
