"""
FastAPI dependencies for dependency injection.

This module provides singleton instances of the repository, the catalog
service and the authenticator for use with FastAPI's Depends() system.

The singletons are built lazily from the Settings installed by configure(),
so the composition root decides the database path and API key before the
first request arrives.
"""

import logging
from typing import Optional

from fastapi import Depends, Header, HTTPException, status

from library_api.config import Settings
from library_api.domain.ports import BookRepository
from library_api.domain.services import BookService
from library_api.domain.value_objects import AuthenticatedPrincipal
from library_api.infrastructure.db.connection import DatabaseInitializer, SqliteConnectionFactory
from library_api.infrastructure.db.sqlite_book_repository import SqliteBookRepository
from library_api.api.auth import ApiKeyAuthenticator, AuthenticationError

logger = logging.getLogger(__name__)

# Module-level singletons (initialized lazily)
_settings: Optional[Settings] = None
_connection_factory: Optional[SqliteConnectionFactory] = None
_book_repository: Optional[BookRepository] = None
_book_service: Optional[BookService] = None
_authenticator: Optional[ApiKeyAuthenticator] = None


def configure(settings: Settings) -> None:
    """Install settings for the composition root and drop any built singletons."""
    global _settings
    reset_dependencies()
    _settings = settings


def get_settings() -> Settings:
    """Provide the application settings, read from the environment on first use."""
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
    return _settings


def get_connection_factory() -> SqliteConnectionFactory:
    """Provide a singleton SQLite connection factory."""
    global _connection_factory
    if _connection_factory is None:
        _connection_factory = SqliteConnectionFactory(get_settings().db_path)
    return _connection_factory


def get_database_initializer() -> DatabaseInitializer:
    return DatabaseInitializer(get_connection_factory())


def get_book_repository() -> BookRepository:
    """Provide a singleton instance of the book repository."""
    global _book_repository
    if _book_repository is None:
        _book_repository = SqliteBookRepository(get_connection_factory())
    return _book_repository


def get_book_service() -> BookService:
    """Provide the Book Service with its repository wired."""
    global _book_service
    if _book_service is None:
        _book_service = BookService(get_book_repository())
    return _book_service


def get_authenticator() -> Optional[ApiKeyAuthenticator]:
    """
    Provide the API key authenticator, or None when no key is configured.
    """
    global _authenticator
    api_key = get_settings().api_key
    if api_key is None:
        return None
    if _authenticator is None:
        _authenticator = ApiKeyAuthenticator(api_key)
    return _authenticator


def require_api_key(
    authorization: Optional[str] = Header(default=None),
    authenticator: Optional[ApiKeyAuthenticator] = Depends(get_authenticator),
) -> Optional[AuthenticatedPrincipal]:
    """
    Guard for mutation routes.

    Raises:
        401: Authorization header missing or not equal to the configured key
    """
    if authenticator is None:
        return None

    try:
        return authenticator.authenticate(authorization)
    except AuthenticationError as e:
        logger.warning(f"Authentication failed: {e}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
            headers={"WWW-Authenticate": "ApiKey"},
        )


def reset_dependencies() -> None:
    """
    Drop all singletons so the next request rebuilds them.

    configure() calls this before installing new settings, which is how a
    second create_app() call points the service at a different database.
    """
    global _settings, _connection_factory, _book_repository
    global _book_service, _authenticator

    _settings = None
    _connection_factory = None
    _book_repository = None
    _book_service = None
    _authenticator = None
