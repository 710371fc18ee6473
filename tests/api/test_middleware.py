"""
Tests for the HTTP middleware: request timing logs and read-only CORS.
"""

import logging
import re

import pytest
from fastapi.testclient import TestClient

from library_api.api.dependencies import get_book_service
from library_api.config import Settings
from library_api.main import create_app

ORIGIN = "https://catalog.example"
TIMING_LOGGER = "library_api.api.middleware"

BOOK = {
    "isbn": "978-0131103627",
    "title": "The Dirty Coder",
    "author": "Nick Chapsas",
    "shortDescription": "All Nick's tricks in one book.",
    "pageCount": 420,
    "releaseDate": "2023-06-09",
}


# ============================================================================
# FIXTURES
# ============================================================================

@pytest.fixture
def app(tmp_path):
    return create_app(Settings(db_path=str(tmp_path / "library.db")))


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


class ExplodingBookService:
    """Service whose reads fail, to drive the 500 path."""

    def get_all(self):
        raise RuntimeError("disk on fire")


def _timing_lines(caplog):
    return [r.getMessage() for r in caplog.records if r.name == TIMING_LOGGER]


# ============================================================================
# REQUEST TIMING
# ============================================================================

class TestRequestTiming:
    def test_logs_method_path_and_duration(self, client, caplog):
        caplog.set_level(logging.INFO, logger=TIMING_LOGGER)

        response = client.get("/books")

        assert response.status_code == 200
        lines = _timing_lines(caplog)
        assert len(lines) == 1
        assert re.fullmatch(r"GET /books request completed in: \d+ ms", lines[0])

    def test_logs_even_when_handler_raises(self, app, caplog):
        """A request that ends in a 500 is still timed."""
        # Arrange
        caplog.set_level(logging.INFO, logger=TIMING_LOGGER)
        app.dependency_overrides[get_book_service] = lambda: ExplodingBookService()

        # Act
        with TestClient(app, raise_server_exceptions=False) as failing_client:
            response = failing_client.get("/books")

        # Assert
        assert response.status_code == 500
        lines = _timing_lines(caplog)
        assert len(lines) == 1
        assert lines[0].startswith("GET /books request completed in: ")


# ============================================================================
# CORS
# ============================================================================

class TestReadOnlyCors:
    def test_get_carries_allow_origin(self, client):
        response = client.get("/books", headers={"Origin": ORIGIN})

        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "*"

    def test_post_gets_no_cors_headers(self, client):
        response = client.post("/books", json=BOOK, headers={"Origin": ORIGIN})

        assert response.status_code == 201
        assert "access-control-allow-origin" not in response.headers

    def test_put_and_delete_get_no_cors_headers(self, client):
        # Arrange
        client.post("/books", json=BOOK)

        # Act
        updated = client.put(f"/books/{BOOK['isbn']}", json=BOOK, headers={"Origin": ORIGIN})
        deleted = client.delete(f"/books/{BOOK['isbn']}", headers={"Origin": ORIGIN})

        # Assert
        assert updated.status_code == 200
        assert deleted.status_code == 204
        assert "access-control-allow-origin" not in updated.headers
        assert "access-control-allow-origin" not in deleted.headers

    def test_preflight_for_get_is_allowed(self, client):
        response = client.options(
            "/books",
            headers={"Origin": ORIGIN, "Access-Control-Request-Method": "GET"},
        )

        assert response.status_code == 200
        assert "GET" in response.headers["access-control-allow-methods"]

    @pytest.mark.parametrize("method", ["POST", "PUT", "DELETE"])
    def test_preflight_for_mutation_is_refused(self, client, method):
        response = client.options(
            "/books",
            headers={"Origin": ORIGIN, "Access-Control-Request-Method": method},
        )

        assert response.status_code == 400
        assert method not in response.headers.get("access-control-allow-methods", "")

    def test_configured_origins_are_honoured(self, tmp_path):
        app = create_app(Settings(
            db_path=str(tmp_path / "library.db"),
            cors_allow_origins=(ORIGIN,),
        ))

        with TestClient(app) as test_client:
            allowed = test_client.get("/books", headers={"Origin": ORIGIN})
            other = test_client.get("/books", headers={"Origin": "https://elsewhere.example"})

        assert allowed.headers["access-control-allow-origin"] == ORIGIN
        assert "access-control-allow-origin" not in other.headers
