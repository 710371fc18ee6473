"""
Main application entry point.

This is the single composition root: it configures logging, wires settings
into the dependency module, creates the database schema at startup and
mounts the books router.

Run with ``python -m library_api.main`` or
``uvicorn --factory library_api.main:create_app``.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from library_api import __version__
from library_api.config import Settings
from library_api.api import dependencies
from library_api.api.book_endpoints import router as books_router
from library_api.api.errors import register_exception_handlers
from library_api.api.middleware import ReadOnlyCORSMiddleware, log_request_time

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    # basicConfig is a no-op once the root logger has handlers, so set the level directly.
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    logging.getLogger().setLevel(level)


@asynccontextmanager
async def lifespan(app: FastAPI):
    dependencies.get_database_initializer().initialize()
    if dependencies.get_authenticator() is None:
        logger.warning("LIBRARY_API_KEY is not set: mutation routes are not protected")
    yield


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the FastAPI application.

    The dependency singletons are module-level, so one process serves one
    application; calling this again rewires them for the new settings.

    Args:
        settings: Explicit settings; read from the environment when omitted

    Returns:
        The configured application
    """
    settings = settings or Settings.from_env()
    configure_logging(settings.log_level)
    dependencies.configure(settings)

    app = FastAPI(
        title="Library Catalog API",
        description="Create, search, update and delete books identified by ISBN.",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    app.add_middleware(ReadOnlyCORSMiddleware, allow_origins=settings.cors_allow_origins)
    app.middleware("http")(log_request_time)

    register_exception_handlers(app)
    app.include_router(books_router)

    @app.get("/", include_in_schema=False)
    def read_root():
        """Redirect to the interactive API docs."""
        return RedirectResponse(url="/docs")

    return app


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("library_api.main:create_app", factory=True, host="0.0.0.0", port=8000, reload=True)
