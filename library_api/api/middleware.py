"""
HTTP middleware: request timing and read-only CORS.
"""

import logging
import time

from fastapi import Request
from starlette.middleware.cors import CORSMiddleware
from starlette.types import ASGIApp, Receive, Scope, Send

logger = logging.getLogger(__name__)

_READ_METHODS = ("GET", "HEAD", "OPTIONS")


async def log_request_time(request: Request, call_next):
    """Log how long each request took, whether it succeeded or raised."""
    start_time = time.perf_counter()
    try:
        return await call_next(request)
    finally:
        elapsed_ms = (time.perf_counter() - start_time) * 1000
        logger.info(
            f"{request.method} {request.url.path} request completed in: {elapsed_ms:.0f} ms"
        )


class ReadOnlyCORSMiddleware:
    """
    Applies CORS to read requests only.

    GET/HEAD requests and their preflights go through Starlette's
    CORSMiddleware; mutation requests bypass it and never receive
    Access-Control-Allow-* headers. A preflight asking for POST, PUT or
    DELETE is refused because only GET is an allowed method.
    """

    def __init__(self, app: ASGIApp, allow_origins=("*",)) -> None:
        self.app = app
        self.cors = CORSMiddleware(app, allow_origins=list(allow_origins), allow_methods=["GET"])

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http" and scope["method"] in _READ_METHODS:
            await self.cors(scope, receive, send)
            return
        await self.app(scope, receive, send)
