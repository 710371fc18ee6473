"""
Error responses for the books API.

Every 400 response carries the same body: a JSON array of
{propertyName, errorMessage}. This applies to domain validation failures,
duplicate ISBNs, and malformed request bodies alike.
"""

import logging
from typing import Iterable

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from library_api.domain.value_objects import ValidationError
from library_api.api.converters import domain_errors_to_api

logger = logging.getLogger(__name__)

DUPLICATE_ISBN_MESSAGE = "A book with this ISBN already exists"


def validation_problem(errors: Iterable[ValidationError]) -> JSONResponse:
    """Build a 400 response listing every validation error."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=[e.model_dump(by_alias=True) for e in domain_errors_to_api(errors)],
    )


def duplicate_isbn_problem() -> JSONResponse:
    return validation_problem([ValidationError("Isbn", DUPLICATE_ISBN_MESSAGE)])


def _property_name(loc: tuple) -> str:
    """Map a pydantic error location like ('body', 'pageCount') to 'PageCount'."""
    names = [part for part in loc if isinstance(part, str) and part not in ("body", "query", "path")]
    if not names:
        return "Body"
    name = names[-1]
    return "".join(part[:1].upper() + part[1:] for part in name.split("_"))


async def request_validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed requests in the same shape as domain validation errors."""
    errors = [
        ValidationError(_property_name(tuple(error.get("loc", ()))), error.get("msg", "Invalid value"))
        for error in exc.errors()
    ]
    logger.info(f"Rejected malformed request to {request.url.path}: {len(errors)} error(s)")
    return validation_problem(errors)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)
