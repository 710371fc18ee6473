"""
Wire schemas for the books API.

Field names are camelCase on the wire; snake_case names are accepted on
input as well. Book fields are all optional here so that missing values
reach the domain validator and come back as field-level errors instead of
being rejected by the transport layer.
"""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Book(CamelModel):
    """
    API representation of a Book entity.

    Maps to and from the domain Book entity.
    """

    isbn: str | None = Field(default=None, description="ISBN-10 or ISBN-13 (hyphens allowed)")
    title: str | None = Field(default=None, description="Book title")
    author: str | None = Field(default=None, description="Author name")
    short_description: str | None = Field(default=None, description="Short summary")
    page_count: int | None = Field(default=None, description="Number of pages (> 0)")
    release_date: date | None = Field(default=None, description="Release date (YYYY-MM-DD)")


class ValidationError(CamelModel):
    """A single field-level error, as returned in 400 responses."""

    property_name: str = Field(description="PascalCase name of the offending field")
    error_message: str = Field(description="What is wrong with the field")
