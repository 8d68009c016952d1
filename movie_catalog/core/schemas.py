"""
Movie views exchanged between the catalog service and its callers.

JSON field names are camelCase; snake_case names are accepted on input too.
"""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from movie_catalog.core.codec import Genre


class CamelModel(BaseModel):
    """Base model serializing field names as camelCase."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def _not_blank(value: str) -> str:
    if not value.strip():
        raise ValueError("must not be blank")
    return value


def _not_in_future(value: date | None) -> date | None:
    if value is not None and value > date.today():
        raise ValueError("must be a date in the past or today")
    return value


class MovieView(CamelModel):
    """A single movie as callers see it."""

    title: str
    duration: int | None = None
    genre: Genre | None = None
    release_date: date | None = None
    rating: float | None = None
    state: str | None = None


class MovieCreate(MovieView):
    """
    A movie to add to the catalog.

    The state is required but ignored. Booleans are accepted and read as
    'true'/'false'.
    """

    title: str = Field(..., min_length=1, max_length=150)
    duration: int = Field(..., ge=1, le=300)
    genre: Genre
    release_date: date
    rating: float | None = Field(None, ge=0, le=5)
    state: str = Field(..., min_length=1)

    @field_validator("state", mode="before")
    @classmethod
    def render_bool_state(cls, value):
        if isinstance(value, bool):
            return "true" if value else "false"
        return value

    @field_validator("title", "state")
    @classmethod
    def check_not_blank(cls, value: str) -> str:
        return _not_blank(value)

    @field_validator("release_date")
    @classmethod
    def check_release_date(cls, value: date) -> date:
        return _not_in_future(value)


class MoviePatch(CamelModel):
    """
    Changes to an existing movie.

    Only title, release date and rating can change. Omitted release date or
    rating clear the stored value.
    """

    title: str = Field(..., min_length=1, max_length=150)
    release_date: date | None = None
    rating: float | None = Field(None, ge=0, le=5)

    @field_validator("title")
    @classmethod
    def check_not_blank(cls, value: str) -> str:
        return _not_blank(value)

    @field_validator("release_date")
    @classmethod
    def check_release_date(cls, value: date | None) -> date | None:
        return _not_in_future(value)
