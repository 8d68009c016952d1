"""
Pydantic schemas for API request/response validation.
"""

from movie_catalog.api.models.movie import (
    ErrorResponse,
    MovieCreate,
    MoviePatch,
    MovieView,
    SuggestRequest,
)

__all__ = [
    "MovieView",
    "MovieCreate",
    "MoviePatch",
    "SuggestRequest",
    "ErrorResponse",
]
