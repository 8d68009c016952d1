"""
Pydantic schemas for Movie API.

Movie views live in movie_catalog.core.schemas and are re-exported here
next to the API-only request and error bodies.
"""

from pydantic import BaseModel, Field

from movie_catalog.core.schemas import CamelModel, MovieCreate, MoviePatch, MovieView

__all__ = [
    "MovieView",
    "MovieCreate",
    "MoviePatch",
    "SuggestRequest",
    "ErrorResponse",
]


class SuggestRequest(CamelModel):
    """Request body for movie suggestions."""

    user_preferences: str = Field(..., min_length=1, max_length=500)


class ErrorResponse(BaseModel):
    """Error body returned for every failed request."""

    type: str
    message: str
