"""
Errors raised by the catalog core.

Each error carries a stable ``kind`` tag that the API layer uses to pick a
response status, and a human-readable message.
"""

from typing import Optional

__all__ = [
    "CatalogError",
    "MovieNotFound",
    "MovieAlreadyExists",
    "SuggestionUnavailable",
]


class CatalogError(Exception):
    """Base class for all catalog errors."""

    kind: str = "catalog-error"

    def __init__(self, message: str = "An error occurred with the catalog operation."):
        super().__init__(message)
        self.message = message


class MovieNotFound(CatalogError):
    """Raised when no movie exists for the requested id."""

    kind = "movie-not-found"

    def __init__(self, movie_id: Optional[int] = None):
        self.movie_id = movie_id
        if movie_id is not None:
            message = f"Movie with ID {movie_id} not found."
        else:
            message = "Movie not found."
        super().__init__(message)


class MovieAlreadyExists(CatalogError):
    """Raised when another movie already uses the title."""

    kind = "movie-already-exists"

    def __init__(self, title: str):
        self.title = title
        super().__init__(f"Movie '{title}' already exists.")


class SuggestionUnavailable(CatalogError):
    """Raised when the suggestion backend is not configured or fails."""

    kind = "suggestion-unavailable"
