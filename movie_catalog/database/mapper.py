"""
Mapping between stored Movie records and API views.

Genres and states go through movie_catalog.core.codec. Absent stored values
stay absent in the view, and absent patch values clear the stored field.
"""

from typing import Iterable, List, Optional

from movie_catalog.core.schemas import MovieCreate, MoviePatch, MovieView
from movie_catalog.core import codec
from movie_catalog.database.models import Movie


def _render_flag(flag: Optional[bool]) -> Optional[str]:
    if flag is None:
        return None
    return "true" if flag else "false"


def to_view(movie: Movie) -> MovieView:
    """
    Convert a stored Movie into its API view.

    Args:
        movie: Stored Movie record

    Returns:
        MovieView with the genre decoded (None if unknown) and the state
        rendered as 'true'/'false' (None if unknown)
    """
    return MovieView(
        title=movie.title,
        duration=movie.duration,
        genre=codec.code_to_genre(movie.genre),
        release_date=movie.release_date,
        rating=movie.rating,
        state=_render_flag(codec.state_to_flag(movie.state)),
    )


def to_view_list(movies: Iterable[Movie]) -> List[MovieView]:
    """Convert stored Movies to views, preserving order."""
    return [to_view(movie) for movie in movies]


def to_record(view: MovieCreate) -> Movie:
    """
    Build a new Movie record from a create request.

    The incoming state is discarded; the caller decides the lifecycle code.
    """
    return Movie(
        title=view.title,
        duration=view.duration,
        genre=codec.genre_to_code(view.genre),
        release_date=view.release_date,
        rating=view.rating,
    )


def apply_patch(patch: MoviePatch, movie: Movie) -> None:
    """
    Overwrite title, release date and rating of a stored Movie in place.

    Fields missing from the patch are written as None. Duration, genre and
    state are left untouched.
    """
    movie.title = patch.title
    movie.release_date = patch.release_date
    movie.rating = patch.rating
