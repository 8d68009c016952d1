"""
CRUD operations for the Movie model.

Plain functions over a SQLAlchemy session. Business rules (title
uniqueness, visibility) live in movie_catalog.core.catalog.
"""

from typing import List, Optional
from sqlalchemy import func
from sqlalchemy.orm import Session

from movie_catalog.database.models import Movie


def get_movie(session: Session, movie_id: int) -> Optional[Movie]:
    """
    Get a movie by ID.

    Args:
        session: Database session
        movie_id: Movie ID

    Returns:
        Movie object or None if not found
    """
    return session.query(Movie).filter(Movie.id == movie_id).first()


def get_movies(session: Session) -> List[Movie]:
    """Get all movies ordered by ID."""
    return session.query(Movie).order_by(Movie.id).all()


def get_movies_by_state(session: Session, state: str) -> List[Movie]:
    """
    Get movies with the given lifecycle code.

    Args:
        session: Database session
        state: Lifecycle code ('D' or 'N')

    Returns:
        List of Movie objects ordered by ID
    """
    return session.query(Movie).filter(Movie.state == state).order_by(Movie.id).all()


def get_movie_by_title(session: Session, title: str) -> Optional[Movie]:
    """
    Get the first movie with exactly this title (case-sensitive).

    Args:
        session: Database session
        title: Movie title

    Returns:
        Movie object or None if not found
    """
    return session.query(Movie).filter(Movie.title == title).order_by(Movie.id).first()


def get_movie_count(session: Session) -> int:
    """Get total count of movies."""
    return session.query(func.count(Movie.id)).scalar()


def save_movie(session: Session, movie: Movie) -> Movie:
    """
    Insert a new movie or persist changes to an existing one.

    Args:
        session: Database session
        movie: Transient or persistent Movie object

    Returns:
        The saved Movie with its ID populated
    """
    session.add(movie)
    session.commit()
    session.refresh(movie)
    return movie


def delete_movie(session: Session, movie: Movie) -> None:
    """
    Delete a movie.

    Args:
        session: Database session
        movie: Persistent Movie object
    """
    session.delete(movie)
    session.commit()
