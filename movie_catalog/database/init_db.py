"""
Database initialization and schema creation.

This module provides functions to initialize the database schema and
optionally populate it with sample movies.
"""

import logging
from datetime import date

from sqlalchemy import inspect

from movie_catalog.core.codec import STATE_AVAILABLE
from movie_catalog.database import crud
from movie_catalog.database.connection import DatabaseManager, get_db_manager
from movie_catalog.database.models import Movie

logger = logging.getLogger(__name__)


SAMPLE_MOVIES = [
    ("The Matrix", 136, "CIENCIA_FICCION", date(1999, 3, 31), 4.8),
    ("Toy Story", 81, "ANIMADA", date(1995, 11, 22), 4.6),
    ("The Shining", 146, "TERROR", date(1980, 5, 23), 4.5),
    ("Die Hard", 132, "ACCION", date(1988, 7, 15), 4.4),
    ("Groundhog Day", 101, "COMEDIA", date(1993, 2, 12), 4.2),
    ("The Godfather", 175, "DRAMA", date(1972, 3, 24), 4.9),
]


def init_database(database_url: str, reset: bool = False) -> DatabaseManager:
    """
    Initialize the database and create all tables.

    Args:
        database_url: SQLAlchemy URL
        reset: If True, drop existing tables before creating new ones

    Returns:
        DatabaseManager instance
    """
    db_manager = get_db_manager(database_url=database_url)

    if reset:
        logger.info("Resetting database (dropping all tables)...")
        db_manager.reset_database()
    else:
        db_manager.create_tables()
    logger.info("Database tables ready at %s", db_manager.database_url)

    return db_manager


def seed_sample_movies(db_manager: DatabaseManager) -> int:
    """
    Insert the sample movies whose titles are not stored yet.

    Returns:
        Number of movies inserted
    """
    inserted = 0
    with db_manager.session_scope() as session:
        for title, duration, genre, release_date, rating in SAMPLE_MOVIES:
            if crud.get_movie_by_title(session, title) is not None:
                continue
            crud.save_movie(session, Movie(
                title=title,
                duration=duration,
                genre=genre,
                release_date=release_date,
                rating=rating,
                state=STATE_AVAILABLE,
            ))
            inserted += 1
    logger.info("Seeded %d sample movies", inserted)
    return inserted


def verify_schema(db_manager: DatabaseManager) -> bool:
    """
    Verify that all tables exist in the database.

    Args:
        db_manager: DatabaseManager instance

    Returns:
        True if all tables exist, False otherwise
    """
    inspector = inspect(db_manager.engine)
    existing_tables = set(inspector.get_table_names())

    expected_tables = {'movies'}
    missing_tables = expected_tables - existing_tables

    if missing_tables:
        logger.error("Missing tables: %s", missing_tables)
        return False

    logger.info("All tables exist: %s", existing_tables)
    return True
