"""
Database module for the movie catalog.

This module provides the ORM model, connection management, CRUD functions,
record stores and the record/view mapper.
"""

from movie_catalog.database.models import Base, Movie
from movie_catalog.database.connection import DatabaseManager, get_db_manager
from movie_catalog.database.init_db import init_database, seed_sample_movies, verify_schema
from movie_catalog.database.store import InMemoryMovieStore, MovieStore, SqlAlchemyMovieStore
from movie_catalog.database import crud

__all__ = [
    # Models
    'Base',
    'Movie',
    # Connection
    'DatabaseManager',
    'get_db_manager',
    # Initialization
    'init_database',
    'seed_sample_movies',
    'verify_schema',
    # Stores
    'MovieStore',
    'SqlAlchemyMovieStore',
    'InMemoryMovieStore',
    # CRUD module
    'crud',
]
