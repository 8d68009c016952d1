"""
FastAPI dependency injection for database session, catalog service and
suggestion backend.
"""

import logging
from typing import Generator

from fastapi import Depends
from sqlalchemy.orm import Session

from movie_catalog.api.config import (
    get_database_url,
    get_suggestion_api_key,
    get_suggestion_api_url,
    get_suggestion_model,
    get_suggestion_timeout,
)
from movie_catalog.core.catalog import MovieCatalogService
from movie_catalog.core.suggestions import ChatCompletionSuggester, MovieSuggester
from movie_catalog.database.connection import get_db_manager
from movie_catalog.database.store import SqlAlchemyMovieStore

logger = logging.getLogger(__name__)


def get_db() -> Generator[Session, None, None]:
    """Yield database session for FastAPI Depends()."""
    db_manager = get_db_manager(database_url=get_database_url())
    with db_manager.session_scope() as session:
        yield session


def get_catalog_service(db: Session = Depends(get_db)) -> MovieCatalogService:
    """Build a catalog service bound to the request's session."""
    return MovieCatalogService(SqlAlchemyMovieStore(db))


# Singleton suggester
_suggester: MovieSuggester | None = None


def get_suggester() -> MovieSuggester:
    """Get or create singleton suggester."""
    global _suggester
    if _suggester is None:
        api_key = get_suggestion_api_key()
        if not api_key:
            logger.warning("SUGGESTION_API_KEY not set; /movies/suggest will return 503")
        _suggester = ChatCompletionSuggester(
            api_key=api_key,
            base_url=get_suggestion_api_url(),
            model=get_suggestion_model(),
            timeout=get_suggestion_timeout(),
        )
    return _suggester
