"""
Movie catalog service.

Enforces the catalog rules on top of a MovieStore:
- titles are unique across all movies, whatever their state
- new movies always start as available ('D')
- only available movies are listed; fetching by ID does not filter by state
- deletes are permanent
"""

import logging
from typing import List

from movie_catalog.core.schemas import MovieCreate, MoviePatch, MovieView
from movie_catalog.core.codec import STATE_AVAILABLE
from movie_catalog.core.exceptions import MovieAlreadyExists, MovieNotFound
from movie_catalog.database import mapper
from movie_catalog.database.models import Movie
from movie_catalog.database.store import MovieStore

logger = logging.getLogger(__name__)


class MovieCatalogService:
    """
    Catalog operations used by the API layer.

    Usage:
        service = MovieCatalogService(SqlAlchemyMovieStore(session))
        view = service.create(MovieCreate(...))
        movies = service.list_available()
    """

    def __init__(self, store: MovieStore):
        self.store = store

    def list_available(self) -> List[MovieView]:
        """Return every movie whose state is available, in store order."""
        return mapper.to_view_list(self.store.find_all_by_state(STATE_AVAILABLE))

    def get_by_id(self, movie_id: int) -> MovieView:
        """
        Return a movie by ID, whatever its state.

        Raises:
            MovieNotFound: If no movie has this ID
        """
        return mapper.to_view(self._get_movie(movie_id))

    def create(self, movie_in: MovieCreate) -> MovieView:
        """
        Add a movie to the catalog as available.

        The state sent by the client is ignored.

        Raises:
            MovieAlreadyExists: If any movie already has this title
        """
        if self.store.find_first_by_title(movie_in.title) is not None:
            logger.warning("Rejected create: title '%s' already exists", movie_in.title)
            raise MovieAlreadyExists(movie_in.title)

        movie = mapper.to_record(movie_in)
        movie.state = STATE_AVAILABLE
        saved = self.store.save(movie)
        logger.info("Created movie %s '%s'", saved.id, saved.title)
        return mapper.to_view(saved)

    def update(self, movie_id: int, patch: MoviePatch) -> MovieView:
        """
        Change the title, release date and rating of a movie.

        Re-submitting the current title does not count as a collision.

        Raises:
            MovieNotFound: If no movie has this ID
            MovieAlreadyExists: If another movie already has the new title
        """
        movie = self._get_movie(movie_id)

        if movie.title != patch.title:
            if self.store.find_first_by_title(patch.title) is not None:
                logger.warning(
                    "Rejected update of movie %s: title '%s' already exists",
                    movie_id, patch.title,
                )
                raise MovieAlreadyExists(patch.title)

        mapper.apply_patch(patch, movie)
        saved = self.store.save(movie)
        logger.info("Updated movie %s '%s'", saved.id, saved.title)
        return mapper.to_view(saved)

    def delete(self, movie_id: int) -> None:
        """
        Permanently remove a movie.

        Raises:
            MovieNotFound: If no movie has this ID
        """
        movie = self._get_movie(movie_id)
        title = movie.title
        self.store.delete(movie)
        logger.info("Deleted movie %s '%s'", movie_id, title)

    def _get_movie(self, movie_id: int) -> Movie:
        movie = self.store.find_by_id(movie_id)
        if movie is None:
            raise MovieNotFound(movie_id)
        return movie
