"""
Movie record stores.

The catalog service only talks to a MovieStore. SqlAlchemyMovieStore is the
production implementation; InMemoryMovieStore keeps records in a dict and is
handy for tests and local experiments.
"""

from typing import Dict, List, Optional, Protocol

from sqlalchemy.orm import Session

from movie_catalog.database import crud
from movie_catalog.database.models import Movie


class MovieStore(Protocol):
    """Keyed storage of movie records."""

    def find_all(self) -> List[Movie]:
        ...

    def find_all_by_state(self, state: str) -> List[Movie]:
        ...

    def find_by_id(self, movie_id: int) -> Optional[Movie]:
        ...

    def find_first_by_title(self, title: str) -> Optional[Movie]:
        ...

    def save(self, movie: Movie) -> Movie:
        ...

    def delete(self, movie: Movie) -> None:
        ...


class SqlAlchemyMovieStore:
    """MovieStore backed by a SQLAlchemy session."""

    def __init__(self, session: Session):
        self.session = session

    def find_all(self) -> List[Movie]:
        return crud.get_movies(self.session)

    def find_all_by_state(self, state: str) -> List[Movie]:
        return crud.get_movies_by_state(self.session, state)

    def find_by_id(self, movie_id: int) -> Optional[Movie]:
        return crud.get_movie(self.session, movie_id)

    def find_first_by_title(self, title: str) -> Optional[Movie]:
        return crud.get_movie_by_title(self.session, title)

    def save(self, movie: Movie) -> Movie:
        return crud.save_movie(self.session, movie)

    def delete(self, movie: Movie) -> None:
        crud.delete_movie(self.session, movie)


class InMemoryMovieStore:
    """MovieStore keeping records in insertion order in a dict."""

    def __init__(self):
        self._movies: Dict[int, Movie] = {}
        self._next_id = 1

    def find_all(self) -> List[Movie]:
        return list(self._movies.values())

    def find_all_by_state(self, state: str) -> List[Movie]:
        return [m for m in self._movies.values() if m.state == state]

    def find_by_id(self, movie_id: int) -> Optional[Movie]:
        return self._movies.get(movie_id)

    def find_first_by_title(self, title: str) -> Optional[Movie]:
        for movie in self._movies.values():
            if movie.title == title:
                return movie
        return None

    def save(self, movie: Movie) -> Movie:
        if movie.id is None:
            movie.id = self._next_id
            self._next_id += 1
        self._movies[movie.id] = movie
        return movie

    def delete(self, movie: Movie) -> None:
        self._movies.pop(movie.id, None)
