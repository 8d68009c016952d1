"""
Unit tests for the record/view mapper.
"""

from datetime import date

from movie_catalog.core.schemas import MovieCreate, MoviePatch
from movie_catalog.core.codec import Genre
from movie_catalog.database import mapper
from movie_catalog.database.models import Movie


def stored_movie(**overrides) -> Movie:
    data = {
        "id": 1,
        "title": "The Matrix",
        "duration": 120,
        "genre": "CIENCIA_FICCION",
        "release_date": date(1999, 3, 31),
        "rating": 4.8,
        "state": "D",
    }
    data.update(overrides)
    return Movie(**data)


class TestToView:
    """Tests for mapper.to_view."""

    def test_maps_all_fields(self):
        view = mapper.to_view(stored_movie())

        assert view.title == "The Matrix"
        assert view.duration == 120
        assert view.genre == Genre.SCI_FI
        assert view.release_date == date(1999, 3, 31)
        assert view.rating == 4.8
        assert view.state == "true"

    def test_not_available_state(self):
        assert mapper.to_view(stored_movie(state="N")).state == "false"

    def test_unknown_state_is_none(self):
        assert mapper.to_view(stored_movie(state="X")).state is None
        assert mapper.to_view(stored_movie(state=None)).state is None

    def test_unknown_or_empty_genre_is_none(self):
        assert mapper.to_view(stored_movie(genre="INVALID_GENRE")).genre is None
        assert mapper.to_view(stored_movie(genre="")).genre is None
        assert mapper.to_view(stored_movie(genre=None)).genre is None

    def test_missing_date_and_rating_stay_missing(self):
        view = mapper.to_view(stored_movie(release_date=None, rating=None))

        assert view.release_date is None
        assert view.rating is None

    def test_serializes_with_camel_case(self):
        data = mapper.to_view(stored_movie()).model_dump(mode="json", by_alias=True)

        assert data == {
            "title": "The Matrix",
            "duration": 120,
            "genre": "SCI_FI",
            "releaseDate": "1999-03-31",
            "rating": 4.8,
            "state": "true",
        }


class TestToViewList:
    """Tests for mapper.to_view_list."""

    def test_preserves_order(self):
        movies = [
            stored_movie(id=1, title="Movie 1", genre="ACCION"),
            stored_movie(id=2, title="Movie 2", genre="COMEDIA"),
        ]

        views = mapper.to_view_list(movies)

        assert [v.title for v in views] == ["Movie 1", "Movie 2"]
        assert [v.genre for v in views] == [Genre.ACTION, Genre.COMEDY]

    def test_empty(self):
        assert mapper.to_view_list([]) == []


class TestToRecord:
    """Tests for mapper.to_record."""

    def test_maps_fields_and_encodes_genre(self):
        movie = mapper.to_record(MovieCreate(
            title="The Matrix",
            duration=120,
            genre=Genre.SCI_FI,
            release_date=date(1999, 3, 31),
            rating=4.8,
            state="D",
        ))

        assert movie.id is None
        assert movie.title == "The Matrix"
        assert movie.duration == 120
        assert movie.genre == "CIENCIA_FICCION"
        assert movie.release_date == date(1999, 3, 31)
        assert movie.rating == 4.8

    def test_state_is_discarded(self):
        movie = mapper.to_record(MovieCreate(
            title="Up", duration=96, genre=Genre.ANIMATED,
            release_date=date(2009, 5, 29), state="N",
        ))

        assert movie.state is None
        assert movie.genre == "ANIMADA"

    def test_round_trip_with_available_state(self):
        movie_in = MovieCreate(
            title="Alien", duration=117, genre=Genre.HORROR,
            release_date=date(1979, 5, 25), rating=4.5, state="N",
        )
        movie = mapper.to_record(movie_in)
        movie.state = "D"

        view = mapper.to_view(movie)

        assert (view.title, view.duration, view.genre, view.release_date, view.rating) == (
            movie_in.title, movie_in.duration, movie_in.genre,
            movie_in.release_date, movie_in.rating,
        )


class TestApplyPatch:
    """Tests for mapper.apply_patch."""

    def test_updates_mutable_fields_only(self):
        movie = stored_movie(title="Original Title", duration=100, genre="ACCION", rating=3.0)

        mapper.apply_patch(
            MoviePatch(title="Updated Title", release_date=date(2005, 5, 5), rating=4.5),
            movie,
        )

        assert movie.title == "Updated Title"
        assert movie.release_date == date(2005, 5, 5)
        assert movie.rating == 4.5
        assert movie.duration == 100
        assert movie.genre == "ACCION"
        assert movie.state == "D"
        assert movie.id == 1

    def test_missing_values_clear_fields(self):
        movie = stored_movie()

        mapper.apply_patch(MoviePatch(title="New Title"), movie)

        assert movie.title == "New Title"
        assert movie.release_date is None
        assert movie.rating is None
