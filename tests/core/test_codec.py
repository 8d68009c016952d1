"""
Unit tests for the genre/state codec.
"""

import pytest

from movie_catalog.core.codec import (
    Genre,
    code_to_genre,
    flag_to_state,
    genre_to_code,
    state_to_flag,
)


EXPECTED_CODES = {
    Genre.ACTION: "ACCION",
    Genre.COMEDY: "COMEDIA",
    Genre.DRAMA: "DRAMA",
    Genre.ANIMATED: "ANIMADA",
    Genre.HORROR: "TERROR",
    Genre.SCI_FI: "CIENCIA_FICCION",
}


class TestGenreCodec:
    """Tests for genre_to_code and code_to_genre."""

    def test_every_genre_has_a_code(self):
        """Each genre maps to its stored code."""
        for genre, code in EXPECTED_CODES.items():
            assert genre_to_code(genre) == code

    def test_genre_round_trip(self):
        """Decoding an encoded genre gives the genre back."""
        for genre in Genre:
            assert code_to_genre(genre_to_code(genre)) is genre

    def test_genre_name_string_accepted(self):
        """Plain enum names are accepted when encoding."""
        assert genre_to_code("SCI_FI") == "CIENCIA_FICCION"

    @pytest.mark.parametrize("code", ["INVALID_GENRE", "", None, "accion", "SCI_FI"])
    def test_unknown_code_maps_to_none(self, code):
        """Unknown, empty or missing codes decode to None without raising."""
        assert code_to_genre(code) is None


class TestStateCodec:
    """Tests for state_to_flag and flag_to_state."""

    def test_available_code(self):
        assert state_to_flag("D") is True
        assert state_to_flag("d") is True

    def test_not_available_code(self):
        assert state_to_flag("N") is False
        assert state_to_flag("n") is False

    @pytest.mark.parametrize("code", [None, "", "X", "true"])
    def test_unknown_code_maps_to_none(self, code):
        assert state_to_flag(code) is None

    def test_flag_to_state(self):
        """True is available; False and None both default to not available."""
        assert flag_to_state(True) == "D"
        assert flag_to_state(False) == "N"
        assert flag_to_state(None) == "N"
