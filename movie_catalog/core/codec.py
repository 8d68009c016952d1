"""
Conversion between external genre/state values and their stored codes.

Inbound values are validated at the API boundary, so the external -> stored
direction is total. Stored values may have been written by other tools, so
the stored -> external direction degrades to ``None`` instead of raising.
"""

from enum import Enum
from typing import Optional


class Genre(str, Enum):
    """Genres exposed by the API."""

    ACTION = "ACTION"
    COMEDY = "COMEDY"
    DRAMA = "DRAMA"
    ANIMATED = "ANIMATED"
    HORROR = "HORROR"
    SCI_FI = "SCI_FI"


STATE_AVAILABLE = "D"
STATE_NOT_AVAILABLE = "N"

_GENRE_CODES = {
    Genre.ACTION: "ACCION",
    Genre.COMEDY: "COMEDIA",
    Genre.DRAMA: "DRAMA",
    Genre.ANIMATED: "ANIMADA",
    Genre.HORROR: "TERROR",
    Genre.SCI_FI: "CIENCIA_FICCION",
}
_CODE_GENRES = {code: genre for genre, code in _GENRE_CODES.items()}


def genre_to_code(genre: Genre) -> str:
    """Return the stored code for a genre."""
    return _GENRE_CODES[Genre(genre)]


def code_to_genre(code: Optional[str]) -> Optional[Genre]:
    """
    Return the genre for a stored code.

    Args:
        code: Stored genre code, possibly empty or unknown

    Returns:
        Matching Genre, or None when the code is not recognized
    """
    if not code:
        return None
    return _CODE_GENRES.get(code)


def state_to_flag(code: Optional[str]) -> Optional[bool]:
    """
    Convert a stored lifecycle code to an availability flag.

    'D' -> True and 'N' -> False, ignoring case. Anything else is None.
    """
    if code is None:
        return None
    normalized = code.upper()
    if normalized == STATE_AVAILABLE:
        return True
    if normalized == STATE_NOT_AVAILABLE:
        return False
    return None


def flag_to_state(flag: Optional[bool]) -> str:
    """Convert an availability flag to a stored code; missing means 'N'."""
    return STATE_AVAILABLE if flag else STATE_NOT_AVAILABLE
