"""
SQLAlchemy ORM models for the movie catalog database.

This module defines the movies table. Genre and state are stored as codes,
see movie_catalog.core.codec for the conversions.
"""

from datetime import date, datetime
from typing import Optional
from sqlalchemy import Integer, String, Float, Date, Index, TIMESTAMP
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy.sql import func


class Base(DeclarativeBase):
    """Base class for all ORM models."""
    pass


class Movie(Base):
    """
    Movie table storing catalog records.

    Attributes:
        id: Primary key, auto-incremented
        title: Movie title, unique across the catalog (checked by the service)
        duration: Duration in minutes
        genre: Stored genre code (e.g. 'CIENCIA_FICCION')
        release_date: Release date
        rating: Rating between 0 and 5
        state: Lifecycle code, 'D' (available) or 'N' (not available)
        created_at: Timestamp when record was created
        updated_at: Timestamp when record was last updated
    """
    __tablename__ = 'movies'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(150), nullable=False)
    duration: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    genre: Mapped[Optional[str]] = mapped_column(String(40), nullable=True)
    release_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    rating: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    state: Mapped[Optional[str]] = mapped_column(String(1), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        TIMESTAMP,
        nullable=False,
        server_default=func.current_timestamp()
    )
    updated_at: Mapped[datetime] = mapped_column(
        TIMESTAMP,
        nullable=False,
        server_default=func.current_timestamp(),
        onupdate=func.current_timestamp()
    )

    __table_args__ = (
        Index('idx_movies_title', 'title'),
        Index('idx_movies_state', 'state'),
    )

    def __repr__(self) -> str:
        return f"<Movie(id={self.id}, title='{self.title}', state='{self.state}')>"
