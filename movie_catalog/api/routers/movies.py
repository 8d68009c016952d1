"""
Movie API endpoints.
"""

from fastapi import APIRouter, Depends, Path, Response, status
from fastapi.responses import PlainTextResponse

from movie_catalog.api.dependencies import get_catalog_service, get_suggester
from movie_catalog.api.models.movie import (
    ErrorResponse,
    MovieCreate,
    MoviePatch,
    MovieView,
    SuggestRequest,
)
from movie_catalog.core.catalog import MovieCatalogService
from movie_catalog.core.suggestions import MovieSuggester

router = APIRouter(prefix="/movies", tags=["movies"])

NOT_FOUND = {404: {"model": ErrorResponse, "description": "Movie not found"}}
BAD_REQUEST = {400: {"model": ErrorResponse, "description": "Invalid data or duplicated title"}}


@router.get("", response_model=list[MovieView])
def list_movies(service: MovieCatalogService = Depends(get_catalog_service)):
    """List all available movies."""
    return service.list_available()


@router.get("/{movie_id}", response_model=MovieView, responses=NOT_FOUND)
def get_movie(
    movie_id: int = Path(..., description="Movie identifier", examples=[9]),
    service: MovieCatalogService = Depends(get_catalog_service),
):
    """Get movie details by ID."""
    return service.get_by_id(movie_id)


@router.post("/suggest", response_class=PlainTextResponse)
def suggest_movies(
    request: SuggestRequest,
    suggester: MovieSuggester = Depends(get_suggester),
):
    """Suggest movies matching the user's preferences."""
    return suggester.suggest(request.user_preferences)


@router.post(
    "",
    response_model=MovieView,
    status_code=status.HTTP_201_CREATED,
    responses=BAD_REQUEST,
)
def create_movie(
    movie_in: MovieCreate,
    service: MovieCatalogService = Depends(get_catalog_service),
):
    """Add a movie to the catalog. New movies are always available."""
    return service.create(movie_in)


@router.put("/{movie_id}", response_model=MovieView, responses={**NOT_FOUND, **BAD_REQUEST})
def update_movie(
    patch: MoviePatch,
    movie_id: int = Path(..., description="Movie identifier", examples=[10]),
    service: MovieCatalogService = Depends(get_catalog_service),
):
    """Update title, release date and rating of a movie."""
    return service.update(movie_id, patch)


@router.delete("/{movie_id}", responses=NOT_FOUND)
def delete_movie(
    movie_id: int = Path(..., description="Movie identifier", examples=[10]),
    service: MovieCatalogService = Depends(get_catalog_service),
):
    """Permanently delete a movie."""
    service.delete(movie_id)
    return Response(status_code=status.HTTP_200_OK)
