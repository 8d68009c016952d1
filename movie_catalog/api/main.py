"""
FastAPI application entry point for the Movie Catalog API.
"""

import logging
import time

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from movie_catalog import __version__
from movie_catalog.api.config import get_api_host, get_api_port, get_log_file, get_log_level
from movie_catalog.api.errors import register_exception_handlers
from movie_catalog.api.routers import movies, system
from movie_catalog.utils.logging_config import setup_logging

setup_logging(log_file=get_log_file(), level=get_log_level())
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Movie Catalog API",
    description="REST API to manage the movie catalog and get movie suggestions",
    version=__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log method, path, status and duration of every request."""
    start = time.perf_counter()
    status_code = 500
    try:
        response = await call_next(request)
        status_code = response.status_code
        return response
    finally:
        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info(
            "%s %s -> %d (%.1f ms)",
            request.method, request.url.path, status_code, elapsed_ms,
        )


register_exception_handlers(app)

app.include_router(movies.router)
app.include_router(system.router)


@app.get("/")
def root():
    """Root endpoint."""
    return {
        "message": "Movie Catalog API",
        "docs": "/docs",
        "health": "/api/health",
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=get_api_host(), port=get_api_port())
