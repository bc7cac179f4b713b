"""
Movie API endpoints.
"""

from fastapi import APIRouter, Depends, Query

from omdb_gateway.api.dependencies import get_omdb_client, get_recommendation_engine
from omdb_gateway.api.models.movie import MovieDetailsResponse, GenreMoviesResponse
from omdb_gateway.api.models.recommendation import RecommendationItem
from omdb_gateway.core.errors import MissingParameter
from omdb_gateway.core.omdb_client import OmdbClient
from omdb_gateway.core.recommender import RecommendationEngine

router = APIRouter(prefix="/api", tags=["movies"])


@router.get("/movie", response_model=MovieDetailsResponse)
def get_movie(
    title: str | None = Query(None),
    client: OmdbClient = Depends(get_omdb_client),
):
    """Get movie details by title."""
    if not title:
        raise MissingParameter("Missing title query parameter")
    movie = client.lookup_title(title)
    return MovieDetailsResponse.from_record(movie)


@router.get("/movies/genre", response_model=GenreMoviesResponse)
def get_top_movies_by_genre(
    genre: str | None = Query(None),
    engine: RecommendationEngine = Depends(get_recommendation_engine),
):
    """Top-rated pool movies whose genre contains the query."""
    if not genre:
        raise MissingParameter("Missing genre query parameter")
    matches = engine.top_by_genre(genre)
    return GenreMoviesResponse(
        genre=genre,
        movies=[RecommendationItem.from_item(item) for item in matches],
    )
