"""
Pydantic schemas for API responses.

Field aliases carry the wire names (``Title``, ``imdbRating``,
``Total Seasons``); Python attribute names stay snake_case.
"""

from omdb_gateway.api.models.movie import MovieDetailsResponse, GenreMoviesResponse
from omdb_gateway.api.models.recommendation import RecommendationItem, RecommendationResponse
from omdb_gateway.api.models.series import (
    SeriesResponse,
    EpisodeResponse,
    SeasonEpisode,
    SeasonResponse,
)

__all__ = [
    "MovieDetailsResponse",
    "GenreMoviesResponse",
    "RecommendationItem",
    "RecommendationResponse",
    "SeriesResponse",
    "EpisodeResponse",
    "SeasonEpisode",
    "SeasonResponse",
]
