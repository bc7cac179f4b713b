"""
Pydantic schemas for Movie API.
"""

from pydantic import BaseModel, Field

from omdb_gateway.api.models.recommendation import RecommendationItem
from omdb_gateway.core.records import MovieRecord


class MovieDetailsResponse(BaseModel):
    """Response model for a single movie."""

    title: str = Field(..., alias="Title")
    year: str = Field(..., alias="Year")
    plot: str = Field(..., alias="Plot")
    country: str = Field(..., alias="Country")
    awards: str = Field(..., alias="Awards")
    director: str = Field(..., alias="Director")
    ratings: str = Field(..., alias="Ratings")

    class Config:
        populate_by_name = True

    @classmethod
    def from_record(cls, movie: MovieRecord) -> "MovieDetailsResponse":
        return cls(
            title=movie.title,
            year=movie.year,
            plot=movie.plot,
            country=movie.country,
            awards=movie.awards,
            director=movie.director,
            ratings=movie.imdb_rating,
        )


class GenreMoviesResponse(BaseModel):
    """Top-rated pool movies for a genre."""

    genre: str
    movies: list[RecommendationItem]
