"""
Pydantic schemas for Recommendation API.
"""

from pydantic import BaseModel, Field

from omdb_gateway.core import recommender


class RecommendationItem(BaseModel):
    """Single recommended title with the reason it was picked."""

    title: str = Field(..., alias="Title")
    year: str = Field(..., alias="Year")
    imdb_rating: str = Field(..., alias="imdbRating")
    plot: str = Field(..., alias="Plot")
    reason: str = Field(..., alias="Reason")

    class Config:
        populate_by_name = True

    @classmethod
    def from_item(cls, item: recommender.RecommendationItem) -> "RecommendationItem":
        return cls(
            title=item.title,
            year=item.year,
            imdb_rating=item.imdb_rating,
            plot=item.plot,
            reason=item.reason,
        )


class RecommendationResponse(BaseModel):
    """
    Recommendations for a favorite movie.

    ``recommendations`` holds one single-key object per bucket, always in
    the order genre_based, director_based, actor_based.
    """

    favorite_movie: str
    recommendations: list[dict[str, list[RecommendationItem]]]

    @classmethod
    def from_result(cls, result: recommender.RecommendationResult) -> "RecommendationResponse":
        return cls(
            favorite_movie=result.favorite_movie,
            recommendations=[
                {bucket.key: [RecommendationItem.from_item(item) for item in items]}
                for bucket, items in result.ordered()
            ],
        )
