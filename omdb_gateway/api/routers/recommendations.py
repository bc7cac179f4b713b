"""
Recommendation API endpoints.
"""

from fastapi import APIRouter, Depends, Query

from omdb_gateway.api.dependencies import get_recommendation_engine
from omdb_gateway.api.models.recommendation import RecommendationResponse
from omdb_gateway.core.errors import MissingParameter
from omdb_gateway.core.recommender import RecommendationEngine

router = APIRouter(prefix="/api", tags=["recommendations"])


@router.get("/recommend", response_model=RecommendationResponse)
def recommend_movies(
    favorite_movie: str | None = Query(None),
    engine: RecommendationEngine = Depends(get_recommendation_engine),
):
    """Genre, director and actor based recommendations for a favorite movie."""
    if not favorite_movie:
        raise MissingParameter("Missing favorite_movie query parameter")
    result = engine.recommend(favorite_movie)
    return RecommendationResponse.from_result(result)
