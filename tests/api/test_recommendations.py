"""
API tests for the recommendation endpoint.

GET /api/recommend returns the three buckets in fixed order.
"""

import pytest
from fastapi.testclient import TestClient

from omdb_gateway.api import dependencies
from omdb_gateway.api.main import app
from omdb_gateway.core.recommender import RecommendationEngine
from tests.conftest import DARK_KNIGHT_POOL


@pytest.fixture
def client(dark_knight_client):
    app.dependency_overrides[dependencies.get_omdb_client] = lambda: dark_knight_client
    app.dependency_overrides[dependencies.get_recommendation_engine] = (
        lambda: RecommendationEngine(dark_knight_client, pool=DARK_KNIGHT_POOL)
    )
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestRecommendEndpoint:
    """Tests for GET /api/recommend."""

    def test_recommend_envelope(self, client):
        """Response has favorite_movie and buckets in genre, director, actor order."""
        r = client.get("/api/recommend", params={"favorite_movie": "the dark knight"})
        assert r.status_code == 200
        data = r.json()
        assert data["favorite_movie"] == "The Dark Knight"
        assert [list(group) for group in data["recommendations"]] == [
            ["genre_based"],
            ["director_based"],
            ["actor_based"],
        ]

    def test_recommend_items(self, client):
        r = client.get("/api/recommend", params={"favorite_movie": "The Dark Knight"})
        genre, director, actor = r.json()["recommendations"]

        assert [m["Title"] for m in genre["genre_based"]] == ["The Dark Knight Rises", "Batman Begins"]
        assert [m["Title"] for m in director["director_based"]] == ["Interstellar", "Memento"]
        assert [m["Title"] for m in actor["actor_based"]] == ["American Psycho", "Brokeback Mountain"]
        assert genre["genre_based"][0] == {
            "Title": "The Dark Knight Rises",
            "Year": "2000",
            "imdbRating": "8.4",
            "Plot": "Plot of The Dark Knight Rises.",
            "Reason": "Same genre: Action",
        }

    def test_recommend_empty_buckets_are_lists(self, client, dark_knight_client):
        """Buckets with no matches are present as empty lists."""
        app.dependency_overrides[dependencies.get_recommendation_engine] = (
            lambda: RecommendationEngine(dark_knight_client, pool=["Toy Story"])
        )
        r = client.get("/api/recommend", params={"favorite_movie": "The Dark Knight"})
        assert r.status_code == 200
        assert r.json()["recommendations"] == [
            {"genre_based": []},
            {"director_based": []},
            {"actor_based": []},
        ]

    def test_recommend_missing_param(self, client):
        r = client.get("/api/recommend")
        assert r.status_code == 400
        assert r.text == "Missing favorite_movie query parameter"

    def test_recommend_unknown_movie(self, client):
        r = client.get("/api/recommend", params={"favorite_movie": "No Such Movie"})
        assert r.status_code == 404
        assert r.text == "Movie not found!"
