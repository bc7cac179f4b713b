"""
Shared fixtures: an OMDb client that serves canned payloads instead of
calling the network.
"""

from typing import Any, Dict, Optional, Tuple

import pytest

from omdb_gateway.core.errors import UpstreamUnavailable
from omdb_gateway.core.omdb_client import OmdbClient

NOT_FOUND_PAYLOAD = {"Response": "False", "Error": "Movie not found!"}


def movie_payload(
    title: str,
    genre: str = "N/A",
    director: str = "N/A",
    actors: str = "N/A",
    rating: str = "N/A",
    year: str = "2000",
    imdb_id: Optional[str] = None,
    **extra: Any,
) -> Dict[str, Any]:
    """Build an OMDb-shaped movie payload."""
    payload = {
        "Title": title,
        "Year": year,
        "Plot": f"Plot of {title}.",
        "Country": "United States",
        "Awards": "N/A",
        "Director": director,
        "Genre": genre,
        "Actors": actors,
        "imdbRating": rating,
        "imdbID": imdb_id or "tt-" + title.lower().replace(" ", "-"),
        "Response": "True",
    }
    payload.update(extra)
    return payload


class FakeOmdbClient(OmdbClient):
    """OmdbClient whose transport is a lookup table."""

    def __init__(self):
        super().__init__(api_key="test-key")
        self.titles: Dict[str, Dict[str, Any]] = {}
        self.ids: Dict[Tuple[str, Optional[str], Optional[str]], Dict[str, Any]] = {}
        self.unavailable: set = set()
        self.calls: list = []

    def add(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        self.titles[payload["Title"].casefold()] = payload
        return payload

    def add_id(
        self,
        imdb_id: str,
        payload: Dict[str, Any],
        season: Optional[str] = None,
        episode: Optional[str] = None,
    ) -> Dict[str, Any]:
        self.ids[(imdb_id, season, episode)] = payload
        return payload

    def _request_json(self, params: Dict[str, str]) -> Dict[str, Any]:
        self.calls.append(dict(params))
        if "t" in params:
            key = params["t"].casefold()
            if key in self.unavailable:
                raise UpstreamUnavailable("failed to call OMDb API")
            return self.titles.get(key, NOT_FOUND_PAYLOAD)
        imdb_id = params["i"]
        if imdb_id in self.unavailable:
            raise UpstreamUnavailable("failed to call OMDb API")
        key = (imdb_id, params.get("Season"), params.get("Episode"))
        return self.ids.get(key, {"Response": "False", "Error": "Incorrect IMDb ID."})


@pytest.fixture
def fake_client():
    """Empty fake OMDb client."""
    return FakeOmdbClient()


@pytest.fixture
def dark_knight_client(fake_client):
    """Fake client loaded with The Dark Knight and related candidates."""
    fake_client.add(movie_payload(
        "The Dark Knight",
        genre="Action, Crime, Drama",
        director="Christopher Nolan",
        actors="Christian Bale, Heath Ledger, Aaron Eckhart",
        rating="9.0",
        year="2008",
    ))
    fake_client.add(movie_payload(
        "Batman Begins",
        genre="Action, Crime, Drama",
        director="Christopher Nolan",
        actors="Christian Bale, Michael Caine, Ken Watanabe",
        rating="8.2",
    ))
    fake_client.add(movie_payload(
        "The Dark Knight Rises",
        genre="Action, Drama",
        director="Christopher Nolan",
        actors="Christian Bale, Tom Hardy, Anne Hathaway",
        rating="8.4",
    ))
    fake_client.add(movie_payload(
        "Memento",
        genre="Mystery, Thriller",
        director="Christopher Nolan",
        actors="Guy Pearce, Carrie-Anne Moss",
        rating="8.4",
    ))
    fake_client.add(movie_payload(
        "Interstellar",
        genre="Adventure, Sci-Fi",
        director="Christopher Nolan",
        actors="Matthew McConaughey, Anne Hathaway",
        rating="8.7",
    ))
    fake_client.add(movie_payload(
        "American Psycho",
        genre="Comedy, Horror",
        director="Mary Harron",
        actors="Christian Bale, Justin Theroux",
        rating="7.6",
    ))
    fake_client.add(movie_payload(
        "Brokeback Mountain",
        genre="Romance",
        director="Ang Lee",
        actors="Heath Ledger, Jake Gyllenhaal",
        rating="N/A",
    ))
    fake_client.add(movie_payload(
        "Toy Story",
        genre="Animation, Adventure, Comedy",
        director="John Lasseter",
        actors="Tom Hanks, Tim Allen",
        rating="8.3",
    ))
    return fake_client


DARK_KNIGHT_POOL = [
    "The Dark Knight",
    "Batman Begins",
    "Memento",
    "Missing Movie",
    "American Psycho",
    "The Dark Knight Rises",
    "Interstellar",
    "Brokeback Mountain",
    "Toy Story",
]


SEASON_PAYLOAD = {
    "Title": "Lost",
    "Season": "1",
    "totalSeasons": "6",
    "Episodes": [
        {"Title": "Pilot: Part 1", "Released": "2004-09-22", "Episode": "1",
         "imdbRating": "9.1", "imdbID": "tt0636289"},
        {"Title": "Pilot: Part 2", "Released": "2004-09-29", "Episode": "2",
         "imdbRating": "N/A", "imdbID": "tt0636290"},
    ],
    "Response": "True",
}


@pytest.fixture
def lost_client(fake_client):
    """Fake client with the first season of Lost."""
    fake_client.add(movie_payload(
        "Lost", genre="Adventure, Drama, Fantasy", director="N/A",
        imdb_id="tt0411008", totalSeasons="6",
    ))
    fake_client.add_id("tt0411008", SEASON_PAYLOAD, season="1")
    fake_client.add_id("tt0636289", movie_payload(
        "Pilot: Part 1 (Detail)", rating="9.2", imdb_id="tt0636289",
        Plot="Survivors of a plane crash.",
    ))
    fake_client.add_id("tt0411008", movie_payload(
        "Tabula Rasa", director="Jack Bender", year="2004", imdb_id="tt0636291",
    ), season="1", episode="3")
    return fake_client
