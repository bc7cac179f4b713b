"""
Value objects built from OMDb payloads.

OMDb returns every field as text. Records keep the raw text so responses
can echo it unchanged, and expose parsed views (genre list, actor list,
numeric rating) for classification and ranking.
"""

import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

LIST_DELIMITER = ", "
MISSING_VALUE = "N/A"


def parse_rating(value: Optional[str]) -> float:
    """
    Parse a textual rating, falling back to 0.0.

    Used by every ranking call site so that unparsable values
    ("N/A", empty, garbage) always sort as the lowest rating.

    Args:
        value: Rating text such as "8.6"

    Returns:
        float: Parsed rating, or 0.0 if the text is not a finite number
    """
    if value is None:
        return 0.0
    try:
        rating = float(str(value).strip())
    except ValueError:
        return 0.0
    if not math.isfinite(rating):
        return 0.0
    return rating


def split_list(value: Optional[str]) -> List[str]:
    """
    Split an OMDb delimited field ("Action, Crime, Drama") into tokens.

    Order and case are preserved, duplicates and empty tokens are dropped,
    and the "N/A" placeholder yields an empty list.
    """
    if not value or value.strip() == MISSING_VALUE:
        return []
    tokens = [token for token in value.split(LIST_DELIMITER) if token.strip()]
    return list(dict.fromkeys(tokens))


def _text(payload: Dict[str, Any], key: str) -> str:
    value = payload.get(key)
    return "" if value is None else str(value)


@dataclass
class MovieRecord:
    """A movie, series or episode as returned by an OMDb lookup."""

    title: str = ""
    year: str = ""
    plot: str = ""
    country: str = ""
    awards: str = ""
    director: str = ""
    genre: str = ""
    actors: str = ""
    imdb_rating: str = ""
    imdb_id: str = ""
    total_seasons: str = ""
    found: bool = True
    error: str = ""

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "MovieRecord":
        """Build a record from a decoded OMDb JSON object."""
        if _text(payload, "Response") == "False":
            return cls.not_found(_text(payload, "Error"))
        return cls(
            title=_text(payload, "Title"),
            year=_text(payload, "Year"),
            plot=_text(payload, "Plot"),
            country=_text(payload, "Country"),
            awards=_text(payload, "Awards"),
            director=_text(payload, "Director"),
            genre=_text(payload, "Genre"),
            actors=_text(payload, "Actors"),
            imdb_rating=_text(payload, "imdbRating"),
            imdb_id=_text(payload, "imdbID"),
            total_seasons=_text(payload, "totalSeasons"),
        )

    @classmethod
    def not_found(cls, error: str) -> "MovieRecord":
        return cls(found=False, error=error)

    @property
    def genres(self) -> List[str]:
        return split_list(self.genre)

    @property
    def actor_list(self) -> List[str]:
        return split_list(self.actors)

    @property
    def rating(self) -> float:
        return parse_rating(self.imdb_rating)

    def same_title(self, other: "MovieRecord") -> bool:
        return self.title.casefold() == other.title.casefold()


@dataclass
class EpisodeBrief:
    """One entry of a season listing."""

    title: str = ""
    released: str = ""
    episode: str = ""
    imdb_rating: str = ""
    imdb_id: str = ""

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "EpisodeBrief":
        return cls(
            title=_text(payload, "Title"),
            released=_text(payload, "Released"),
            episode=_text(payload, "Episode"),
            imdb_rating=_text(payload, "imdbRating"),
            imdb_id=_text(payload, "imdbID"),
        )


@dataclass
class SeasonRecord:
    """A season listing for a series."""

    title: str = ""
    season: str = ""
    total_seasons: str = ""
    episodes: List[EpisodeBrief] = field(default_factory=list)
    found: bool = True
    error: str = ""

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "SeasonRecord":
        if _text(payload, "Response") == "False":
            return cls(found=False, error=_text(payload, "Error"))
        episodes = payload.get("Episodes") or []
        return cls(
            title=_text(payload, "Title"),
            season=_text(payload, "Season"),
            total_seasons=_text(payload, "totalSeasons"),
            episodes=[EpisodeBrief.from_payload(ep) for ep in episodes if isinstance(ep, dict)],
        )


@dataclass
class EnrichedEpisode:
    """Season listing entry with its individually fetched plot."""

    title: str
    released: str
    episode: str
    imdb_rating: str
    imdb_id: str
    plot: str
