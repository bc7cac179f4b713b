"""
Recommendation classification and ranking over the candidate pool.

Given a reference movie, candidates are classified into three buckets
(genre, director, actor), deduplicated across buckets, ranked by IMDb
rating and truncated.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Set

from omdb_gateway.core.errors import NoMatches, NotFound, UpstreamUnavailable
from omdb_gateway.core.omdb_client import OmdbClient
from omdb_gateway.core.pool import get_movie_pool
from omdb_gateway.core.records import MISSING_VALUE, MovieRecord, parse_rating

logger = logging.getLogger(__name__)

MAX_BUCKET_SIZE = 15

# Returns the reason string for a match, or None
Matcher = Callable[[MovieRecord], Optional[str]]


class Bucket(str, Enum):
    """Relation strategy a recommendation was found by."""

    GENRE = "genre"
    DIRECTOR = "director"
    ACTOR = "actor"

    @property
    def key(self) -> str:
        return f"{self.value}_based"


# Evaluation order. Earlier buckets claim titles first.
BUCKET_ORDER = (Bucket.GENRE, Bucket.DIRECTOR, Bucket.ACTOR)


@dataclass
class RecommendationItem:
    """A recommended title with the reason it was picked.

    ``rating`` is the numeric form of ``imdb_rating`` used for ranking;
    it is parsed from the text when not given.
    """

    title: str
    year: str
    imdb_rating: str
    plot: str
    reason: str
    rating: Optional[float] = None

    def __post_init__(self):
        if self.rating is None:
            self.rating = parse_rating(self.imdb_rating)

    @classmethod
    def from_record(cls, record: MovieRecord, reason: str) -> "RecommendationItem":
        return cls(
            title=record.title,
            year=record.year,
            imdb_rating=record.imdb_rating,
            plot=record.plot,
            reason=reason,
            rating=record.rating,
        )


class SeenSet:
    """Case-insensitive set of titles already placed in a bucket."""

    def __init__(self, titles: Iterable[str] = ()):
        self._titles: Set[str] = set()
        for title in titles:
            self.add(title)

    def add(self, title: str) -> None:
        self._titles.add(title.casefold())

    def __contains__(self, title: str) -> bool:
        return title.casefold() in self._titles

    def __len__(self) -> int:
        return len(self._titles)


@dataclass
class RecommendationResult:
    """Ranked buckets for one reference movie."""

    favorite_movie: str
    buckets: Dict[Bucket, List[RecommendationItem]]

    def ordered(self) -> List[tuple]:
        """Buckets as (bucket, items) pairs in evaluation order."""
        return [(bucket, self.buckets.get(bucket, [])) for bucket in BUCKET_ORDER]


def rank_by_rating(
    items: Sequence[RecommendationItem],
    limit: int = MAX_BUCKET_SIZE,
) -> List[RecommendationItem]:
    """
    Sort items by rating, highest first, and keep at most ``limit``.

    The sort is stable: equal ratings keep discovery order. Unparsable
    ratings count as 0.0.
    """
    ranked = sorted(items, key=lambda item: item.rating, reverse=True)
    return ranked[:limit]


def genre_matcher(reference: MovieRecord) -> Matcher:
    """First reference genre contained in the candidate's genre field wins."""
    genres = reference.genres

    def match(candidate: MovieRecord) -> Optional[str]:
        candidate_genre = candidate.genre.casefold()
        for genre in genres:
            if genre.casefold() in candidate_genre:
                return f"Same genre: {genre}"
        return None

    return match


def director_matcher(reference: MovieRecord) -> Matcher:
    """Directors must be equal, ignoring case and surrounding whitespace."""
    director = reference.director.strip()

    def match(candidate: MovieRecord) -> Optional[str]:
        if not director or director == MISSING_VALUE:
            return None
        if candidate.director.strip().casefold() == director.casefold():
            return f"Same director: {reference.director}"
        return None

    return match


def actor_matcher(reference: MovieRecord) -> Matcher:
    """First reference actor named in the candidate's actors field wins."""
    actors = [actor.strip() for actor in reference.actor_list]

    def match(candidate: MovieRecord) -> Optional[str]:
        candidate_actors = candidate.actors.casefold()
        for actor in actors:
            if actor.casefold() in candidate_actors:
                return f"Shared actor: {actor}"
        return None

    return match


MATCHERS: Dict[Bucket, Callable[[MovieRecord], Matcher]] = {
    Bucket.GENRE: genre_matcher,
    Bucket.DIRECTOR: director_matcher,
    Bucket.ACTOR: actor_matcher,
}


class RecommendationEngine:
    """
    Classifies the candidate pool against a reference movie.

    Candidates are resolved through the OMDb client one at a time, in pool
    order, so the first bucket to match a title keeps it.

    Usage:
        engine = RecommendationEngine(client)
        result = engine.recommend("The Dark Knight")
        top = engine.top_by_genre("Crime")
    """

    def __init__(
        self,
        client: OmdbClient,
        pool: Optional[Sequence[str]] = None,
        limit: int = MAX_BUCKET_SIZE,
    ):
        """
        Initialize the engine.

        Args:
            client: Upstream client used to resolve every title
            pool: Candidate titles (default: the built-in pool)
            limit: Maximum items per bucket (default: 15)
        """
        self.client = client
        self.pool = tuple(pool) if pool is not None else get_movie_pool()
        self.limit = limit

    def _resolve(self, title: str) -> Optional[MovieRecord]:
        """Look up a candidate. A failed lookup just drops the candidate."""
        try:
            return self.client.lookup_title(title)
        except (NotFound, UpstreamUnavailable) as e:
            logger.debug(f"Skipping candidate {title!r}: {e}")
            return None

    def classify(
        self,
        reference: MovieRecord,
        matcher: Matcher,
        seen: SeenSet,
    ) -> List[RecommendationItem]:
        """
        Run one bucket pass over the pool.

        Titles matched here are added to ``seen`` so later passes skip them.
        The pass stops once ``limit`` items have been collected.
        """
        items: List[RecommendationItem] = []
        for title in self.pool:
            if len(items) >= self.limit:
                break
            candidate = self._resolve(title)
            if candidate is None or candidate.same_title(reference):
                continue
            if candidate.title in seen:
                continue
            reason = matcher(candidate)
            if reason is None:
                continue
            items.append(RecommendationItem.from_record(candidate, reason))
            seen.add(candidate.title)
        return items

    def recommend(self, favorite_title: str) -> RecommendationResult:
        """
        Build genre, director and actor recommendations for a movie.

        Args:
            favorite_title: Title of the reference movie

        Returns:
            RecommendationResult with every bucket ranked and truncated

        Raises:
            NotFound, UpstreamUnavailable: the reference movie could not be resolved
        """
        reference = self.client.lookup_title(favorite_title)
        logger.info(f"Building recommendations for {reference.title!r} over {len(self.pool)} candidates")

        seen = SeenSet()
        buckets: Dict[Bucket, List[RecommendationItem]] = {}
        for bucket in BUCKET_ORDER:
            found = self.classify(reference, MATCHERS[bucket](reference), seen)
            buckets[bucket] = rank_by_rating(found, self.limit)
            logger.debug(f"  {bucket.key}: {len(buckets[bucket])} items")

        return RecommendationResult(favorite_movie=reference.title, buckets=buckets)

    def top_by_genre(self, genre: str) -> List[RecommendationItem]:
        """
        Top-rated pool titles whose genre field contains ``genre``.

        Raises:
            NoMatches: no candidate matched the genre
        """
        needle = genre.casefold()
        matches: List[RecommendationItem] = []
        for title in self.pool:
            candidate = self._resolve(title)
            if candidate is not None and needle in candidate.genre.casefold():
                matches.append(RecommendationItem.from_record(candidate, f"Genre match: {genre}"))

        if not matches:
            raise NoMatches(f"No movies found for genre {genre}")
        logger.info(f"Genre {genre!r} matched {len(matches)} candidates")
        return rank_by_rating(matches, self.limit)
