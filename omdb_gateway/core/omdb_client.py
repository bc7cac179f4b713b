"""
Upstream client for the OMDb metadata API.

Every lookup is a single blocking GET with no retries and no caching.
The client holds no per-request state and keeps one requests session per
thread, so one instance can be shared by all request handlers.
"""

import logging
import threading
from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests

from omdb_gateway.core.errors import NotFound, UpstreamUnavailable
from omdb_gateway.core.records import MovieRecord, SeasonRecord

logger = logging.getLogger(__name__)

OMDB_API_BASE_URL = "http://www.omdbapi.com/"


@dataclass(frozen=True)
class OmdbQuery:
    """
    A lookup against OMDb, either by free-text title or by IMDb id.

    Set ``title`` or ``imdb_id``, not both. Season, episode and media type
    narrow the lookup.
    """

    title: Optional[str] = None
    imdb_id: Optional[str] = None
    media_type: Optional[str] = None
    season: Optional[str] = None
    episode: Optional[str] = None

    def __post_init__(self):
        if self.title is not None and self.imdb_id is not None:
            raise ValueError("OmdbQuery takes either title or imdb_id, not both")

    @classmethod
    def by_title(cls, title: str, media_type: Optional[str] = None) -> "OmdbQuery":
        return cls(title=title, media_type=media_type)

    @classmethod
    def by_id(
        cls,
        imdb_id: str,
        season: Optional[str] = None,
        episode: Optional[str] = None,
    ) -> "OmdbQuery":
        return cls(imdb_id=imdb_id, season=season, episode=episode)

    def to_params(self) -> Dict[str, str]:
        """Render the query as OMDb query-string parameters (without the key)."""
        params: Dict[str, str] = {}
        if self.title is not None:
            params["t"] = self.title
        else:
            params["i"] = self.imdb_id or ""
        if self.media_type:
            params["type"] = self.media_type
        if self.season is not None:
            params["Season"] = self.season
        if self.episode is not None:
            params["Episode"] = self.episode
        return params


class OmdbClient:
    """
    Thin wrapper around the OMDb HTTP API.

    Usage:
        client = OmdbClient(api_key="...")
        movie = client.lookup_title("The Dark Knight")
        season = client.lookup_season(movie.imdb_id, "1")
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = OMDB_API_BASE_URL,
        timeout_seconds: Optional[float] = 10.0,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize the client.

        Args:
            api_key: OMDb API key, sent as the ``apikey`` parameter
            base_url: OMDb endpoint (default: public HTTP endpoint)
            timeout_seconds: Per-request timeout passed to requests
            session: Optional requests session used by every thread. Without
                one, each worker thread gets its own session.
        """
        self.api_key = api_key
        self.base_url = base_url
        self.timeout_seconds = timeout_seconds
        self._session = session
        self._local = threading.local()

    @property
    def session(self) -> requests.Session:
        if self._session is not None:
            return self._session
        session = getattr(self._local, "session", None)
        if session is None:
            session = self._local.session = requests.Session()
        return session

    def _request_json(self, params: Dict[str, str]) -> Dict[str, Any]:
        """Issue the GET and decode the JSON body."""
        try:
            resp = self.session.get(
                self.base_url,
                params={**params, "apikey": self.api_key},
                timeout=self.timeout_seconds,
            )
        except requests.RequestException as exc:
            logger.warning("OMDb request failed for %s: %s", params, exc)
            raise UpstreamUnavailable("failed to call OMDb API") from exc

        try:
            payload = resp.json()
        except ValueError as exc:
            logger.warning("OMDb returned non-JSON body (HTTP %s) for %s", resp.status_code, params)
            raise UpstreamUnavailable("failed to decode OMDb response") from exc

        if not isinstance(payload, dict):
            raise UpstreamUnavailable("failed to decode OMDb response")
        return payload

    def _request(self, params: Dict[str, str]) -> Dict[str, Any]:
        logger.debug("OMDb lookup: %s", params)
        return self._request_json(params)

    @staticmethod
    def _require_found(record, params: Dict[str, str]):
        """Turn a provider-reported miss into NotFound carrying its error text."""
        if not record.found:
            logger.debug("OMDb reported no match for %s: %s", params, record.error)
            raise NotFound(record.error)
        return record

    def lookup(self, query: OmdbQuery) -> MovieRecord:
        """
        Resolve a query to a movie, series or episode record.

        Raises:
            UpstreamUnavailable: the call could not complete
            NotFound: OMDb reported no match (message is OMDb's error text)
        """
        params = query.to_params()
        return self._require_found(MovieRecord.from_payload(self._request(params)), params)

    def lookup_title(self, title: str, media_type: Optional[str] = None) -> MovieRecord:
        return self.lookup(OmdbQuery.by_title(title, media_type=media_type))

    def lookup_id(
        self,
        imdb_id: str,
        season: Optional[str] = None,
        episode: Optional[str] = None,
    ) -> MovieRecord:
        return self.lookup(OmdbQuery.by_id(imdb_id, season=season, episode=episode))

    def lookup_season(self, imdb_id: str, season: str) -> SeasonRecord:
        """Fetch the episode listing of one season of a series."""
        params = OmdbQuery.by_id(imdb_id, season=season).to_params()
        return self._require_found(SeasonRecord.from_payload(self._request(params)), params)
