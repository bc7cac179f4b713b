"""
Series, season and episode lookups with per-episode plot enrichment.
"""

import logging
from typing import List

from omdb_gateway.core.errors import GatewayError, NotFound, UpstreamUnavailable
from omdb_gateway.core.omdb_client import OmdbClient
from omdb_gateway.core.records import EnrichedEpisode, EpisodeBrief, MovieRecord, SeasonRecord

logger = logging.getLogger(__name__)

PLOT_NOT_AVAILABLE = "Plot not available"
SERIES_TYPE = "series"


def _prefixed(prefix: str, error: GatewayError) -> GatewayError:
    """Re-create an upstream error with a prefix naming the missing entity."""
    return type(error)(f"{prefix}: {error.message}")


class SeriesService:
    """Resolves series, seasons and episodes through the OMDb client."""

    def __init__(self, client: OmdbClient):
        self.client = client

    def series_details(self, title: str) -> MovieRecord:
        try:
            return self.client.lookup_title(title, media_type=SERIES_TYPE)
        except (NotFound, UpstreamUnavailable) as e:
            raise _prefixed("Series not found", e) from e

    def episode_details(self, series_title: str, season: str, episode: str) -> tuple:
        """
        Look up one episode of a series.

        Returns:
            Tuple of (series record, episode record)
        """
        try:
            series = self.client.lookup_title(series_title)
        except (NotFound, UpstreamUnavailable) as e:
            raise _prefixed("Series not found", e) from e

        try:
            episode_record = self.client.lookup_id(series.imdb_id, season=season, episode=episode)
        except (NotFound, UpstreamUnavailable) as e:
            raise _prefixed("Episode not found", e) from e
        return series, episode_record

    def enrich_episode(self, brief: EpisodeBrief) -> EnrichedEpisode:
        """
        Re-fetch an episode by id to attach its plot.

        A failed lookup keeps the listing's fields and uses a placeholder plot.
        """
        try:
            details = self.client.lookup_id(brief.imdb_id)
        except (NotFound, UpstreamUnavailable) as e:
            logger.warning(f"Plot lookup failed for episode {brief.imdb_id}: {e}")
            return EnrichedEpisode(
                title=brief.title,
                released=brief.released,
                episode=brief.episode,
                imdb_rating=brief.imdb_rating,
                imdb_id=brief.imdb_id,
                plot=PLOT_NOT_AVAILABLE,
            )
        return EnrichedEpisode(
            title=details.title,
            released=brief.released,
            episode=brief.episode,
            imdb_rating=details.imdb_rating,
            imdb_id=brief.imdb_id,
            plot=details.plot,
        )

    def season_details(self, series_title: str, season: str) -> tuple:
        """
        Look up a season and enrich every episode with its plot.

        Returns:
            Tuple of (series record, season record, enriched episodes)
        """
        series = self.series_details(series_title)
        try:
            season_record: SeasonRecord = self.client.lookup_season(series.imdb_id, season)
        except (NotFound, UpstreamUnavailable) as e:
            raise _prefixed("Season not found", e) from e

        episodes: List[EnrichedEpisode] = [
            self.enrich_episode(brief) for brief in season_record.episodes
        ]
        logger.info(f"Enriched {len(episodes)} episodes of {series.title!r} season {season_record.season}")
        return series, season_record, episodes
