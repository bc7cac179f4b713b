"""
Series, season and episode API endpoints.
"""

from fastapi import APIRouter, Depends, Query

from omdb_gateway.api.dependencies import get_series_service
from omdb_gateway.api.models.series import (
    EpisodeResponse,
    SeasonEpisode,
    SeasonResponse,
    SeriesResponse,
)
from omdb_gateway.core.errors import MissingParameter
from omdb_gateway.core.series import SeriesService

router = APIRouter(prefix="/api", tags=["series"])

MISSING_PARAMETERS = "Missing required query parameters"


@router.get("/series", response_model=SeriesResponse)
def get_series(
    title: str | None = Query(None),
    service: SeriesService = Depends(get_series_service),
):
    """Get series details by title."""
    if not title:
        raise MissingParameter("Missing title query parameter")
    series = service.series_details(title)
    return SeriesResponse(
        title=series.title,
        director=series.director,
        plot=series.plot,
        total_seasons=series.total_seasons,
    )


@router.get("/season", response_model=SeasonResponse)
def get_season(
    series_title: str | None = Query(None),
    season: str | None = Query(None),
    service: SeriesService = Depends(get_series_service),
):
    """Get a season's episodes, each with its plot."""
    if not series_title or not season:
        raise MissingParameter(MISSING_PARAMETERS)
    series, season_record, episodes = service.season_details(series_title, season)
    return SeasonResponse(
        series=series.title,
        season=season_record.season,
        episodes=[SeasonEpisode.from_episode(ep) for ep in episodes],
    )


@router.get("/episode", response_model=EpisodeResponse)
def get_episode(
    series_title: str | None = Query(None),
    season: str | None = Query(None),
    episode_number: str | None = Query(None),
    service: SeriesService = Depends(get_series_service),
):
    """Get a single episode of a series."""
    if not series_title or not season or not episode_number:
        raise MissingParameter(MISSING_PARAMETERS)
    series, episode = service.episode_details(series_title, season, episode_number)
    return EpisodeResponse(
        series=series.title,
        season=season,
        episode=episode_number,
        title=episode.title,
        year=episode.year,
        plot=episode.plot,
        director=episode.director,
    )
