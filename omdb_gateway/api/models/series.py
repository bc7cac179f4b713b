"""
Pydantic schemas for Series, Season and Episode API.
"""

from pydantic import BaseModel, Field

from omdb_gateway.core.records import EnrichedEpisode


class SeriesResponse(BaseModel):
    """Response model for a series."""

    title: str = Field(..., alias="Title")
    director: str = Field(..., alias="Director")
    plot: str = Field(..., alias="Plot")
    total_seasons: str = Field(..., alias="Total Seasons")

    class Config:
        populate_by_name = True


class EpisodeResponse(BaseModel):
    """Response model for a single episode of a series."""

    series: str = Field(..., alias="Series")
    season: str = Field(..., alias="Season")
    episode: str = Field(..., alias="Episode")
    title: str = Field(..., alias="Title")
    year: str = Field(..., alias="Year")
    plot: str = Field(..., alias="Plot")
    director: str = Field(..., alias="Director")

    class Config:
        populate_by_name = True


class SeasonEpisode(BaseModel):
    """Episode of a season listing, enriched with its plot."""

    title: str = Field(..., alias="Title")
    released: str = Field(..., alias="Released")
    episode: str = Field(..., alias="Episode")
    imdb_rating: str = Field(..., alias="imdbRating")
    imdb_id: str = Field(..., alias="imdbID")
    plot: str = Field(..., alias="Plot")

    class Config:
        populate_by_name = True

    @classmethod
    def from_episode(cls, episode: EnrichedEpisode) -> "SeasonEpisode":
        return cls(
            title=episode.title,
            released=episode.released,
            episode=episode.episode,
            imdb_rating=episode.imdb_rating,
            imdb_id=episode.imdb_id,
            plot=episode.plot,
        )


class SeasonResponse(BaseModel):
    """Response model for a season with all of its episodes."""

    series: str = Field(..., alias="Series")
    season: str = Field(..., alias="Season")
    episodes: list[SeasonEpisode] = Field(default_factory=list, alias="Episodes")

    class Config:
        populate_by_name = True
