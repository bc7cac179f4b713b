"""
Core gateway logic.

This package contains:
- Upstream OMDb client and record parsing
- Candidate pool
- Recommendation classification and ranking
- Series and season enrichment
"""

from omdb_gateway.core.errors import (
    GatewayError,
    MissingParameter,
    NotFound,
    UpstreamUnavailable,
    NoMatches,
)
from omdb_gateway.core.omdb_client import OmdbClient, OmdbQuery
from omdb_gateway.core.recommender import RecommendationEngine
from omdb_gateway.core.series import SeriesService

__all__ = [
    'GatewayError',
    'MissingParameter',
    'NotFound',
    'UpstreamUnavailable',
    'NoMatches',
    'OmdbClient',
    'OmdbQuery',
    'RecommendationEngine',
    'SeriesService',
]
