"""
FastAPI dependency injection for the OMDb client and services.
"""

import logging
import threading

from fastapi import Depends

from omdb_gateway.api.config import get_omdb_api_key, get_omdb_base_url, get_omdb_timeout
from omdb_gateway.core.errors import UpstreamUnavailable
from omdb_gateway.core.omdb_client import OmdbClient
from omdb_gateway.core.recommender import RecommendationEngine
from omdb_gateway.core.series import SeriesService

logger = logging.getLogger(__name__)

# Singleton client, shared across requests; creation is guarded by the lock
_omdb_client: OmdbClient | None = None
_omdb_client_lock = threading.Lock()


def get_omdb_client() -> OmdbClient:
    """Get or create the shared OmdbClient."""
    global _omdb_client
    with _omdb_client_lock:
        if _omdb_client is None:
            api_key = get_omdb_api_key()
            if not api_key:
                logger.error("OMDB_API_KEY not set in environment")
                raise UpstreamUnavailable("OMDB_API_KEY not set in environment")
            _omdb_client = OmdbClient(
                api_key=api_key,
                base_url=get_omdb_base_url(),
                timeout_seconds=get_omdb_timeout(),
            )
            logger.info(f"OMDb client created for {_omdb_client.base_url}")
    return _omdb_client


def get_recommendation_engine(client: OmdbClient = Depends(get_omdb_client)) -> RecommendationEngine:
    """Build a RecommendationEngine over the shared client."""
    return RecommendationEngine(client)


def get_series_service(client: OmdbClient = Depends(get_omdb_client)) -> SeriesService:
    """Build a SeriesService over the shared client."""
    return SeriesService(client)
