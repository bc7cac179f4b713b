"""
System API endpoints (health).
"""

from fastapi import APIRouter

from omdb_gateway.api.config import get_omdb_api_key
from omdb_gateway.core.pool import get_movie_pool

router = APIRouter(prefix="/api", tags=["system"])


@router.get("/health")
def health_check():
    """Health check: API key configured and candidate pool size."""
    return {
        "status": "healthy",
        "upstream_configured": bool(get_omdb_api_key()),
        "candidate_pool_size": len(get_movie_pool()),
    }
