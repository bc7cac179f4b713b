"""
API route handlers.
"""

from omdb_gateway.api.routers import movies, series, recommendations, system

__all__ = ["movies", "series", "recommendations", "system"]
