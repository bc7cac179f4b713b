"""
OMDb Gateway Application Package.

This package contains the HTTP API, the upstream OMDb client, the
recommendation engine, series enrichment and shared utilities.
"""

__version__ = "1.0.0"
