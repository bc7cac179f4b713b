"""
Shared utilities package.

This package contains the logging configuration used by the API
entry point and the tests.
"""

from omdb_gateway.utils.logging_config import setup_logging, configure_api_logging

__all__ = ['setup_logging', 'configure_api_logging']
