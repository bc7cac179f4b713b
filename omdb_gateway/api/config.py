"""
API configuration loaded from environment or defaults.

A ``.env`` file in the working directory (falling back to the project
root) is loaded on import; variables already set in the process
environment win.
"""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

from omdb_gateway.core.omdb_client import OMDB_API_BASE_URL

logger = logging.getLogger(__name__)

DEFAULT_OMDB_TIMEOUT = 10.0


def load_env(override: bool = False) -> Path | None:
    """Load the first ``.env`` found in the working directory or project root."""
    candidates = [
        Path.cwd() / ".env",
        Path(__file__).resolve().parents[2] / ".env",
    ]
    for path in candidates:
        if path.is_file():
            load_dotenv(dotenv_path=path, override=override)
            return path
    return None


load_env()


def get_omdb_api_key() -> str:
    """Get OMDb API key from env (empty when unset)."""
    return os.getenv("OMDB_API_KEY", "").strip()


def get_omdb_base_url() -> str:
    """Get OMDb endpoint URL."""
    return os.getenv("OMDB_BASE_URL", "") or OMDB_API_BASE_URL


def get_omdb_timeout() -> float:
    """Get per-request timeout for OMDb calls in seconds (default on empty or invalid)."""
    raw = os.getenv("OMDB_TIMEOUT_SECONDS", "").strip()
    if not raw:
        return DEFAULT_OMDB_TIMEOUT
    try:
        timeout = float(raw)
    except ValueError:
        logger.warning(f"Invalid OMDB_TIMEOUT_SECONDS {raw!r}, using {DEFAULT_OMDB_TIMEOUT}")
        return DEFAULT_OMDB_TIMEOUT
    if timeout <= 0:
        logger.warning(f"Non-positive OMDB_TIMEOUT_SECONDS {raw!r}, using {DEFAULT_OMDB_TIMEOUT}")
        return DEFAULT_OMDB_TIMEOUT
    return timeout


def get_log_level() -> str:
    """Get log level from env or default."""
    return os.getenv("LOG_LEVEL", "INFO").upper()


def get_log_file() -> str | None:
    """Get optional log file name."""
    return os.getenv("LOG_FILE") or None


def get_api_host() -> str:
    """Get API host for binding."""
    return os.getenv("API_HOST", "0.0.0.0")


def get_api_port() -> int:
    """Get API port."""
    return int(os.getenv("API_PORT", "8080"))
