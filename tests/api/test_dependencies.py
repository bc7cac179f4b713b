"""
Tests for the dependency providers.
"""

import time
from concurrent.futures import ThreadPoolExecutor

from omdb_gateway.api import dependencies
from omdb_gateway.core.omdb_client import OmdbClient


class TestSharedClient:
    """The OMDb client is created once and shared."""

    def test_concurrent_callers_share_one_client(self, monkeypatch):
        """Parallel first calls build a single client."""
        monkeypatch.setenv("OMDB_API_KEY", "secret")
        monkeypatch.setattr(dependencies, "_omdb_client", None)
        built = []

        def slow_client(**kwargs):
            time.sleep(0.05)
            client = OmdbClient(**kwargs)
            built.append(client)
            return client

        monkeypatch.setattr(dependencies, "OmdbClient", slow_client)

        with ThreadPoolExecutor(max_workers=8) as pool:
            clients = list(pool.map(lambda _: dependencies.get_omdb_client(), range(8)))

        assert len(built) == 1
        assert all(c is built[0] for c in clients)

    def test_client_uses_configured_timeout(self, monkeypatch):
        monkeypatch.setenv("OMDB_API_KEY", "secret")
        monkeypatch.setenv("OMDB_TIMEOUT_SECONDS", "3.5")
        monkeypatch.setattr(dependencies, "_omdb_client", None)

        client = dependencies.get_omdb_client()

        assert client.api_key == "secret"
        assert client.timeout_seconds == 3.5
