"""Shared pytest fixtures for the web-search-mcp test suite."""

from __future__ import annotations

import pytest

from web_search_mcp.interfaces.search_provider import (
    ISearchProvider,
    SearchProviderConfig,
    empty_response,
    require_config,
)
from web_search_mcp.models.search import SearchResponse, SearchResult
from web_search_mcp.providers.registry import ProviderRegistry
from web_search_mcp.services.search_service import SearchService


class FakeSearchProvider(ISearchProvider):
    """In-memory provider that records queries and returns canned hits."""

    def __init__(
        self,
        name: str = "Fake Search",
        hits: int = 3,
        error: Exception | None = None,
    ) -> None:
        self._name = name
        self._hits = hits
        self._error = error
        self._config: SearchProviderConfig | None = None
        self.queries: list[str] = []

    def initialize(self, config: SearchProviderConfig) -> None:
        self._config = config

    def get_provider_name(self) -> str:
        return self._name

    def is_available(self) -> bool:
        return self._config is not None and bool(self._config.api_key)

    async def search(self, query: str) -> SearchResponse:
        config = require_config(self._name, self._config)
        self.queries.append(query)
        if self._error is not None:
            raise self._error

        results = [
            SearchResult(
                title=f"{query} result {index}",
                url=f"https://example.com/{index}",
                description=f"Description {index}",
            )
            for index in range(self._hits)
        ][: config.max_results]
        return empty_response(query).model_copy(
            update={"results": results, "total_results": self._hits}
        )


@pytest.fixture
def search_config() -> SearchProviderConfig:
    """A valid provider config with small limits."""
    return SearchProviderConfig(api_key="test-key", max_results=5, timeout_ms=2_000)


@pytest.fixture
def fake_provider(search_config: SearchProviderConfig) -> FakeSearchProvider:
    """An initialized FakeSearchProvider."""
    provider = FakeSearchProvider()
    provider.initialize(search_config)
    return provider


@pytest.fixture
def registry(fake_provider: FakeSearchProvider) -> ProviderRegistry:
    """A fresh registry holding only the fake provider (as default)."""
    reg = ProviderRegistry()
    reg.add(fake_provider)
    return reg


@pytest.fixture
def search_service(registry: ProviderRegistry) -> SearchService:
    return SearchService(registry)


@pytest.fixture
def make_provider(search_config: SearchProviderConfig):
    """Factory for extra initialized fake providers: ``make_provider(name, ...)``."""

    def _make(name: str = "Fake Search", hits: int = 3, error: Exception | None = None) -> FakeSearchProvider:
        provider = FakeSearchProvider(name=name, hits=hits, error=error)
        provider.initialize(search_config)
        return provider

    return _make


@pytest.fixture
def uninitialized_provider() -> FakeSearchProvider:
    """A fake provider that has never been given a config."""
    return FakeSearchProvider()
