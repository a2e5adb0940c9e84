"""Abstract base class for web-search backends.

Defines the contract every search backend (Brave Search today; Google,
Bing or SearXNG later) implements so the dispatch service and the tool
handler stay provider-agnostic.  Shared validation and response helpers are
plain module functions rather than base-class state: a provider keeps its
own config and calls :func:`require_config` before touching the network.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from pydantic import BaseModel, ConfigDict, Field

from web_search_mcp.models.search import SearchResponse
from web_search_mcp.utils.errors import ProviderStateError


class SearchProviderConfig(BaseModel):
    """Startup configuration shared read-only by all providers.

    Attributes
    ----------
    api_key:
        Backend credential.  Required non-empty before a search is made.
    max_results:
        Upper bound on ``SearchResponse.results``.
    timeout_ms:
        Per-request timeout for the outbound HTTP call, in milliseconds.
    """

    model_config = ConfigDict(frozen=True)

    api_key: str = Field(repr=False)
    max_results: int = Field(default=10, gt=0)
    timeout_ms: int = Field(default=10_000, gt=0)


# Concrete implementation: BraveSearchProvider (web_search_mcp/providers/search/)
class ISearchProvider(ABC):
    """Contract for a named, pluggable web-search backend.

    Lifecycle: construct, :meth:`initialize` once with the shared config,
    then call :meth:`search` any number of times.  Calling :meth:`search`
    before :meth:`initialize` is an error.
    """

    @abstractmethod
    def initialize(self, config: SearchProviderConfig) -> None:
        """Store *config* for later searches.

        Re-initializing replaces the previous config.
        """

    @abstractmethod
    def get_provider_name(self) -> str:
        """Return the human-readable provider name, e.g. ``"Brave Search"``.

        The registry keys providers by the lowercased form of this name.
        """

    @abstractmethod
    async def search(self, query: str) -> SearchResponse:
        """Execute a web search and return at most ``max_results`` hits.

        Parameters
        ----------
        query:
            The (already trimmed) search query.

        Returns
        -------
        SearchResponse
            Results in backend relevance order.

        Raises
        ------
        web_search_mcp.utils.errors.ProviderStateError
            If the provider is not initialized or has no API key.
        web_search_mcp.utils.errors.BackendError
            If the backend call fails or times out.
        """

    @abstractmethod
    def is_available(self) -> bool:
        """Return ``True`` if the provider is initialized with an API key."""


def require_config(
    provider_name: str, config: SearchProviderConfig | None
) -> SearchProviderConfig:
    """Return *config* if it is usable for a search, otherwise raise.

    Raises
    ------
    ProviderStateError
        ``"<name> provider not initialized"`` when *config* is ``None``;
        ``"<name> API key not configured"`` when the API key is empty.
    """
    if config is None:
        raise ProviderStateError(
            message=f"{provider_name} provider not initialized",
            provider_name=provider_name,
        )
    if not config.api_key:
        raise ProviderStateError(
            message=f"{provider_name} API key not configured",
            provider_name=provider_name,
        )
    return config


def empty_response(query: str) -> SearchResponse:
    """Build a response for *query* with no results yet."""
    return SearchResponse(query=query, results=[])
