"""Search dispatch façade over the provider registry.

Architecture role: **Facade / Dispatcher**
-------------------------------------------
Translates "search with the default provider" and "search with provider X"
into registry lookups and provider calls.  Every failure from the provider
layer (unknown name, empty registry, uninitialized provider, backend error)
leaves this module as a single :class:`SearchError` whose message keeps the
original detail, so the request handler maps exactly one kind onto the
protocol's internal-error code.  There are no retries: a failure is
reported once, to the caller of that request.
"""

from __future__ import annotations

from web_search_mcp.models.search import SearchResponse
from web_search_mcp.providers.registry import ProviderRegistry
from web_search_mcp.utils.errors import SearchError, WebSearchMCPError
from web_search_mcp.utils.logging import get_logger

logger = get_logger(__name__)


class SearchService:
    """Dispatches queries to registered search providers."""

    def __init__(self, registry: ProviderRegistry) -> None:
        self._registry = registry

    async def search(self, query: str) -> SearchResponse:
        """Search *query* with the registry's default provider."""
        try:
            provider = self._registry.get_default()
            response = await provider.search(query)
        except Exception as exc:  # noqa: BLE001: normalized into SearchError
            raise self._wrap(exc, query, provider_name=None) from exc

        logger.info(
            "search_completed",
            provider=provider.get_provider_name(),
            result_count=len(response.results),
        )
        return response

    async def search_with(self, query: str, provider_name: str) -> SearchResponse:
        """Search *query* with the provider registered as *provider_name*."""
        try:
            provider = self._registry.get(provider_name)
            response = await provider.search(query)
        except Exception as exc:  # noqa: BLE001: normalized into SearchError
            raise self._wrap(exc, query, provider_name=provider_name) from exc

        logger.info(
            "search_completed",
            provider=provider.get_provider_name(),
            result_count=len(response.results),
        )
        return response

    def list_providers(self) -> list[str]:
        """Names of all registered providers."""
        return self._registry.list_names()

    @staticmethod
    def _wrap(exc: Exception, query: str, provider_name: str | None) -> SearchError:
        message = exc.message if isinstance(exc, WebSearchMCPError) else str(exc)
        source = getattr(exc, "provider_name", None) or provider_name
        logger.warning("search_failed", query=query, provider=source, error=message)
        return SearchError(message=f"Search failed: {message}", provider_name=source)
