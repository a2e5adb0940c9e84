"""Brave Search provider implementing ISearchProvider.

Calls the Brave Web Search REST API with the subscription token from the
shared SearchProviderConfig.  Results are truncated to ``max_results``;
every failure is raised as BackendError with the status, timeout or
transport detail in the message.
"""

from __future__ import annotations

import asyncio
from typing import Any

import httpx
import structlog

from web_search_mcp.interfaces.search_provider import (
    ISearchProvider,
    SearchProviderConfig,
    empty_response,
    require_config,
)
from web_search_mcp.models.search import SearchResponse, SearchResult
from web_search_mcp.utils.errors import BackendError

logger = structlog.get_logger(logger_name=__name__)

_BRAVE_API_URL = "https://api.search.brave.com/res/v1/web/search"
_PROVIDER_NAME = "Brave Search"


class BraveSearchProvider(ISearchProvider):
    """Web search via the Brave Search API.

    An ``httpx.AsyncClient`` may be injected so several providers share one
    connection pool; otherwise the provider creates and owns its own client.
    The timeout from the config is both the per-phase httpx limit and one
    overall deadline for the request, so a slowly trickling body cannot
    outlive it.
    """

    def __init__(self, http_client: httpx.AsyncClient | None = None) -> None:
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient()
        self._config: SearchProviderConfig | None = None

    # ------------------------------------------------------------------
    # ISearchProvider implementation
    # ------------------------------------------------------------------

    def initialize(self, config: SearchProviderConfig) -> None:
        self._config = config
        logger.info(
            "brave_provider_initialized",
            max_results=config.max_results,
            timeout_ms=config.timeout_ms,
        )

    def get_provider_name(self) -> str:
        return _PROVIDER_NAME

    def is_available(self) -> bool:
        return self._config is not None and bool(self._config.api_key)

    async def search(self, query: str) -> SearchResponse:
        """Run *query* against Brave and return at most ``max_results`` hits."""
        config = require_config(_PROVIDER_NAME, self._config)
        timeout_seconds = config.timeout_ms / 1000

        try:
            payload = await asyncio.wait_for(
                self._fetch(query, config.api_key, timeout_seconds),
                timeout=timeout_seconds,
            )
        except (httpx.TimeoutException, asyncio.TimeoutError) as exc:
            logger.warning("brave_search_timeout", query=query, timeout_ms=config.timeout_ms)
            raise BackendError(
                message=f"Search request timed out after {timeout_seconds:g} seconds",
                provider_name=_PROVIDER_NAME,
            ) from exc
        except httpx.HTTPStatusError as exc:
            raise BackendError(
                message=(
                    f"Brave Search API error: {exc.response.status_code} - "
                    f"{exc.response.text}"
                ),
                provider_name=_PROVIDER_NAME,
            ) from exc
        except (httpx.HTTPError, ValueError) as exc:
            raise BackendError(
                message=f"Web search failed: {exc}",
                provider_name=_PROVIDER_NAME,
            ) from exc

        result = self._to_response(payload, query, config.max_results)
        logger.debug(
            "brave_search_complete",
            query=result.query,
            result_count=len(result.results),
        )
        return result

    async def aclose(self) -> None:
        """Close the HTTP client if this provider created it."""
        if self._owns_client:
            await self._client.aclose()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    async def _fetch(self, query: str, api_key: str, timeout_seconds: float) -> dict[str, Any]:
        response = await self._client.get(
            _BRAVE_API_URL,
            params={"q": query},
            headers={
                "Accept": "application/json",
                "X-Subscription-Token": api_key,
            },
            timeout=httpx.Timeout(timeout_seconds),
        )
        response.raise_for_status()
        return response.json()

    @staticmethod
    def _to_response(payload: dict[str, Any], query: str, max_results: int) -> SearchResponse:
        """Map a raw Brave payload onto SearchResponse."""
        web = payload.get("web") or {}
        echoed_query = (payload.get("query") or {}).get("original") or query

        results = [
            SearchResult(
                title=item.get("title", ""),
                url=item.get("url", ""),
                description=item.get("description", ""),
            )
            for item in (web.get("results") or [])[:max_results]
        ]

        return empty_response(echoed_query).model_copy(
            update={
                "results": results,
                "total_results": web.get("totalResults"),
                "search_time_ms": web.get("timeTaken"),
            }
        )
