"""Abstract provider contracts for web-search-mcp."""

from web_search_mcp.interfaces.search_provider import (
    ISearchProvider,
    SearchProviderConfig,
    empty_response,
    require_config,
)

__all__ = [
    "ISearchProvider",
    "SearchProviderConfig",
    "empty_response",
    "require_config",
]
