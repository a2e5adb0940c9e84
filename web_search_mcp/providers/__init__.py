"""Search provider registry and backend implementations."""

from web_search_mcp.providers.registry import ProviderRegistry

__all__ = ["ProviderRegistry"]
