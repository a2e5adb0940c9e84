"""Named registry of search providers with a default pointer.

Built once at startup (see ``web_search_mcp.main``) and handed to the
dispatch service; nothing mutates it while requests are being served, so
concurrent lookups need no locking.  Tests construct a fresh registry each
time instead of sharing process-wide state.
"""

from __future__ import annotations

import structlog

from web_search_mcp.interfaces.search_provider import ISearchProvider
from web_search_mcp.utils.errors import ProviderStateError

logger = structlog.get_logger(logger_name=__name__)


class ProviderRegistry:
    """Case-insensitive mapping of provider name to provider instance."""

    def __init__(self) -> None:
        # dicts preserve insertion order, so list_names() is registration order.
        self._providers: dict[str, ISearchProvider] = {}
        self._default_name: str | None = None

    def add(self, provider: ISearchProvider, make_default: bool = False) -> None:
        """Register *provider* under its lowercased name.

        The provider becomes the default when *make_default* is set or when
        no default exists yet.  Re-adding a name replaces the old instance.
        """
        name = provider.get_provider_name().lower()
        self._providers[name] = provider

        if make_default or not self._default_name:
            self._default_name = name

        logger.info(
            "provider_registered",
            provider=name,
            is_default=self._default_name == name,
        )

    def get(self, name: str) -> ISearchProvider:
        """Return the provider registered under *name* (any casing)."""
        provider = self._providers.get(name.lower())
        if provider is None:
            raise ProviderStateError(message=f"Provider not found: {name}")
        return provider

    def get_default(self) -> ISearchProvider:
        """Return the default provider."""
        if not self._default_name or not self._providers:
            raise ProviderStateError(message="No providers available")
        return self.get(self._default_name)

    def set_default(self, name: str) -> None:
        """Make the provider registered under *name* the default."""
        self.get(name)
        self._default_name = name.lower()

    def list_names(self) -> list[str]:
        """Return the registered (lowercased) names in registration order."""
        return list(self._providers)

    def __len__(self) -> int:
        return len(self._providers)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.lower() in self._providers
