"""web-search-mcp entry point.

Wires together the provider registry, dispatch service, request handler
and MCP stdio server via dependency injection.  Configuration comes from
``config/config.yaml``, ``.env`` and the environment; a missing API key
stops the process before it serves a single request.

The ``build_*`` helpers are also used by the developer CLI
(``web_search_mcp.cli.search``) so both paths share one assembly.
"""

from __future__ import annotations

import asyncio
import sys
from typing import Any

import httpx
import structlog

from web_search_mcp.api.server import create_server, serve
from web_search_mcp.api.tools import ToolRequestHandler
from web_search_mcp.config.loader import AppConfig, load_config
from web_search_mcp.interfaces.search_provider import SearchProviderConfig
from web_search_mcp.providers.registry import ProviderRegistry
from web_search_mcp.providers.search.brave_provider import BraveSearchProvider
from web_search_mcp.services.search_service import SearchService
from web_search_mcp.utils.errors import ConfigurationError
from web_search_mcp.utils.logging import configure_logging, get_logger

_logger: structlog.BoundLogger = get_logger(__name__)


# ---------------------------------------------------------------------------
# Provider registration
# ---------------------------------------------------------------------------


def build_registry(
    search_config: SearchProviderConfig,
    http_client: httpx.AsyncClient | None = None,
) -> ProviderRegistry:
    """Create the provider registry with Brave Search as the default.

    Further backends are registered here with ``registry.add(provider)``;
    only one may pass ``make_default=True``.
    """
    registry = ProviderRegistry()

    brave = BraveSearchProvider(http_client=http_client)
    brave.initialize(search_config)
    registry.add(brave, make_default=True)

    return registry


# ---------------------------------------------------------------------------
# Full DI assembly
# ---------------------------------------------------------------------------


def build_components(
    app_config: AppConfig,
    http_client: httpx.AsyncClient | None = None,
) -> dict[str, Any]:
    """Construct every component the server needs.

    Returns a flat dict keyed by role name: ``registry``,
    ``search_service``, ``handler``.
    """
    registry = build_registry(app_config.search, http_client=http_client)
    search_service = SearchService(registry)
    handler = ToolRequestHandler(search_service)

    return {
        "registry": registry,
        "search_service": search_service,
        "handler": handler,
    }


async def _serve(app_config: AppConfig) -> None:
    async with httpx.AsyncClient() as http_client:
        components = build_components(app_config, http_client=http_client)
        server = create_server(components["handler"], app_config.server)

        _logger.info(
            "mcp_server_starting",
            server=app_config.server.name,
            version=app_config.server.version,
            providers=components["registry"].list_names(),
        )
        await serve(server)


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def run() -> None:
    """Load configuration and serve over stdio until the host disconnects."""
    try:
        app_config = load_config()
    except ConfigurationError as exc:
        _logger.error("configuration_invalid", error=exc.message)
        sys.exit(1)

    configure_logging(
        log_level=app_config.log_level,
        json_output=(app_config.app_env == "production"),
    )
    asyncio.run(_serve(app_config))


if __name__ == "__main__":
    run()
