"""Utility modules for web-search-mcp.

- **errors** -- Domain-specific exception hierarchy rooted at
  WebSearchMCPError; provider failures are funnelled into SearchError by
  the dispatch service.
- **logging** -- structlog setup with a dual-renderer pattern, writing to
  stderr so stdout stays reserved for protocol frames.
"""

from web_search_mcp.utils.errors import (
    BackendError,
    ConfigurationError,
    ProviderStateError,
    SearchError,
    ValidationError,
    WebSearchMCPError,
)
from web_search_mcp.utils.logging import configure_logging, get_logger

__all__ = [
    "BackendError",
    "ConfigurationError",
    "ProviderStateError",
    "SearchError",
    "ValidationError",
    "WebSearchMCPError",
    "configure_logging",
    "get_logger",
]
