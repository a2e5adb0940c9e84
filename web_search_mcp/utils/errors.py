"""Custom exception hierarchy for web-search-mcp.

All application exceptions inherit from :class:`WebSearchMCPError`, which
carries an optional ``provider_name`` so error handlers can identify which
search backend (e.g. "Brave Search") caused the failure.

The hierarchy follows the life of a single tool call:

    WebSearchMCPError  (base -- catch-all for any web-search-mcp error)
    +-- ConfigurationError  (startup / missing or invalid config, fatal)
    +-- ValidationError     (malformed tool input, reported as invalid-request)
    +-- ProviderStateError  (unknown provider, empty registry, not initialized)
    +-- BackendError        (HTTP status, timeout, transport failure)
    +-- SearchError         (outward error raised by the dispatch service)

Provider-layer failures (ProviderStateError, BackendError) never leave the
dispatch service directly: SearchService re-raises them as SearchError with
the original message preserved, so the request handler only has to map two
kinds onto protocol error codes.
"""


class WebSearchMCPError(Exception):
    """Base exception for all web-search-mcp errors.

    Every subclass carries a human-readable ``message`` and an optional
    ``provider_name`` identifying which search backend triggered the
    error.  The ``__str__`` method prefixes the provider name in brackets
    for structured log output, e.g. ``[Brave Search] API key not configured``.
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        provider_name: str | None = None,
    ) -> None:
        self._message = message
        self._provider_name = provider_name
        super().__init__(self._message)

    @property
    def message(self) -> str:
        return self._message

    @property
    def provider_name(self) -> str | None:
        return self._provider_name

    def __str__(self) -> str:
        if self._provider_name:
            return f"[{self._provider_name}] {self._message}"
        return self._message


# ---------------------------------------------------------------------------
# Startup errors
# ---------------------------------------------------------------------------

class ConfigurationError(WebSearchMCPError):
    """Raised when configuration is invalid or missing at startup."""

    def __init__(
        self,
        message: str = "Invalid or missing configuration",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)


# ---------------------------------------------------------------------------
# Per-request errors
# ---------------------------------------------------------------------------

class ValidationError(WebSearchMCPError):
    """Raised when tool-call arguments are malformed (e.g. blank search_term)."""

    def __init__(
        self,
        message: str = "Invalid tool input",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)


class ProviderStateError(WebSearchMCPError):
    """Raised for registry or provider lifecycle problems.

    Covers an unknown provider name, an empty registry with no default,
    and a provider whose ``search`` is called before ``initialize``.
    """

    def __init__(
        self,
        message: str = "Search provider is not in a usable state",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)


class BackendError(WebSearchMCPError):
    """Raised when the search backend call fails (status, timeout, transport)."""

    def __init__(
        self,
        message: str = "Search backend request failed",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)


class SearchError(WebSearchMCPError):
    """Single outward error kind raised by the search dispatch service."""

    def __init__(
        self,
        message: str = "Search failed",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)
