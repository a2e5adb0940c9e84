"""Web-search backend implementations.

Currently only Brave Search.  Another backend (Google, Bing, SearXNG) is
added by implementing ISearchProvider and registering it in main.py; the
dispatch service and tool handler pick it up by name.
"""

from web_search_mcp.providers.search.brave_provider import BraveSearchProvider

__all__ = ["BraveSearchProvider"]
