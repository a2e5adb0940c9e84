"""web-search-mcp domain models. Re-exports all public model classes.

    - intent.py : QueryCategory enum and the QueryIntent classification
    - search.py : SearchResult / SearchResponse returned by providers
"""

from __future__ import annotations

from web_search_mcp.models.intent import QueryCategory, QueryIntent
from web_search_mcp.models.search import SearchResponse, SearchResult

__all__ = [
    "QueryCategory",
    "QueryIntent",
    "SearchResponse",
    "SearchResult",
]
