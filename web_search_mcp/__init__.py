"""web-search-mcp: a single ``web_search`` MCP tool with query-intent guidance."""

__version__ = "1.0.0"
