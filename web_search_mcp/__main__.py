"""Allow ``python -m web_search_mcp`` to start the stdio server."""

from web_search_mcp.main import run

run()
