"""Allow ``python -m web_search_mcp.cli`` execution."""

from web_search_mcp.cli.search import main

main()
