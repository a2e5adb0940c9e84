# =============================================================================
# web_search_mcp/cli/search.py: Developer Smoke-Test CLI
# =============================================================================
#
# Runs one query through the same handler the MCP server uses, without a
# host attached:
#
#   python -m web_search_mcp.cli.search "weather in Berlin today"
#   python -m web_search_mcp.cli.search "latest AI news" --json
#   python -m web_search_mcp.cli.search "who won" --classify-only
#
# --classify-only prints the query-intent classification and the guidance
# text without contacting any provider, so it works without BRAVE_API_KEY.
# =============================================================================

"""Command-line smoke test for query classification and web search."""

from __future__ import annotations

import argparse
import asyncio
import json
import sys

from mcp.shared.exceptions import McpError

from web_search_mcp.services import query_intent
from web_search_mcp.utils.errors import ConfigurationError


def _format_classification(query: str) -> str:
    intent = query_intent.classify_query(query)
    lines = [
        f"Query:                 {query}",
        f"Requires real-time:    {intent.requires_real_time_data}",
        f"Information-seeking:   {intent.is_information_seeking}",
        f"Category:              {intent.category_label}",
        "",
        query_intent.generate_usage_guidance(query),
    ]
    return "\n".join(lines)


def _format_envelope(envelope: dict) -> str:
    metadata = envelope["metadata"]
    result = envelope["toolResult"]
    lines = [
        f"Query:     {result['query']}",
        f"Category:  {metadata['category']}"
        f"  (real-time: {metadata['requiresRealTimeData']})",
        "",
    ]
    for index, item in enumerate(result["results"], start=1):
        lines.append(f"{index}. {item['title']}")
        lines.append(f"   {item['url']}")
        if item["description"]:
            lines.append(f"   {item['description']}")
    if not result["results"]:
        lines.append("(no results)")
    lines.extend(["", metadata["usage"]])
    return "\n".join(lines)


async def _run(query: str, provider: str | None, json_output: bool) -> int:
    """Search *query* through the tool handler and print the envelope.

    Returns 0 on success, 1 on configuration or search failure.
    """
    # Deferred import: only a real search needs providers and an HTTP client.
    import httpx

    from web_search_mcp.config.loader import load_config
    from web_search_mcp.main import build_components

    try:
        app_config = load_config()
    except ConfigurationError as exc:
        print(f"Error: {exc.message}", file=sys.stderr)
        return 1

    arguments = {"search_term": query}
    if provider:
        arguments["provider"] = provider

    async with httpx.AsyncClient() as http_client:
        handler = build_components(app_config, http_client=http_client)["handler"]
        try:
            envelope = await handler.call_tool("web_search", arguments)
        except McpError as exc:
            print(f"Error: {exc.error.message}", file=sys.stderr)
            return 1

    if json_output:
        print(json.dumps(envelope, indent=2))
    else:
        print(_format_envelope(envelope))
    return 0


def _build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the search CLI.

    Arguments:
      query (positional): The search term
      --provider        : Registered provider name (default provider if omitted)
      --classify-only   : Only print the classification and guidance
      --json            : Output the full tool envelope as JSON
    """
    parser = argparse.ArgumentParser(
        prog="python -m web_search_mcp.cli.search",
        description=(
            "Classify a query and run it through the web_search tool handler "
            "from the command line."
        ),
    )
    parser.add_argument("query", type=str, help="The search term.")
    parser.add_argument(
        "--provider",
        type=str,
        default=None,
        help="Search provider name (defaults to the configured default).",
    )
    parser.add_argument(
        "--classify-only",
        action="store_true",
        help="Print the query classification without searching.",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        dest="json_output",
        help="Output the tool envelope as JSON instead of formatted text.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entry point; exits 0 on success and 1 on any error."""
    args = _build_parser().parse_args(argv)

    query = args.query.strip()
    if not query:
        print("Error: query must be a non-empty string", file=sys.stderr)
        sys.exit(1)

    if args.classify_only:
        print(_format_classification(query))
        sys.exit(0)

    sys.exit(asyncio.run(_run(query, args.provider, args.json_output)))


if __name__ == "__main__":
    main()
