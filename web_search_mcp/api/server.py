"""MCP server wiring for the ``web_search`` tool.

Registers the ToolRequestHandler's callbacks on a low-level
``mcp.server.lowlevel.Server`` and serves it over stdio.  The server is the
only place that knows about protocol framing: the handler speaks plain
dicts, this module turns them into ``mcp.types`` objects.

``tools/call`` is registered as a raw request handler rather than through
``Server.call_tool()``.  That decorator validates arguments against the
advertised input schema and folds every exception into an ``isError``
result; here the handler does its own validation, and an ``McpError`` must
reach the session so the host receives a JSON-RPC error carrying its code.
"""

from __future__ import annotations

import json

import mcp.server.stdio
import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.shared.exceptions import McpError

from web_search_mcp.api.tools import ToolRequestHandler
from web_search_mcp.config.loader import ServerConfig
from web_search_mcp.utils.logging import get_logger

logger = get_logger(__name__)


def create_server(handler: ToolRequestHandler, server_config: ServerConfig) -> Server:
    """Build an MCP server exposing *handler*'s tools."""
    server: Server = Server(server_config.name, version=server_config.version)

    @server.list_tools()
    async def _list_tools() -> list[types.Tool]:
        # Tool allows extra fields, so usage/priority/mandatoryFor pass through.
        return [types.Tool.model_validate(tool) for tool in handler.list_tools()]

    async def _call_tool(request: types.CallToolRequest) -> types.ServerResult:
        try:
            envelope = await handler.call_tool(
                request.params.name,
                request.params.arguments or {},
            )
        except McpError as exc:
            logger.warning(
                "tool_call_rejected",
                tool=request.params.name,
                code=exc.error.code,
                error=exc.error.message,
            )
            raise

        return types.ServerResult(
            types.CallToolResult(
                content=[types.TextContent(type="text", text=json.dumps(envelope))],
                isError=False,
            )
        )

    server.request_handlers[types.CallToolRequest] = _call_tool
    return server


async def serve(server: Server) -> None:
    """Run *server* over stdin/stdout until the host disconnects."""
    async with mcp.server.stdio.stdio_server() as (read_stream, write_stream):
        logger.info("mcp_server_ready", server=server.name)
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options(),
        )
