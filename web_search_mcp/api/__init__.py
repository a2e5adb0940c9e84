"""Protocol-facing layer: tool-call schemas, request handler, MCP server."""
