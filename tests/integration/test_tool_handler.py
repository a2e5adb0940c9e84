"""Integration tests for the web_search tool handler.

Exercises listing and calling the tool end to end: argument validation,
classification metadata, dispatch through the registry and error mapping
onto protocol error codes.  Providers are in-memory fakes.
"""

from __future__ import annotations

import pytest
from mcp.shared.exceptions import McpError
from mcp.types import INTERNAL_ERROR, INVALID_REQUEST

from web_search_mcp.api.tools import ToolRequestHandler
from web_search_mcp.providers.registry import ProviderRegistry
from web_search_mcp.services.query_intent import generate_usage_guidance
from web_search_mcp.services.search_service import SearchService
from web_search_mcp.utils.errors import BackendError


@pytest.fixture
def handler(search_service: SearchService) -> ToolRequestHandler:
    return ToolRequestHandler(search_service)


# ======================================================================
# Tool listing
# ======================================================================


class TestListTools:
    def test_exactly_one_web_search_tool(self, handler: ToolRequestHandler) -> None:
        tools = handler.list_tools()
        assert [tool["name"] for tool in tools] == ["web_search"]

    def test_definition(self, handler: ToolRequestHandler) -> None:
        tool = handler.list_tools()[0]

        assert "REAL-TIME" in tool["description"]
        assert tool["usage"] == generate_usage_guidance()
        assert tool["priority"] == "high"
        assert tool["recommended"] is True
        assert tool["overrideUserPreferences"] is True
        assert tool["mandatoryFor"][0] == "weather"

        schema = tool["inputSchema"]
        assert schema["required"] == ["search_term"]
        assert schema["properties"]["search_term"]["type"] == "string"
        assert schema["properties"]["provider"]["enum"] == ["fake search"]


# ======================================================================
# Tool calls
# ======================================================================


class TestCallTool:
    @pytest.mark.asyncio
    async def test_envelope_for_real_time_query(self, handler: ToolRequestHandler, fake_provider) -> None:
        envelope = await handler.call_tool("web_search", {"search_term": "  weather in Oslo today  "})

        assert fake_provider.queries == ["weather in Oslo today"]
        result = envelope["toolResult"]
        assert result["query"] == "weather in Oslo today"
        assert len(result["results"]) == 3
        assert result["totalResults"] == 3
        assert "searchTimeMillis" not in result

        metadata = envelope["metadata"]
        assert metadata["requiresRealTimeData"] is True
        assert metadata["isInformationSeeking"] is True
        assert metadata["category"] == "weather"
        assert metadata["prioritizeOverBrevity"] is True
        assert metadata["usage"].startswith("CRITICAL: This is real-time weather information")

    @pytest.mark.asyncio
    async def test_envelope_for_plain_query(self, handler: ToolRequestHandler) -> None:
        envelope = await handler.call_tool("web_search", {"search_term": "banana bread"})

        metadata = envelope["metadata"]
        assert metadata["requiresRealTimeData"] is False
        assert metadata["isInformationSeeking"] is False
        assert metadata["category"] == "general"
        assert metadata["usage"].startswith("This information is from real-time web search")

    @pytest.mark.asyncio
    async def test_results_capped_at_max_results(self, make_provider) -> None:
        registry = ProviderRegistry()
        registry.add(make_provider("Big", hits=50))
        handler = ToolRequestHandler(SearchService(registry))

        envelope = await handler.call_tool("web_search", {"search_term": "python"})
        assert len(envelope["toolResult"]["results"]) == 5

    @pytest.mark.asyncio
    async def test_named_provider(self, make_provider) -> None:
        registry = ProviderRegistry()
        default = make_provider("Brave Search")
        other = make_provider("Other Search")
        registry.add(default, make_default=True)
        registry.add(other)
        handler = ToolRequestHandler(SearchService(registry))

        await handler.call_tool("web_search", {"search_term": "rust", "provider": "Other Search"})
        await handler.call_tool("web_search", {"search_term": "go", "provider": ""})

        assert other.queries == ["rust"]
        assert default.queries == ["go"]

    @pytest.mark.parametrize(
        "arguments",
        [
            {"search_term": "   "},
            {"search_term": ""},
            {"search_term": 42},
            {},
            None,
        ],
    )
    @pytest.mark.asyncio
    async def test_invalid_search_term_rejected_before_search(
        self, handler: ToolRequestHandler, fake_provider, arguments
    ) -> None:
        with pytest.raises(McpError) as exc_info:
            await handler.call_tool("web_search", arguments)

        assert exc_info.value.error.code == INVALID_REQUEST
        assert "search_term" in exc_info.value.error.message
        assert fake_provider.queries == []

    @pytest.mark.asyncio
    async def test_unknown_tool(self, handler: ToolRequestHandler) -> None:
        with pytest.raises(McpError) as exc_info:
            await handler.call_tool("image_search", {"search_term": "cats"})

        assert exc_info.value.error.code == INVALID_REQUEST
        assert "Unknown tool: 'image_search'" in exc_info.value.error.message

    @pytest.mark.asyncio
    async def test_unknown_provider_is_internal_error(self, handler: ToolRequestHandler) -> None:
        with pytest.raises(McpError) as exc_info:
            await handler.call_tool("web_search", {"search_term": "cats", "provider": "unknown"})

        assert exc_info.value.error.code == INTERNAL_ERROR
        assert "not found" in exc_info.value.error.message

    @pytest.mark.asyncio
    async def test_empty_registry_is_internal_error(self) -> None:
        handler = ToolRequestHandler(SearchService(ProviderRegistry()))

        with pytest.raises(McpError) as exc_info:
            await handler.call_tool("web_search", {"search_term": "cats"})

        assert exc_info.value.error.code == INTERNAL_ERROR
        assert "no providers" in exc_info.value.error.message.lower()

    @pytest.mark.asyncio
    async def test_backend_failure_is_internal_error(self, make_provider) -> None:
        registry = ProviderRegistry()
        registry.add(make_provider("Flaky", error=BackendError("Brave Search API error: 500 - oops")))
        handler = ToolRequestHandler(SearchService(registry))

        with pytest.raises(McpError) as exc_info:
            await handler.call_tool("web_search", {"search_term": "cats"})

        assert exc_info.value.error.code == INTERNAL_ERROR
        assert exc_info.value.error.message == "Search failed: Brave Search API error: 500 - oops"
