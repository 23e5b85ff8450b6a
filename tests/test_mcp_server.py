"""End-to-end tests through FastMCP's in-memory client."""

import json

import pytest
from fastmcp import Client

from tools.catalog import get_tool
from tools.mcp_server import create_server


class TestMCPServer:
    @pytest.mark.asyncio
    async def test_lists_catalog_tools(self, adapter):
        async with Client(create_server(adapter)) as client:
            tools = await client.list_tools()

        by_name = {tool.name: tool for tool in tools}
        assert set(by_name) == {"semantic_search", "intelligent_answer"}
        assert by_name["semantic_search"].inputSchema["required"] == ["query"]
        assert by_name["intelligent_answer"].inputSchema["required"] == ["question"]
        for name, tool in by_name.items():
            assert tool.inputSchema == get_tool(name).input_schema
            assert tool.description == get_tool(name).description

    @pytest.mark.asyncio
    async def test_semantic_search_call(self, adapter, worker):
        async with Client(create_server(adapter)) as client:
            result = await client.call_tool_mcp("semantic_search", {"query": "edge vectors", "topK": 15})

        assert not result.isError
        payload = json.loads(result.content[0].text)
        assert payload["resultsCount"] == 3
        assert worker.last_body == {"query": "edge vectors", "topK": 10}

    @pytest.mark.asyncio
    async def test_error_envelope_is_tool_error(self, adapter, worker):
        async with Client(create_server(adapter)) as client:
            result = await client.call_tool_mcp("semantic_search", {"query": ""})

        assert result.isError
        assert "Query parameter is required" in result.content[0].text
        assert worker.requests == []

    @pytest.mark.asyncio
    async def test_upstream_error_is_tool_error(self, adapter, worker):
        worker.status_code = 500
        worker.text = "boom"

        async with Client(create_server(adapter)) as client:
            result = await client.call_tool_mcp("intelligent_answer", {"question": "What?"})

        assert result.isError
        assert "Search failed: Internal Server Error" in result.content[0].text

    @pytest.mark.asyncio
    async def test_unknown_tool(self, adapter):
        async with Client(create_server(adapter)) as client:
            result = await client.call_tool_mcp("summarize", {})

        assert result.isError
        assert "Unknown tool" in result.content[0].text
        assert "summarize" in result.content[0].text

    @pytest.mark.asyncio
    async def test_missing_query_is_error_envelope(self, adapter, worker):
        async with Client(create_server(adapter)) as client:
            result = await client.call_tool_mcp("semantic_search", {})

        assert result.isError
        assert json.loads(result.content[0].text) == {"error": "Query parameter is required"}
        assert worker.requests == []

    @pytest.mark.asyncio
    async def test_null_top_k_uses_default(self, adapter, worker):
        async with Client(create_server(adapter)) as client:
            result = await client.call_tool_mcp("semantic_search", {"query": "x", "topK": None})

        assert not result.isError
        assert worker.last_body == {"query": "x", "topK": 5}

    @pytest.mark.asyncio
    async def test_fractional_top_k_is_error_envelope(self, adapter, worker):
        async with Client(create_server(adapter)) as client:
            result = await client.call_tool_mcp("intelligent_answer", {"question": "x", "topK": 2.5})

        assert result.isError
        assert json.loads(result.content[0].text) == {"error": "topK must be an integer"}
        assert worker.requests == []
