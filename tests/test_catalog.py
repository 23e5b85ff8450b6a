"""Tests for the static tool catalog."""

import pytest

from tools.adapter import ToolAdapter
from tools.catalog import INTELLIGENT_ANSWER, SEMANTIC_SEARCH, get_tool, list_tools


def test_catalog_names():
    assert [d.name for d in list_tools()] == [SEMANTIC_SEARCH, INTELLIGENT_ANSWER]


def test_required_markers():
    assert get_tool(SEMANTIC_SEARCH).input_schema["required"] == ["query"]
    assert get_tool(INTELLIGENT_ANSWER).input_schema["required"] == ["question"]


def test_top_k_defaults_in_schema():
    semantic = get_tool(SEMANTIC_SEARCH).input_schema["properties"]["topK"]
    answer = get_tool(INTELLIGENT_ANSWER).input_schema["properties"]["topK"]

    assert semantic["default"] == 5
    assert "(1-10)" in semantic["description"]
    assert answer["default"] == 3
    assert "(1-5)" in answer["description"]


def test_listing_twice_is_identical():
    adapter = ToolAdapter()

    first = [d.to_dict() for d in adapter.list_tools()]
    second = [d.to_dict() for d in adapter.list_tools()]

    assert first == second
    assert adapter.list_tools() == adapter.list_tools()


def test_to_dict_does_not_share_schema():
    wire = get_tool(SEMANTIC_SEARCH).to_dict()
    wire["inputSchema"]["required"].append("topK")

    assert get_tool(SEMANTIC_SEARCH).input_schema["required"] == ["query"]
    assert set(wire) == {"name", "description", "inputSchema"}


def test_unknown_tool_lookup():
    with pytest.raises(KeyError):
        get_tool("nope")
