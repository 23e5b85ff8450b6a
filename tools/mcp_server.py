# =============================================================================
# tools/mcp_server.py  —  FastMCP Tool Server
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Exposes the ToolAdapter over MCP.  Each tool here is a thin wrapper
#   that forwards its arguments to ToolAdapter.invoke() and hands the
#   envelope back to FastMCP.
#
# HOW IT WORKS (the flow):
#   1. The client (an LLM agent) lists tools and sees the catalog
#   2. It calls a tool by name, e.g. "semantic_search"
#   3. FastMCP routes the call to the registered function below
#   4. The function calls the adapter, which validates, searches, and shapes
#   5. Success → the JSON text is returned as the tool result
#      Error   → ToolError is raised with the {"error": ...} JSON as its
#                message, which FastMCP reports with isError=true
#
# NO MODULE-LEVEL SERVER:
#   create_server() builds a fresh FastMCP instance around the adapter it is
#   given.  main.py owns that instance for the lifetime of the process.
#
# RUNNING THIS SERVER:
#     a) python main.py               (stdio transport)
#     b) vectorize-mcp                (console script, same thing)
# =============================================================================

from typing import Any

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from fastmcp.tools import Tool

from core.config import SERVER_NAME
from core.models import ToolResponse
from tools.adapter import ToolAdapter
from tools.catalog import INTELLIGENT_ANSWER, SEMANTIC_SEARCH, get_tool


def _unwrap(response: ToolResponse) -> str:
    """Return the envelope text, or raise it as a ToolError."""
    if response.is_error:
        raise ToolError(response.text)
    return response.text


def _register(mcp: FastMCP, name: str, fn) -> None:
    """Add fn as a tool advertising the catalog's description and schema."""
    descriptor = get_tool(name)
    tool = Tool.from_function(fn, name=descriptor.name, description=descriptor.description)
    # Listing shows the catalog schema; arguments are checked by the adapter.
    mcp.add_tool(tool.model_copy(update={"parameters": descriptor.to_dict()["inputSchema"]}))


def create_server(adapter: ToolAdapter) -> FastMCP:
    """Build the FastMCP server and register every catalog tool on it."""
    mcp = FastMCP(SERVER_NAME)

    # =========================================================================
    # TOOL 1: semantic_search
    # =========================================================================
    # Raw ranked hits.  The agent decides what to do with them.
    # Parameters are typed Any so missing or malformed values reach the
    # adapter and come back as {"error": ...} envelopes.
    # =========================================================================
    async def semantic_search(query: Any = None, topK: Any = None) -> str:  # noqa: N803
        response = await adapter.invoke(SEMANTIC_SEARCH, {"query": query, "topK": topK})
        return _unwrap(response)

    # =========================================================================
    # TOOL 2: intelligent_answer
    # =========================================================================
    # Returns results plus a synthesisPrompt.  The answer itself is written
    # by the agent that called us.
    # =========================================================================
    async def intelligent_answer(question: Any = None, topK: Any = None) -> str:  # noqa: N803
        response = await adapter.invoke(INTELLIGENT_ANSWER, {"question": question, "topK": topK})
        return _unwrap(response)

    _register(mcp, SEMANTIC_SEARCH, semantic_search)
    _register(mcp, INTELLIGENT_ANSWER, intelligent_answer)
    return mcp
