# =============================================================================
# tools/__init__.py
# =============================================================================
# This package is the MCP-facing layer:
#
#   catalog.py     →  the fixed list of tool descriptors
#   adapter.py     →  ToolAdapter: list_tools() / invoke(name, args)
#   mcp_server.py  →  FastMCP server wiring the adapter to stdio
#   console.py     →  stderr logging helpers
#
# WHAT TOOLS DO NOT DO:
#   - They do NOT talk HTTP or parse worker JSON (that's in core/)
#   - They do NOT write answers (the calling agent does that)
# =============================================================================
