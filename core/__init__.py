# =============================================================================
# core/__init__.py
# =============================================================================
# This package contains everything a tool call actually does: argument
# rules, the HTTP client for the search worker, validation of its JSON, and
# shaping of the results.
#
# ARCHITECTURAL RULE:
#   Nothing in this package imports FastMCP or knows about MCP.  The tools/
#   layer wraps it; core/ can be exercised from a plain asyncio script.
# =============================================================================
