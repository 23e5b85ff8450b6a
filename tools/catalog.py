# =============================================================================
# tools/catalog.py  —  The Tool Catalog
# =============================================================================
#
# The fixed list of tools this server offers.  The descriptions are what the
# LLM reads to decide WHEN to call a tool, and the schemas tell it WHAT to
# pass, so field names and required markers must stay exactly as below.
#
# The catalog is a tuple of frozen dataclasses: listing it any number of
# times returns the same descriptors.
# =============================================================================

from core.config import INTELLIGENT_ANSWER_TOP_K, SEMANTIC_SEARCH_TOP_K
from core.models import ToolDescriptor

SEMANTIC_SEARCH = "semantic_search"
INTELLIGENT_ANSWER = "intelligent_answer"


TOOL_CATALOG: tuple[ToolDescriptor, ...] = (
    ToolDescriptor(
        name=SEMANTIC_SEARCH,
        description=(
            "Search the knowledge base using semantic similarity. This finds content "
            "based on meaning, not just keywords. Perfect for finding relevant "
            "information even when the exact words don't match."
        ),
        input_schema={
            "type": "object",
            "properties": {
                "query": {
                    "type": "string",
                    "description": "Natural language search query",
                },
                "topK": {
                    "type": "integer",
                    "description": "Number of results to return (1-10)",
                    "default": SEMANTIC_SEARCH_TOP_K[0],
                },
            },
            "required": ["query"],
        },
    ),
    ToolDescriptor(
        name=INTELLIGENT_ANSWER,
        description=(
            "Get an AI-synthesized answer to your question using semantic search. "
            "The server searches the knowledge base and returns the top results "
            "together with a ready-made prompt, so the calling assistant can write "
            "a natural, direct answer to your question."
        ),
        input_schema={
            "type": "object",
            "properties": {
                "question": {
                    "type": "string",
                    "description": "Your question",
                },
                "topK": {
                    "type": "integer",
                    "description": "Number of search results to use (1-5)",
                    "default": INTELLIGENT_ANSWER_TOP_K[0],
                },
            },
            "required": ["question"],
        },
    ),
)


def list_tools() -> tuple[ToolDescriptor, ...]:
    """Return the catalog as-is."""
    return TOOL_CATALOG


def get_tool(name: str) -> ToolDescriptor:
    """Look up one descriptor by name (KeyError if unknown)."""
    for descriptor in TOOL_CATALOG:
        if descriptor.name == name:
            return descriptor
    raise KeyError(name)
