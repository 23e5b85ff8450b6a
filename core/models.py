# =============================================================================
# core/models.py  —  Data Models (the "nouns" of the system)
# =============================================================================
#
# These dataclasses define the shape of every piece of information that
# flows through a tool call:
#
#   ToolDescriptor  →  what the catalog advertises
#   ToolInvocation  →  one incoming call (name + raw arguments)
#   SearchResult / SearchResponse  →  the worker's JSON, after validation
#   ToolSuccess / ToolFailure  →  what a handler hands back
#   ToolResponse  →  the envelope every call ends up as
#
# Nothing here is kept between calls.  Every object is built for one
# invocation and dropped once the response has been written.
# =============================================================================

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Union


# -----------------------------------------------------------------------------
# ToolDescriptor — one entry of the tool catalog
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class ToolDescriptor:
    """A named tool with its JSON input schema."""

    name: str                          # "semantic_search"
    description: str                   # Read by the LLM to decide when to call
    input_schema: dict[str, Any]       # JSON Schema for the arguments

    def to_dict(self) -> dict[str, Any]:
        """MCP wire shape ({name, description, inputSchema})."""
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": json.loads(json.dumps(self.input_schema)),
        }


@dataclass
class ToolInvocation:
    """A single incoming tool call."""

    name: str
    arguments: dict[str, Any] = field(default_factory=dict)


# -----------------------------------------------------------------------------
# SearchResult / SearchResponse — the worker's /search payload
# -----------------------------------------------------------------------------
@dataclass
class SearchResult:
    """One hit returned by the vector search worker."""

    id: str
    score: float                       # Similarity, roughly 0..1 (not enforced)
    content: str
    category: Optional[str] = None

    def formatted_score(self) -> str:
        """Score as a fixed 4-decimal string, e.g. "0.8731"."""
        return f"{self.score:.4f}"


@dataclass
class SearchResponse:
    """Validated body of a POST /search response."""

    query: str
    results_count: int
    results: list[SearchResult] = field(default_factory=list)
    # The decoded result objects exactly as the worker sent them (extra
    # fields and original id types included).
    raw_results: list[dict[str, Any]] = field(default_factory=list)


# -----------------------------------------------------------------------------
# Handler results
# -----------------------------------------------------------------------------
# Handlers never raise to report a problem.  They return one of these two,
# and tools/adapter.py turns either into a ToolResponse in one place.
# -----------------------------------------------------------------------------
class ErrorKind(str, Enum):
    VALIDATION = "validation"
    UPSTREAM = "upstream"
    PARSE = "parse"
    UNKNOWN_TOOL = "unknown_tool"
    INTERNAL = "internal"


@dataclass
class ToolSuccess:
    payload: dict[str, Any]


@dataclass
class ToolFailure:
    kind: ErrorKind
    message: str


ToolOutcome = Union[ToolSuccess, ToolFailure]


# -----------------------------------------------------------------------------
# ToolResponse — the envelope
# -----------------------------------------------------------------------------
@dataclass
class TextContent:
    text: str
    type: str = "text"


@dataclass
class ToolResponse:
    """What every invocation returns, success or not."""

    content: list[TextContent]
    is_error: bool = False

    @property
    def text(self) -> str:
        return self.content[0].text if self.content else ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "content": [{"type": c.type, "text": c.text} for c in self.content],
            "isError": self.is_error,
        }
