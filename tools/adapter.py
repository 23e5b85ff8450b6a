# =============================================================================
# tools/adapter.py  —  ToolAdapter: list_tools() and invoke(name, args)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Maps a tool call onto the core/ functions and wraps whatever comes back
#   in a ToolResponse envelope.
#
# HOW IT WORKS (the flow):
#   1. invoke() looks up the handler for the tool name
#   2. The handler validates arguments (core/arguments.py)
#   3. It calls the worker (core/search.py)
#   4. It shapes the result (core/synthesis.py)
#   5. It returns ToolSuccess or ToolFailure, never raises for expected
#      problems
#   6. to_envelope() turns that into the ToolResponse
#
# EVERY CALL GETS EXACTLY ONE ToolResponse:
#   Validation errors, upstream errors, bad JSON, unknown tool names and
#   even unexpected exceptions all end up as {"error": ...} with
#   is_error=True.  Nothing propagates to the MCP transport.
# =============================================================================

import json
import logging
from collections.abc import Mapping
from typing import Any, Awaitable, Callable, Optional

from core.arguments import require_text, resolve_top_k
from core.config import INTELLIGENT_ANSWER_TOP_K, SEMANTIC_SEARCH_TOP_K
from core.errors import ParseError, SearchError, UpstreamError
from core.models import (
    ErrorKind,
    TextContent,
    ToolDescriptor,
    ToolFailure,
    ToolInvocation,
    ToolOutcome,
    ToolResponse,
    ToolSuccess,
)
from core.search import SearchClient
from core.synthesis import build_answer_payload, format_semantic_results
from tools.catalog import INTELLIGENT_ANSWER, SEMANTIC_SEARCH, list_tools
from tools.console import log_request, log_response, log_status

logger = logging.getLogger(__name__)

Handler = Callable[[Mapping[str, Any]], Awaitable[ToolOutcome]]


def to_envelope(outcome: ToolOutcome) -> ToolResponse:
    """Convert a handler result into the response envelope.

    Success payloads are pretty-printed with 2-space indentation; errors
    are a compact {"error": message} object.
    """
    if isinstance(outcome, ToolSuccess):
        text = json.dumps(outcome.payload, indent=2, ensure_ascii=False)
        return ToolResponse(content=[TextContent(text=text)])

    text = json.dumps({"error": outcome.message}, ensure_ascii=False)
    return ToolResponse(content=[TextContent(text=text)], is_error=True)


def _search_failure(error: SearchError) -> ToolFailure:
    kind = ErrorKind.PARSE if isinstance(error, ParseError) else ErrorKind.UPSTREAM
    return ToolFailure(kind, str(error))


class ToolAdapter:
    """Exposes the catalog and runs tool calls against the search worker."""

    def __init__(self, client: Optional[SearchClient] = None):
        self.client = client or SearchClient()
        self._handlers: dict[str, Handler] = {
            SEMANTIC_SEARCH: self.semantic_search,
            INTELLIGENT_ANSWER: self.intelligent_answer,
        }

    def list_tools(self) -> tuple[ToolDescriptor, ...]:
        return list_tools()

    async def invoke(self, name: str, arguments: Optional[Mapping[str, Any]] = None) -> ToolResponse:
        """Run one tool call and return its envelope."""
        if arguments is None:
            arguments = {}
        if not isinstance(arguments, Mapping):
            return log_response(name, to_envelope(
                ToolFailure(ErrorKind.VALIDATION, "Tool arguments must be an object")
            ))

        outcome: ToolOutcome
        try:
            invocation = ToolInvocation(name=name, arguments=dict(arguments))
            log_request(invocation.name, **invocation.arguments)

            handler = self._handlers.get(invocation.name)
            if handler is None:
                outcome = ToolFailure(ErrorKind.UNKNOWN_TOOL, f"Unknown tool: {invocation.name}")
            else:
                outcome = await handler(invocation.arguments)
        except Exception as e:
            logger.exception("Unhandled error in tool %s", name)
            outcome = ToolFailure(ErrorKind.INTERNAL, str(e) or "Unknown error")

        return log_response(name, to_envelope(outcome))

    # =========================================================================
    # TOOL: semantic_search
    # =========================================================================
    async def semantic_search(self, arguments: Mapping[str, Any]) -> ToolOutcome:
        query = require_text(arguments, "query", "Query parameter is required")
        if isinstance(query, ToolFailure):
            return query

        default, upper = SEMANTIC_SEARCH_TOP_K
        top_k = resolve_top_k(arguments.get("topK"), default, upper)
        if isinstance(top_k, ToolFailure):
            return top_k

        try:
            response = await self.client.search(query, top_k)
        except UpstreamError as e:
            # str(e) is "Worker returned <status>: <body>"
            return ToolFailure(ErrorKind.UPSTREAM, str(e))
        except SearchError as e:
            return _search_failure(e)

        log_status(f"Got {len(response.results)} results (topK={top_k})")
        return ToolSuccess(format_semantic_results(response))

    # =========================================================================
    # TOOL: intelligent_answer
    # =========================================================================
    # Same search as above; the difference is the payload.  It carries a
    # synthesis prompt for the calling agent instead of an answer.
    # =========================================================================
    async def intelligent_answer(self, arguments: Mapping[str, Any]) -> ToolOutcome:
        question = require_text(arguments, "question", "Question parameter is required")
        if isinstance(question, ToolFailure):
            return question

        default, upper = INTELLIGENT_ANSWER_TOP_K
        top_k = resolve_top_k(arguments.get("topK"), default, upper)
        if isinstance(top_k, ToolFailure):
            return top_k

        try:
            response = await self.client.search(question, top_k)
        except UpstreamError as e:
            return ToolFailure(ErrorKind.UPSTREAM, f"Search failed: {e.reason_phrase}")
        except SearchError as e:
            return _search_failure(e)

        log_status(f"Built synthesis prompt from {len(response.results)} results")
        return ToolSuccess(build_answer_payload(question, response))
