# =============================================================================
# core/search.py  —  Vector Search Worker Client
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Sends one POST /search to the remote worker and turns the JSON reply
#   into a typed SearchResponse.
#
# HOW IT WORKS:
#   1. Open an httpx.AsyncClient for the duration of the call
#   2. POST {"query": ..., "topK": ...} as JSON
#   3. Non-2xx status        → UpstreamError (status, reason, body)
#      Network failure       → SearchTransportError
#      Body not the expected → ParseError
#   4. Otherwise return SearchResponse
#
#   Every call gets its own client, so concurrent tool calls share nothing.
#   No retries and no timeout beyond httpx's default.
# =============================================================================

import logging
from typing import Any, Optional

import httpx

from core.config import SEARCH_PATH, WORKER_URL
from core.errors import ParseError, SearchTransportError, UpstreamError
from core.models import SearchResponse, SearchResult

logger = logging.getLogger(__name__)


class SearchClient:
    """Async client for the worker's /search endpoint.

    Args:
        base_url: Worker root URL.  Defaults to WORKER_URL.
        transport: Optional httpx transport, mostly for tests
            (httpx.MockTransport).
    """

    def __init__(
        self,
        base_url: str = WORKER_URL,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.transport = transport

    @property
    def search_url(self) -> str:
        return f"{self.base_url}{SEARCH_PATH}"

    async def search(self, query: str, top_k: int) -> SearchResponse:
        """POST the query and return the validated response.

        Raises:
            UpstreamError: the worker returned a non-2xx status.
            SearchTransportError: no response was received.
            ParseError: the body is not valid JSON of the expected shape.
        """
        logger.debug("POST %s topK=%d", self.search_url, top_k)

        async with httpx.AsyncClient(transport=self.transport) as client:
            try:
                response = await client.post(
                    self.search_url,
                    headers={"Content-Type": "application/json"},
                    json={"query": query, "topK": top_k},
                )
            except httpx.RequestError as e:
                raise SearchTransportError(f"Request to {self.search_url} failed: {e}") from e

        if not response.is_success:
            raise UpstreamError(response.status_code, response.reason_phrase, response.text)

        try:
            data = response.json()
        except ValueError as e:
            raise ParseError(f"Worker returned invalid JSON: {e}") from e

        return parse_search_response(data, query)


# =============================================================================
# Response validation
# =============================================================================
# The worker is an external service, so its JSON is checked field by field
# instead of being trusted.  Optional fields get defaults; required fields
# with the wrong type raise ParseError naming the field.
# =============================================================================
def parse_search_response(data: Any, query: str) -> SearchResponse:
    """Validate a /search body and build a SearchResponse.

    Args:
        data: Decoded JSON body.
        query: The query that was sent, used when the body omits it.
    """
    if not isinstance(data, dict):
        raise ParseError("Expected a JSON object from the worker")

    raw_results = data.get("results")
    if not isinstance(raw_results, list):
        raise ParseError("Field 'results' must be a list", field="results")

    results = [_parse_result(item, i) for i, item in enumerate(raw_results)]

    results_count = data.get("resultsCount", len(results))
    if isinstance(results_count, bool) or not isinstance(results_count, int):
        raise ParseError("Field 'resultsCount' must be an integer", field="resultsCount")

    echoed_query = data.get("query", query)
    if not isinstance(echoed_query, str):
        raise ParseError("Field 'query' must be a string", field="query")

    return SearchResponse(
        query=echoed_query,
        results_count=results_count,
        results=results,
        raw_results=raw_results,
    )


def _parse_result(item: Any, index: int) -> SearchResult:
    where = f"results[{index}]"
    if not isinstance(item, dict):
        raise ParseError(f"{where} must be an object", field=where)

    result_id = item.get("id")
    if isinstance(result_id, bool) or not isinstance(result_id, (str, int)):
        raise ParseError(f"{where}.id must be a string", field=f"{where}.id")

    score = item.get("score")
    if isinstance(score, bool) or not isinstance(score, (int, float)):
        raise ParseError(f"{where}.score must be a number", field=f"{where}.score")

    content = item.get("content")
    if not isinstance(content, str):
        raise ParseError(f"{where}.content must be a string", field=f"{where}.content")

    category = item.get("category")
    if category is not None and not isinstance(category, str):
        raise ParseError(f"{where}.category must be a string", field=f"{where}.category")

    return SearchResult(id=str(result_id), score=score, content=content, category=category)
