# =============================================================================
# core/errors.py  —  Search Client Exceptions
# =============================================================================
#
# The HTTP client (core/search.py) raises these.  The tool handlers catch
# them at the call site and turn them into ToolFailure values, so none of
# them ever reaches the MCP transport.
# =============================================================================

from typing import Optional


class SearchError(Exception):
    """Base class for everything that can go wrong talking to the worker."""


class UpstreamError(SearchError):
    """The worker answered with a non-2xx status."""

    def __init__(self, status_code: int, reason_phrase: str, body: str):
        self.status_code = status_code
        self.reason_phrase = reason_phrase
        self.body = body
        super().__init__(f"Worker returned {status_code}: {body}")


class SearchTransportError(SearchError):
    """The request never got a response (DNS, connect, timeout...)."""


class ParseError(SearchError):
    """The worker's response body was not the JSON shape we expect."""

    def __init__(self, message: str, field: Optional[str] = None):
        self.field = field
        super().__init__(message)
