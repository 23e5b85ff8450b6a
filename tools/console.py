# =============================================================================
# tools/console.py  —  Logging Setup & Colored Tool-Call Log Lines
# =============================================================================
#
# We log to STDERR because the MCP server talks to its client over STDOUT
# (stdin/stdout is the MCP transport).  Anything printed to stdout would
# corrupt the JSON-RPC stream.
#
# ANSI COLOR CODES:
#     - CYAN for incoming requests (tool name + parameters)
#     - GREEN for responses
#     - YELLOW for intermediate status messages
#     - RED for error envelopes
#   Set NO_COLOR to turn them off (e.g. when stderr goes to a log file).
# =============================================================================

import logging
import sys

from core.config import log_level, use_color
from core.models import ToolResponse

_CYAN = "\033[36m"     # Requests (tool calls with params)
_GREEN = "\033[32m"    # Responses
_YELLOW = "\033[33m"   # Status/progress messages
_RED = "\033[31m"      # Error envelopes
_RESET = "\033[0m"     # Reset to default terminal color

logger = logging.getLogger("vectorize_mcp")


def configure_logging() -> None:
    """Send all log records to stderr with the [MCP] prefix."""
    logging.basicConfig(
        level=log_level(),
        format="%(asctime)s [MCP] %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


def _paint(color: str, text: str) -> str:
    return f"{color}{text}{_RESET}" if use_color() else text


def log_request(tool_name: str, /, **params) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items())
    logger.info(_paint(_CYAN, f"{tool_name} called with: {param_str}"))


def log_status(message: str) -> None:
    """Log an intermediate status message in YELLOW."""
    logger.info(_paint(_YELLOW, f"  → {message}"))


def log_response(tool_name: str, response: ToolResponse) -> ToolResponse:
    """Log the envelope (GREEN, or RED for errors), then return it."""
    if response.is_error:
        logger.warning(_paint(_RED, f"  ← {tool_name} error: {response.text}"))
    else:
        logger.info(_paint(_GREEN, f"  ← {tool_name} response: {len(response.text)} chars"))
    return response
