# =============================================================================
# core/config.py  —  Constants & Environment Settings
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Collects the handful of fixed values the server runs with: the remote
#   search endpoint, the MCP server identity, and the per-tool topK limits.
#
# THE ENDPOINT IS FIXED:
#   WORKER_URL is a constant, not an environment setting.  The only values
#   read from the environment are logging knobs (see log_level/use_color).
#   main.py calls load_dotenv() before anything reads them, so a local .env
#   file works the same as exported variables.
# =============================================================================

import logging
import os

# --- Remote search endpoint ---
WORKER_URL = "https://vectorize-mcp-worker.fpl-test.workers.dev"
SEARCH_PATH = "/search"

# --- MCP server identity ---
SERVER_NAME = "vectorize-search-server"
SERVER_VERSION = "1.0.0"

# --- Tool limits ---
# (default, upper cap) for each tool's topK argument.
SEMANTIC_SEARCH_TOP_K = (5, 10)
INTELLIGENT_ANSWER_TOP_K = (3, 5)
TOP_K_FLOOR = 1


def log_level() -> int:
    """Logging level from VECTORIZE_MCP_LOG_LEVEL (default INFO)."""
    name = os.environ.get("VECTORIZE_MCP_LOG_LEVEL", "INFO").upper()
    level = logging.getLevelName(name)
    # getLevelName() returns "Level X" for unknown names
    return level if isinstance(level, int) else logging.INFO


def use_color() -> bool:
    """ANSI colours stay on unless NO_COLOR is set."""
    return "NO_COLOR" not in os.environ
