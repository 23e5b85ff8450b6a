# =============================================================================
# main.py  —  Entry Point for the Vectorize Search MCP Server
# =============================================================================
#
# HOW TO RUN:
#   uv run python main.py
#   (or the installed console script: vectorize-mcp)
#
# WHAT HAPPENS:
#   1. Loads .env (logging settings only; the worker URL is fixed)
#   2. Configures logging to stderr
#   3. Builds the SearchClient → ToolAdapter → FastMCP server chain
#   4. Serves MCP over stdio until the client disconnects or Ctrl-C
#
# EXIT CODES:
#   0  normal shutdown, including SIGINT / Ctrl-C
#   1  anything fatal while starting or running the transport
# =============================================================================

import logging
import sys

from dotenv import load_dotenv

# Load environment variables from .env before anything reads them.
load_dotenv()

from core.config import SERVER_NAME, SERVER_VERSION
from core.search import SearchClient
from tools.adapter import ToolAdapter
from tools.console import configure_logging
from tools.mcp_server import create_server

logger = logging.getLogger("vectorize_mcp")


def main() -> int:
    """Run the MCP server on stdio and return the process exit code."""
    configure_logging()

    try:
        adapter = ToolAdapter(SearchClient())
        server = create_server(adapter)
        logger.info("Vectorize MCP server running on stdio (%s %s)", SERVER_NAME, SERVER_VERSION)
        server.run(transport="stdio")
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down")
        return 0
    except Exception as e:
        logger.exception("Fatal error: %s", e)
        return 1

    return 0


# =============================================================================
# Script entry point
# =============================================================================
if __name__ == "__main__":
    sys.exit(main())
