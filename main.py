# =============================================================================
# main.py  —  Entry Point for the Gong MCP Gateway
# =============================================================================
#
# HOW TO RUN:
#   uv run python main.py
#
# WHAT HAPPENS:
#   1. Loads a local .env file (GONG_ACCESS_KEY, GONG_ACCESS_KEY_SECRET, ...)
#   2. Reads the gateway configuration (core/config.py)
#   3. Builds the FastMCP server with every Gong tool (tools/mcp_server.py)
#   4. Serves MCP over stdin/stdout until the client disconnects
#
# An MCP client (Claude Desktop, an ADK agent, ...) usually starts this
# script as a subprocess and talks to it through its stdio pipes.
# =============================================================================

from dotenv import load_dotenv

# Must happen BEFORE the config is read: load_config() only looks at
# os.environ.
load_dotenv()

from tools.mcp_server import main  # noqa: E402


if __name__ == "__main__":
    main()
