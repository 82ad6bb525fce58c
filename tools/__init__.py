# =============================================================================
# tools/__init__.py
# =============================================================================
# The MCP layer.  tools/mcp_server.py turns every ToolDefinition from
# core/catalog.py into a FastMCP tool and runs the stdio server.
#
# WHAT TOOLS DO NOT DO:
#   - They do NOT build requests (core/dispatch.py does)
#   - They do NOT talk HTTP (core/client.py does)
# =============================================================================
