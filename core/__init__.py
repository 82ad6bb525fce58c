# =============================================================================
# core/__init__.py
# =============================================================================
# Everything the gateway knows about Gong lives here: configuration, the HTTP
# client, argument schemas, the endpoint catalog and the generic dispatcher.
#
# Nothing in this package imports FastMCP.  The dispatcher can be driven
# directly (the tests do exactly that); tools/ only adapts it to MCP.
# =============================================================================
