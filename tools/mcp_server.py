# =============================================================================
# tools/mcp_server.py  —  FastMCP Tool Server (every Gong endpoint as a tool)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Builds the FastMCP server and registers one tool per entry in
#   core/catalog.py.  Each tool is a thin wrapper: it hands the raw arguments
#   to the ToolDispatcher and converts the ResultEnvelope into MCP content.
#
# HOW IT WORKS (the flow):
#   1. The MCP client calls a tool by name (e.g., "getCallById")
#   2. FastMCP routes the call to the matching GongTool below
#   3. GongTool.run() → ToolDispatcher.invoke() → GongClient.request()
#   4. The client receives ONE text item: pretty JSON, or an error message
#
# TOOL ANNOTATIONS:
#   - GET    → readOnlyHint   (safe to call again)
#   - DELETE → destructiveHint (data-privacy erasure cannot be undone)
#
# RUNNING THIS SERVER:
#   a) python main.py              (loads .env, then serves over stdio)
#   b) python -m tools.mcp_server  (same, without the .env step)
# =============================================================================

import asyncio
import logging
import sys
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Optional

from fastmcp import FastMCP
from fastmcp.tools.tool import Tool, ToolResult
from mcp.types import TextContent, ToolAnnotations
from pydantic import Field

from core.catalog import ALL_TOOLS
from core.client import GongClient
from core.config import GatewayConfig, load_config
from core.dispatch import ToolDispatcher
from core.models import ToolDefinition

# =============================================================================
# Logging Setup
# =============================================================================
# We log to STDERR because the MCP server talks to its client over STDOUT.
# Anything printed to stdout would corrupt the MCP JSON stream.
#
# ANSI colours make tool calls easy to spot in the terminal:
#   CYAN for incoming tool calls, GREEN for results, YELLOW for error results.
#
# LOG_LEVEL sets the root level.  The per-request lines from core.client
# (method + URL, headers, body) are always emitted, so that logger stays at
# INFO whatever LOG_LEVEL says.
# =============================================================================

_CYAN = "\033[36m"
_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_RESET = "\033[0m"

logger = logging.getLogger("gong.mcp")


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        format="%(asctime)s [MCP] %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )
    logging.getLogger().setLevel(getattr(logging, level.upper(), logging.INFO))
    logging.getLogger("core.client").setLevel(logging.INFO)


def _log_request(tool_name: str, arguments: dict) -> None:
    """Log an incoming tool call with its arguments in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in arguments.items())
    logger.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_response(tool_name: str, text: str, is_error: bool) -> None:
    if is_error:
        logger.info(f"{_YELLOW}  ← {tool_name} error: {text.splitlines()[0]}{_RESET}")
    else:
        logger.info(f"{_GREEN}  ← {tool_name} response: {len(text)} chars{_RESET}")


# =============================================================================
# GongTool — one catalog entry as a FastMCP tool
# =============================================================================
# The input schema comes straight from the pydantic argument model, so MCP
# clients see the same camelCase field names Gong documents.
# =============================================================================
class GongTool(Tool):
    definition: Any = Field(exclude=True)
    dispatcher: Any = Field(exclude=True)

    @classmethod
    def from_definition(cls, definition: ToolDefinition, dispatcher: ToolDispatcher) -> "GongTool":
        return cls(
            name=definition.name,
            description=definition.description,
            parameters=definition.input_schema(),
            annotations=ToolAnnotations(
                readOnlyHint=definition.method == "GET",
                destructiveHint=definition.method == "DELETE",
            ),
            definition=definition,
            dispatcher=dispatcher,
        )

    async def run(self, arguments: dict[str, Any]) -> ToolResult:
        _log_request(self.name, arguments)
        envelope = await self.dispatcher.invoke(self.name, arguments)
        _log_response(self.name, envelope.text, envelope.is_error)
        return ToolResult(content=[TextContent(type="text", text=envelope.text)])


INSTRUCTIONS = (
    "This server provides access to the Gong API. All tools correspond to "
    "operations defined in the Gong OpenAPI specification. Paginated tools "
    "take an opaque `cursor` returned by the previous page; pass it back "
    "unchanged to fetch the next page."
)


def create_server(
    config: GatewayConfig,
    client: Optional[GongClient] = None,
    definitions=ALL_TOOLS,
) -> FastMCP:
    """Build the FastMCP server with one tool per catalog entry.

    A duplicate tool name raises DuplicateToolError here, before the server
    ever starts serving.  The server owns the GongClient and closes it when
    its lifespan ends, including one passed in by the caller.
    """
    if client is None:
        client = GongClient(config)
    dispatcher = ToolDispatcher(client, definitions)

    @asynccontextmanager
    async def lifespan(server: FastMCP) -> AsyncIterator[dict]:
        try:
            yield {}
        finally:
            await client.aclose()
            logger.info("Gong HTTP client closed")

    mcp = FastMCP("Gong API", instructions=INSTRUCTIONS, lifespan=lifespan)
    for definition in dispatcher.definitions:
        mcp.add_tool(GongTool.from_definition(definition, dispatcher))

    logger.info(
        "Registered %d Gong tools against %s", len(dispatcher), config.base_url
    )
    return mcp


async def serve(config: GatewayConfig) -> None:
    """Run the stdio server until the client disconnects."""
    await create_server(config).run_async()


def main() -> None:
    configure_logging()
    config = load_config()
    configure_logging(config.log_level)
    asyncio.run(serve(config))


# =============================================================================
# Server entry point
# =============================================================================
if __name__ == "__main__":
    main()
