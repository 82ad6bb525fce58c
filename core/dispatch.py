# =============================================================================
# core/dispatch.py  —  The Generic Tool Dispatcher
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Owns the registry of ToolDefinitions and runs the one recipe every tool
#   shares:
#
#     validate  →  build RequestDescriptor  →  GongClient.request  →  envelope
#
# THE ERROR CONTRACT:
#   - Invalid arguments raise pydantic.ValidationError from invoke() BEFORE
#     anything is built or sent.  The MCP layer reports it as a tool error.
#   - Once arguments are valid, execute() never raises: upstream errors,
#     transport errors and local failures (e.g. an unreadable media file)
#     all come back as a ResultEnvelope whose text describes the error.
#
# Nothing here holds per-call state, so concurrent invocations on the same
# dispatcher cannot interfere with each other.
# =============================================================================

import asyncio
import json
import logging
from pathlib import Path
from typing import Any, Iterable, Mapping, Optional

from core.client import GongClient
from core.errors import DuplicateToolError, UnknownToolError, UpstreamError, format_error
from core.models import BodyStrategy, RequestDescriptor, ResultEnvelope, ToolDefinition
from core.schemas import GongModel

logger = logging.getLogger(__name__)


def build_request(definition: ToolDefinition, arguments: GongModel) -> RequestDescriptor:
    """Turn validated arguments into the request the tool describes."""
    values = arguments.to_wire()

    # Path parameters are substituted verbatim; httpx escapes the final URL.
    path = definition.path.format_map(values)
    query = {name: values[name] for name in definition.query if name in values}

    request = RequestDescriptor(method=definition.method, path=path, query=query)

    if definition.body is BodyStrategy.FIELDS:
        request.body = {name: values[name] for name in definition.body_fields if name in values}
    elif definition.body is BodyStrategy.ARGUMENTS:
        request.body = values
    elif definition.body is BodyStrategy.ARGUMENT:
        request.body = values.get(definition.body_argument)
    elif definition.body is BodyStrategy.MULTIPART:
        # Only the path is recorded here; execute() reads it off the event loop.
        request.files = {definition.file_field: Path(values[definition.file_field])}

    return request


def _read_files(files: Mapping[str, Path]) -> dict[str, tuple[str, bytes]]:
    return {field: (path.name, path.read_bytes()) for field, path in files.items()}


def render_response(data: Any) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False)


class ToolDispatcher:
    """Routes (tool name, arguments) pairs to the shared request recipe."""

    def __init__(
        self,
        client: GongClient,
        definitions: Iterable[ToolDefinition] = (),
    ) -> None:
        self._client = client
        self._tools: dict[str, ToolDefinition] = {}
        for definition in definitions:
            self.register(definition)

    def register(self, definition: ToolDefinition) -> None:
        if definition.name in self._tools:
            raise DuplicateToolError(f"Tool '{definition.name}' is already registered")
        self._tools[definition.name] = definition

    def get(self, name: str) -> ToolDefinition:
        try:
            return self._tools[name]
        except KeyError:
            raise UnknownToolError(f"Unknown tool: {name}") from None

    @property
    def definitions(self) -> list[ToolDefinition]:
        return list(self._tools.values())

    def __contains__(self, name: str) -> bool:
        return name in self._tools

    def __len__(self) -> int:
        return len(self._tools)

    async def invoke(
        self,
        name: str,
        arguments: Optional[Mapping[str, Any]] = None,
    ) -> ResultEnvelope:
        """Validate raw arguments for `name` and run the tool.

        Raises:
            UnknownToolError: no tool is registered under `name`.
            pydantic.ValidationError: the arguments do not match the schema.
        """
        definition = self.get(name)
        validated = definition.arguments.model_validate(dict(arguments or {}))
        return await self.execute(definition, validated)

    async def execute(self, definition: ToolDefinition, arguments: GongModel) -> ResultEnvelope:
        try:
            request = build_request(definition, arguments)
            if request.files:
                request.files = await asyncio.to_thread(_read_files, request.files)
            data = await self._client.request(
                request.method,
                request.path,
                query=request.query,
                body=request.body,
                files=request.files,
                headers=request.headers,
            )
        except Exception as exc:
            logger.error("Error calling Gong API for %s: %s", definition.name, exc)
            if isinstance(exc, UpstreamError):
                logger.error("Response status: %s", exc.status_code)
                logger.error("Response data: %s", json.dumps(exc.body, indent=2))
            return ResultEnvelope(format_error(exc), is_error=True)

        return ResultEnvelope(render_response(data))
