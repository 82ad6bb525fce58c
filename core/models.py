# =============================================================================
# core/models.py  —  Data Models (the "nouns" of the gateway)
# =============================================================================
#
# Three shapes flow through the system:
#
#   ToolDefinition     — one catalog entry: name, description, HTTP method,
#                        path template, which arguments go where, and the
#                        pydantic model that validates the arguments
#   RequestDescriptor  — one concrete outgoing request, built per call
#   ResultEnvelope     — what every tool call hands back: one text item
#
# Tool definitions are data, not code.  The generic dispatcher in
# core/dispatch.py reads them; nothing else needs to know about a tool.
# =============================================================================

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Type

from pydantic import BaseModel


class BodyStrategy(str, Enum):
    """How a tool turns its arguments into a request body."""

    NONE = "none"              # no body at all
    FIELDS = "fields"          # a fixed list of argument fields
    ARGUMENTS = "arguments"    # the whole argument object
    ARGUMENT = "argument"      # the value of a single argument
    MULTIPART = "multipart"    # one file field as multipart/form-data


# -----------------------------------------------------------------------------
# ToolDefinition — one row of the endpoint catalog
# -----------------------------------------------------------------------------
# `query` and `body_fields` hold wire (camelCase) names, the same names the
# caller uses in its argument object.  Path parameters are written in the
# template as {name} and substituted as-is.
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class ToolDefinition:
    """An immutable description of one Gong endpoint exposed as a tool."""

    name: str
    description: str
    method: str
    path: str
    arguments: Type[BaseModel]
    query: tuple[str, ...] = ()
    body: BodyStrategy = BodyStrategy.NONE
    body_fields: tuple[str, ...] = ()
    body_argument: Optional[str] = None
    file_field: Optional[str] = None

    def input_schema(self) -> dict[str, Any]:
        """JSON schema advertised to MCP clients."""
        return self.arguments.model_json_schema(by_alias=True)


@dataclass
class RequestDescriptor:
    """A resolved request for GongClient.request().

    For multipart uploads `files` maps the field name to a local Path until
    the dispatcher reads it.
    """

    method: str
    path: str
    query: dict[str, Any] = field(default_factory=dict)
    body: Any = None
    files: Optional[dict[str, Any]] = None
    headers: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class ResultEnvelope:
    """The single-item text result of a tool call.

    `is_error` is informational only: error envelopes are still successful
    results at the protocol level.
    """

    text: str
    is_error: bool = False

    @property
    def content(self) -> list[dict[str, str]]:
        return [{"type": "text", "text": self.text}]
