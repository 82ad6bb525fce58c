# =============================================================================
# core/errors.py  —  Error Types and Error-to-Text Formatting
# =============================================================================
#
# THE TAXONOMY:
#   UpstreamError   — Gong answered with a non-2xx status (has status + body)
#   TransportError  — we never got an answer (DNS, refused, timeout, bad file)
#   DuplicateToolError / UnknownToolError — programmer errors in the registry
#
#   Argument validation errors are pydantic.ValidationError and are raised
#   before any of the above can happen.
#
# UpstreamError and TransportError never leave a tool handler: the dispatcher
# turns them into an error-shaped text result with format_error().
# =============================================================================

import json
from typing import Any, Optional


class GatewayError(Exception):
    """Base class for every error raised by the gateway itself."""


class UpstreamError(GatewayError):
    """The Gong API returned a non-2xx response."""

    def __init__(self, message: str, status_code: int, body: Any = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class TransportError(GatewayError):
    """The request could not be completed (no HTTP status available)."""


class DuplicateToolError(GatewayError):
    """Two tool definitions share a name."""


class UnknownToolError(GatewayError):
    """No tool is registered under the requested name."""


def format_error(exc: BaseException) -> str:
    """Render an error as the text payload of a result envelope."""
    message = str(exc) or type(exc).__name__
    text = f"Error calling Gong API: {message}"

    status: Optional[int] = getattr(exc, "status_code", None)
    if status is not None:
        details = json.dumps(getattr(exc, "body", None), indent=2)
        text += f"\nStatus: {status}\nDetails: {details}"
    return text
