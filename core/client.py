# =============================================================================
# core/client.py  —  The Gong HTTP Client
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Wraps ONE httpx.AsyncClient bound to the Gong base URL and the static
#   Basic-auth header.  Every tool shares this instance (and its connection
#   pool); nothing on it changes after startup.
#
# HOW A REQUEST FLOWS:
#   1. request() is handed a method, a path and optional query/body/files
#   2. httpx builds the request; the "request" event hook logs it to stderr
#      (method + URL, headers, body) before it goes on the wire
#   3. Non-2xx  → UpstreamError(status_code, parsed body)
#      No reply → TransportError(message)
#      2xx      → parsed JSON (or raw text if the body is not JSON)
#
# There is no retry, no backoff and no timeout override: whatever the httpx
# default does is what the caller gets.
# =============================================================================

import json
import logging
from typing import Any, Mapping, Optional

import httpx

from core.config import GatewayConfig
from core.errors import TransportError, UpstreamError

logger = logging.getLogger(__name__)

_MASKED_HEADERS = {"authorization"}


def _masked_headers(headers: httpx.Headers) -> dict:
    masked = {}
    for key, value in headers.items():
        if key.lower() in _MASKED_HEADERS:
            scheme = value.split(" ", 1)[0]
            value = f"{scheme} ****"
        masked[key] = value
    return masked


def _describe_body(request: httpx.Request) -> str:
    content_type = request.headers.get("Content-Type", "")
    if content_type.startswith("multipart/"):
        size = request.headers.get("Content-Length", "?")
        return f"<multipart form data, {size} bytes>"
    try:
        raw = request.content
    except httpx.RequestNotRead:
        return "<streamed body>"
    if not raw:
        return "None"
    try:
        return json.dumps(json.loads(raw), indent=2)
    except ValueError:
        return raw.decode("utf-8", errors="replace")


async def log_outgoing_request(request: httpx.Request) -> None:
    """httpx event hook: record every request before it is sent."""
    logger.info("Request: %s %s", request.method, request.url)
    logger.info("Headers: %s", json.dumps(_masked_headers(request.headers), indent=2))
    logger.info("Data: %s", _describe_body(request))


def _response_body(response: httpx.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


class GongClient:
    """Async client for the Gong REST API."""

    def __init__(
        self,
        config: GatewayConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        headers = {}
        authorization = config.authorization_header()
        if authorization:
            headers["Authorization"] = authorization

        self.base_url = config.base_url
        self._client = httpx.AsyncClient(
            base_url=config.base_url,
            headers=headers,
            transport=transport,
            event_hooks={"request": [log_outgoing_request]},
        )

    async def request(
        self,
        method: str,
        path: str,
        query: Optional[Mapping[str, Any]] = None,
        body: Any = None,
        files: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> Any:
        """Issue one request and return the decoded response body.

        Raises:
            UpstreamError: Gong answered with a non-2xx status.
            TransportError: the request never got an HTTP answer.
        """
        request_headers = dict(headers or {})
        extra: dict = {}
        if files is not None:
            # httpx generates "multipart/form-data; boundary=..." itself.
            extra["files"] = files
        else:
            request_headers.setdefault("Content-Type", "application/json")
            if body is not None:
                extra["json"] = body

        try:
            response = await self._client.request(
                method,
                path,
                params=dict(query) if query else None,
                headers=request_headers,
                **extra,
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            raise UpstreamError(
                f"Request failed with status code {status}",
                status_code=status,
                body=_response_body(exc.response),
            ) from exc
        except httpx.HTTPError as exc:
            raise TransportError(str(exc) or type(exc).__name__) from exc

        return _response_body(response)

    @property
    def is_closed(self) -> bool:
        return self._client.is_closed

    async def aclose(self) -> None:
        await self._client.aclose()
