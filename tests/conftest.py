from __future__ import annotations

import json
from typing import Callable

import httpx
import pytest

from core.catalog import ALL_TOOLS
from core.client import GongClient
from core.config import GatewayConfig
from core.dispatch import ToolDispatcher

BASE_URL = "https://api.gong.test"


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it was asked to send."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.requests: list[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            request.read()
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)


def json_body(request: httpx.Request):
    if not request.content:
        return None
    return json.loads(request.content)


@pytest.fixture
def config() -> GatewayConfig:
    return GatewayConfig(access_key="key", access_key_secret="secret", base_url=BASE_URL)


@pytest.fixture
def anonymous_config() -> GatewayConfig:
    return GatewayConfig(base_url=BASE_URL)


@pytest.fixture
def make_transport() -> Callable[..., RecordingTransport]:
    def _make(status: int = 200, payload=None, handler=None) -> RecordingTransport:
        if handler is None:
            def handler(_request: httpx.Request) -> httpx.Response:
                return httpx.Response(status, json=payload if payload is not None else {})
        return RecordingTransport(handler)

    return _make


@pytest.fixture
def make_dispatcher(config: GatewayConfig):
    def _make(transport: RecordingTransport, cfg: GatewayConfig | None = None) -> ToolDispatcher:
        client = GongClient(cfg or config, transport=transport)
        return ToolDispatcher(client, ALL_TOOLS)

    return _make
